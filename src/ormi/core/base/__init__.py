# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .property import (
    MaintenanceRequestRecord,
    PaymentRecord,
    PropertyRecord,
    UnitRecord,
)

__all__ = [
    "MaintenanceRequestRecord",
    "PaymentRecord",
    "PropertyRecord",
    "UnitRecord",
]
