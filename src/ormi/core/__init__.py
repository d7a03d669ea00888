# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi Core Framework

Foundational building blocks: property records, primitives and settings.
"""

from . import base, primitives

# Explicit imports from base module
from .base import (
    MaintenanceRequestRecord,
    PaymentRecord,
    PropertyRecord,
    UnitRecord,
)

# Explicit imports from primitives module
from .primitives import (
    # Enums
    HealthFactorEnum,
    HealthGradeEnum,
    HealthStatusEnum,
    HealthTriggerEnum,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    # Core models
    Model,
    PaymentStatusEnum,
    # Settings
    GlobalSettings,
    HealthSettings,
    HealthWeights,
    ReportingSettings,
    SignalDefaults,
    UnitStatusEnum,
)

__all__ = [
    # Records
    "MaintenanceRequestRecord",
    "PaymentRecord",
    "PropertyRecord",
    "UnitRecord",

    # Core models
    "Model",

    # Settings
    "GlobalSettings",
    "HealthSettings",
    "HealthWeights",
    "ReportingSettings",
    "SignalDefaults",

    # Enums
    "HealthFactorEnum",
    "HealthGradeEnum",
    "HealthStatusEnum",
    "HealthTriggerEnum",
    "MaintenancePriorityEnum",
    "MaintenanceStatusEnum",
    "PaymentStatusEnum",
    "UnitStatusEnum",
]
