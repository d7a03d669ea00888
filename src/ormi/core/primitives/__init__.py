# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Ormi Core Primitives

Building blocks shared by every Ormi module: the immutable base model,
constrained types, domain enums and settings.
"""

from .enums import (
    HealthFactorEnum,
    HealthGradeEnum,
    HealthStatusEnum,
    HealthTriggerEnum,
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    PaymentStatusEnum,
    UnitStatusEnum,
)
from .model import Model
from .settings import (
    GlobalSettings,
    HealthSettings,
    HealthWeights,
    ReportingSettings,
    SignalDefaults,
)
from .types import (
    FiniteFloat,
    FloatBetween0And1,
    PositiveFloat,
    PositiveInt,
    Score,
)

__all__ = [
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
    # Types
    "FiniteFloat",
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
    "Score",
]
