# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class UnitStatusEnum(str, Enum):
    """Leasing status of a single unit."""

    OCCUPIED = "OCCUPIED"
    VACANT = "VACANT"
    MAINTENANCE = "MAINTENANCE"  # Offline for repairs, counts as unoccupied
    RESERVED = "RESERVED"


class MaintenancePriorityEnum(str, Enum):
    """Priority assigned to a maintenance request."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class MaintenanceStatusEnum(str, Enum):
    """Lifecycle state of a maintenance request."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class PaymentStatusEnum(str, Enum):
    """
    Settlement state of a rent payment.

    PAID, PENDING and FAILED payments are all amounts that were billed;
    REFUNDED payments are excluded from collection figures entirely.
    """

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class HealthFactorEnum(str, Enum):
    """
    The seven factors that make up a property health score.

    Values double as the breakdown keys exposed to API clients.
    """

    OCCUPANCY = "occupancy"
    MAINTENANCE = "maintenance"
    AGE = "age"
    AMENITIES = "amenities"
    FINANCIAL = "financial"
    INSPECTION = "inspection"
    MARKET = "market"


class HealthGradeEnum(str, Enum):
    """Letter grade for a health score."""

    A = "A"  # 90-100
    B = "B"  # 80-89
    C = "C"  # 70-79
    D = "D"  # 60-69
    F = "F"  # below 60


class HealthStatusEnum(str, Enum):
    """Human-readable status label for a health score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"


class HealthTriggerEnum(str, Enum):
    """Data changes that invalidate a stored health score."""

    UNIT_STATUS = "unit_status"
    MAINTENANCE_REQUEST = "maintenance_request"
    PROPERTY_DETAILS = "property_details"
    FINANCIAL_DATA = "financial_data"
