# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..primitives.enums import (
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    PaymentStatusEnum,
    UnitStatusEnum,
)
from ..primitives.model import Model
from ..primitives.types import PositiveFloat, PositiveInt


class PaymentRecord(Model):
    """A rent payment billed against a unit"""

    id: str
    amount: PositiveFloat
    status: PaymentStatusEnum = PaymentStatusEnum.PENDING


class MaintenanceRequestRecord(Model):
    """A maintenance request raised against a property"""

    id: str
    title: Optional[str] = None
    priority: MaintenancePriorityEnum = MaintenancePriorityEnum.MEDIUM
    status: MaintenanceStatusEnum = MaintenanceStatusEnum.OPEN
    unit_id: Optional[str] = None

    @property
    def is_urgent(self) -> bool:
        return self.priority == MaintenancePriorityEnum.URGENT


class UnitRecord(Model):
    """A single rentable unit and its payment history"""

    id: str
    unit_number: str
    status: UnitStatusEnum = UnitStatusEnum.VACANT
    monthly_rent: Optional[PositiveFloat] = None
    payments: List[PaymentRecord] = Field(default_factory=list)

    @property
    def is_occupied(self) -> bool:
        return self.status == UnitStatusEnum.OCCUPIED


class PropertyRecord(Model):
    """
    A property as loaded by the data-access layer.

    Carries the full graph the health score is derived from, plus the
    last persisted score and when it was calculated.
    """

    # Identity
    id: str
    name: str
    year_built: Optional[PositiveInt] = None

    # Features and relations
    amenities: List[str] = Field(default_factory=list)
    units: List[UnitRecord] = Field(default_factory=list)
    maintenance_requests: List[MaintenanceRequestRecord] = Field(default_factory=list)

    # Persisted health
    property_health: Optional[PositiveInt] = None
    last_health_calculation: Optional[datetime] = None

    @property
    def payments(self) -> List[PaymentRecord]:
        """All payments across every unit of the property."""
        return [payment for unit in self.units for payment in unit.payments]
