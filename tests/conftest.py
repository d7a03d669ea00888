# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Ormi testing.

Factories build property graphs from plain counts so tests can state
"10 units, 9 occupied, 2 requests" without spelling out every record.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Sequence

import pytest

from ormi.core.base import (
    MaintenanceRequestRecord,
    PaymentRecord,
    PropertyRecord,
    UnitRecord,
)
from ormi.core.primitives import (
    MaintenancePriorityEnum,
    UnitStatusEnum,
)
from ormi.health import (
    InMemoryPropertyRepository,
    PropertyAggregate,
    PropertyHealthService,
)

# Fixed "now" for every time-dependent test
NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
TODAY = NOW.date()
CURRENT_YEAR = TODAY.year


# Record Utilities
def create_units(
    occupied: int, vacant: int = 0, payments: Sequence[PaymentRecord] = ()
) -> List[UnitRecord]:
    """
    Create units with the given status mix.

    Any payments are attached to the first unit.

    Example:
        >>> units = create_units(occupied=2, vacant=1)
        >>> [u.status.value for u in units]
        ['OCCUPIED', 'OCCUPIED', 'VACANT']
    """
    units = [
        UnitRecord(id=f"unit-{i}", unit_number=str(100 + i), status=UnitStatusEnum.OCCUPIED)
        for i in range(occupied)
    ]
    units += [
        UnitRecord(
            id=f"unit-{occupied + i}",
            unit_number=str(100 + occupied + i),
            status=UnitStatusEnum.VACANT,
        )
        for i in range(vacant)
    ]
    if payments and units:
        units[0] = units[0].model_copy(update={"payments": list(payments)})
    return units


def create_requests(total: int, urgent: int = 0) -> List[MaintenanceRequestRecord]:
    """Create maintenance requests, the first `urgent` of them URGENT."""
    return [
        MaintenanceRequestRecord(
            id=f"req-{i}",
            priority=(
                MaintenancePriorityEnum.URGENT
                if i < urgent
                else MaintenancePriorityEnum.MEDIUM
            ),
        )
        for i in range(total)
    ]


def create_property(
    property_id: str = "prop-1",
    occupied: int = 9,
    vacant: int = 1,
    requests: int = 2,
    urgent: int = 0,
    year_built: Optional[int] = CURRENT_YEAR - 3,
    amenities: int = 3,
    payments: Sequence[PaymentRecord] = (),
    **kwargs,
) -> PropertyRecord:
    """
    Create a property graph from counts.

    Defaults reproduce the reference scenario: 10 units with 9 occupied,
    2 non-urgent requests, 3 years old, 3 amenities (scores 90 with the
    default signals).
    """
    return PropertyRecord(
        id=property_id,
        name=kwargs.pop("name", f"Property {property_id}"),
        year_built=year_built,
        amenities=[f"amenity-{i}" for i in range(amenities)],
        units=create_units(occupied, vacant, payments),
        maintenance_requests=create_requests(requests, urgent),
        **kwargs,
    )


def reference_aggregate(**overrides) -> PropertyAggregate:
    """The reference scenario as an aggregate, with optional overrides."""
    fields = dict(
        unit_count=10,
        occupied_unit_count=9,
        maintenance_request_count=2,
        urgent_maintenance_request_count=0,
        year_built=CURRENT_YEAR - 3,
        amenity_count=3,
        collection_rate=85.0,
        inspection_status=80.0,
        market_position=75.0,
    )
    fields.update(overrides)
    return PropertyAggregate(**fields)


# Pytest Fixtures
@pytest.fixture
def clock():
    """Clock pinned to NOW."""
    return lambda: NOW


@pytest.fixture
def sample_property():
    return create_property()


@pytest.fixture
def repository(sample_property):
    """Repository holding a healthy property and a struggling one."""
    struggling = create_property(
        "prop-2",
        occupied=3,
        vacant=7,
        requests=40,
        urgent=6,
        year_built=CURRENT_YEAR - 80,
        amenities=0,
    )
    return InMemoryPropertyRepository([sample_property, struggling])


@pytest.fixture
def service(repository, clock):
    return PropertyHealthService(repository, clock=clock)


__all__ = [
    "NOW",
    "TODAY",
    "CURRENT_YEAR",
    "create_units",
    "create_requests",
    "create_property",
    "reference_aggregate",
]
