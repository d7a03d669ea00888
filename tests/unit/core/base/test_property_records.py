# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ormi.core.base import (
    MaintenanceRequestRecord,
    PaymentRecord,
    PropertyRecord,
    UnitRecord,
)
from ormi.core.primitives import (
    MaintenancePriorityEnum,
    MaintenanceStatusEnum,
    PaymentStatusEnum,
    UnitStatusEnum,
)


def test_property_minimal_fields():
    record = PropertyRecord(id="p1", name="Maple Court")

    assert record.year_built is None
    assert record.amenities == []
    assert record.units == []
    assert record.maintenance_requests == []
    assert record.property_health is None
    assert record.last_health_calculation is None


def test_record_defaults():
    unit = UnitRecord(id="u1", unit_number="101")
    request = MaintenanceRequestRecord(id="r1")
    payment = PaymentRecord(id="pay1", amount=1200.0)

    assert unit.status == UnitStatusEnum.VACANT
    assert not unit.is_occupied
    assert request.priority == MaintenancePriorityEnum.MEDIUM
    assert request.status == MaintenanceStatusEnum.OPEN
    assert not request.is_urgent
    assert payment.status == PaymentStatusEnum.PENDING


def test_status_parsed_from_stored_strings():
    unit = UnitRecord(id="u1", unit_number="101", status="OCCUPIED")
    request = MaintenanceRequestRecord(id="r1", priority="URGENT")

    assert unit.is_occupied
    assert request.is_urgent


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        UnitRecord(id="u1", unit_number="101", status="DEMOLISHED")


def test_payments_flattened_across_units():
    record = PropertyRecord(
        id="p1",
        name="Maple Court",
        units=[
            UnitRecord(
                id="u1",
                unit_number="101",
                payments=[PaymentRecord(id="a", amount=100.0)],
            ),
            UnitRecord(
                id="u2",
                unit_number="102",
                payments=[
                    PaymentRecord(id="b", amount=200.0),
                    PaymentRecord(id="c", amount=300.0),
                ],
            ),
        ],
    )

    assert [p.id for p in record.payments] == ["a", "b", "c"]


def test_negative_year_built_rejected():
    with pytest.raises(ValidationError):
        PropertyRecord(id="p1", name="Maple Court", year_built=-5)
