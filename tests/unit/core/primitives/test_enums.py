# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from ormi.core.primitives import (
    HealthFactorEnum,
    HealthGradeEnum,
    HealthStatusEnum,
    UnitStatusEnum,
)


def test_factor_values_are_breakdown_keys():
    assert [f.value for f in HealthFactorEnum] == [
        "occupancy",
        "maintenance",
        "age",
        "amenities",
        "financial",
        "inspection",
        "market",
    ]


def test_grades_in_descending_order():
    assert [g.value for g in HealthGradeEnum] == ["A", "B", "C", "D", "F"]


def test_status_labels():
    assert [s.value for s in HealthStatusEnum] == [
        "Excellent",
        "Good",
        "Fair",
        "Poor",
        "Critical",
    ]


def test_enums_compare_to_stored_strings():
    assert UnitStatusEnum("OCCUPIED") is UnitStatusEnum.OCCUPIED
    assert UnitStatusEnum.OCCUPIED == "OCCUPIED"
