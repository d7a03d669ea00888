# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Property Health Scoring

Maps a property aggregate onto a 0-100 health score:

    score = round(sum(weight[f] * sub_score[f] for f in factors))

Each of the seven sub-scores comes from a monotonic step table with a floor
of 30 on its open-ended tail. The composite is rounded half-up and then
graded (A-F) and labelled (Excellent-Critical) with two independent
threshold tables that currently share the same cut points.

Everything here is pure: no I/O, no shared state. The only ambient input is
the reference date used to turn a construction year into an age, and it can
be pinned with `as_of`.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional

from ..core.primitives.enums import HealthGradeEnum, HealthStatusEnum
from ..core.primitives.settings import HealthSettings
from .aggregate import PropertyAggregate
from .results import HealthBreakdown, HealthFactors, HealthScoreResult

logger = logging.getLogger(__name__)

SCORE_FLOOR = 30.0
SCORE_CEILING = 100.0

# (minimum occupancy %, score)
OCCUPANCY_STEPS = (
    (95, 100),
    (90, 95),
    (85, 90),
    (80, 85),
    (75, 80),
    (70, 75),
    (65, 70),
    (60, 65),
    (50, 60),
)

# (maximum urgent requests, maximum total requests, score)
MAINTENANCE_STEPS = (
    (0, 2, 95),
    (0, 5, 90),
    (0, 10, 85),
    (1, 15, 80),
    (2, 20, 75),
    (3, 25, 70),
    (5, 30, 65),
)

# (maximum age in years, score)
AGE_STEPS = (
    (5, 100),
    (10, 95),
    (15, 90),
    (20, 85),
    (25, 80),
    (30, 75),
    (40, 70),
    (50, 65),
)

# Score for 0..4 amenities; beyond that +2 per amenity up to the ceiling
AMENITY_STEPS = (50, 60, 70, 80, 90)

GRADE_THRESHOLDS = (
    (90, HealthGradeEnum.A),
    (80, HealthGradeEnum.B),
    (70, HealthGradeEnum.C),
    (60, HealthGradeEnum.D),
)

STATUS_THRESHOLDS = (
    (90, HealthStatusEnum.EXCELLENT),
    (80, HealthStatusEnum.GOOD),
    (70, HealthStatusEnum.FAIR),
    (60, HealthStatusEnum.POOR),
)


def _clamp(value: float, low: float = SCORE_FLOOR, high: float = SCORE_CEILING) -> float:
    return max(low, min(high, value))


def occupancy_score(occupancy_rate: float) -> float:
    """Score occupancy; below 50% the raw rate is used, floored at 30."""
    for minimum, score in OCCUPANCY_STEPS:
        if occupancy_rate >= minimum:
            return float(score)
    return float(max(SCORE_FLOOR, occupancy_rate))


def maintenance_score(total_requests: int, urgent_requests: int) -> float:
    """
    Score the maintenance backlog.

    No requests at all is a perfect score regardless of the urgent count.
    Otherwise the first row whose urgent and total limits both hold wins;
    past the table, each urgent request costs 10 points and each request 2.
    """
    if total_requests == 0:
        return SCORE_CEILING
    for max_urgent, max_total, score in MAINTENANCE_STEPS:
        if urgent_requests <= max_urgent and total_requests <= max_total:
            return float(score)
    return float(max(SCORE_FLOOR, 100 - urgent_requests * 10 - total_requests * 2))


def age_score(property_age: Optional[int], unknown_score: float = 80.0) -> float:
    """Score building age in years; None means the year built is unknown."""
    if property_age is None:
        return unknown_score
    for max_age, score in AGE_STEPS:
        if property_age <= max_age:
            return float(score)
    return max(SCORE_FLOOR, 100 - property_age * 1.5)


def amenities_score(amenity_count: int) -> float:
    if amenity_count < len(AMENITY_STEPS):
        return float(AMENITY_STEPS[amenity_count])
    return float(min(SCORE_CEILING, 90 + (amenity_count - 4) * 2))


def financial_score(collection_rate: float) -> float:
    return _clamp(collection_rate)


def inspection_score(inspection_status: float) -> float:
    return _clamp(inspection_status)


def market_score(market_position: float) -> float:
    return _clamp(market_position)


def grade_for(score: float) -> HealthGradeEnum:
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return HealthGradeEnum.F


def status_for(score: float) -> HealthStatusEnum:
    for minimum, status in STATUS_THRESHOLDS:
        if score >= minimum:
            return status
    return HealthStatusEnum.CRITICAL


def property_age(year_built: Optional[int], as_of: Optional[date] = None) -> Optional[int]:
    """
    Age in whole years at the reference date.

    Returns None when the year built is unknown. A year built after the
    reference year is treated as brand new (age 0).
    """
    if year_built is None:
        return None
    reference_year = (as_of or date.today()).year
    return max(0, reference_year - year_built)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_breakdown(
    aggregate: PropertyAggregate,
    settings: Optional[HealthSettings] = None,
    as_of: Optional[date] = None,
) -> HealthBreakdown:
    """Compute all seven sub-scores for an aggregate."""
    settings = settings or HealthSettings()
    return HealthBreakdown(
        occupancy=occupancy_score(aggregate.occupancy_rate),
        maintenance=maintenance_score(
            aggregate.maintenance_request_count,
            aggregate.urgent_maintenance_request_count,
        ),
        age=age_score(
            property_age(aggregate.year_built, as_of), settings.unknown_age_score
        ),
        amenities=amenities_score(aggregate.amenity_count),
        financial=financial_score(aggregate.collection_rate),
        inspection=inspection_score(aggregate.inspection_status),
        market=market_score(aggregate.market_position),
    )


def compute_health(
    aggregate: PropertyAggregate,
    settings: Optional[HealthSettings] = None,
    as_of: Optional[date] = None,
) -> HealthScoreResult:
    """
    Compute the health score, grade, status and breakdown for a property.

    Args:
        aggregate: Counts and signals describing the property
        settings: Weights and unknown-age score (defaults when omitted)
        as_of: Reference date for the age factor (today when omitted)

    Returns:
        HealthScoreResult

    Example:
        ```python
        result = compute_health(
            PropertyAggregate(
                unit_count=10,
                occupied_unit_count=9,
                maintenance_request_count=2,
                year_built=2022,
                amenity_count=3,
            ),
            as_of=date(2025, 6, 1),
        )
        # result.score == 90, result.grade == HealthGradeEnum.A
        ```
    """
    settings = settings or HealthSettings()
    as_of = as_of or date.today()

    breakdown = compute_breakdown(aggregate, settings, as_of)
    weights = settings.weights.as_dict()
    composite = sum(weights[factor] * breakdown[factor] for factor in weights)
    score = int(_clamp(round_half_up(composite), 0, 100))

    logger.debug(
        f"Health composite {composite:.2f} -> {score}: {breakdown.as_dict()}"
    )

    return HealthScoreResult(
        score=score,
        grade=grade_for(score),
        status=status_for(score),
        breakdown=breakdown,
        factors=HealthFactors(
            occupancy_rate=aggregate.occupancy_rate,
            maintenance_requests=aggregate.maintenance_request_count,
            urgent_maintenance_requests=aggregate.urgent_maintenance_request_count,
            property_age=property_age(aggregate.year_built, as_of),
            amenities_count=aggregate.amenity_count,
            financial_performance=aggregate.collection_rate,
            inspection_status=aggregate.inspection_status,
            market_position=aggregate.market_position,
        ),
        composite=composite,
    )
