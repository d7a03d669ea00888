# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Optional

from ..core.primitives.enums import (
    HealthFactorEnum,
    HealthGradeEnum,
    HealthStatusEnum,
)
from ..core.primitives.model import Model
from ..core.primitives.types import PositiveInt, Score


class HealthFactors(Model):
    """Raw factor values a health score was computed from."""

    occupancy_rate: float
    maintenance_requests: PositiveInt
    urgent_maintenance_requests: PositiveInt
    property_age: Optional[PositiveInt]  # None when year built is unknown
    amenities_count: PositiveInt
    financial_performance: float
    inspection_status: float
    market_position: float


class HealthBreakdown(Model):
    """Per-factor sub-scores, each on a 0-100 scale before weighting."""

    occupancy: Score
    maintenance: Score
    age: Score
    amenities: Score
    financial: Score
    inspection: Score
    market: Score

    def __getitem__(self, factor: HealthFactorEnum) -> float:
        return getattr(self, HealthFactorEnum(factor).value)

    def as_dict(self) -> Dict[str, float]:
        """Factor name to sub-score, in factor order."""
        return {factor.value: getattr(self, factor.value) for factor in HealthFactorEnum}


class HealthScoreResult(Model):
    """
    Outcome of a health score calculation.

    Attributes:
        score: Rounded composite, 0-100
        grade: Letter grade for the score
        status: Status label for the score
        breakdown: Sub-score for every factor
        factors: Raw inputs the sub-scores were derived from
        composite: Weighted sum before rounding
    """

    score: PositiveInt
    grade: HealthGradeEnum
    status: HealthStatusEnum
    breakdown: HealthBreakdown
    factors: HealthFactors
    composite: float
