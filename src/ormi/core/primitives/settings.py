# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math
from datetime import timedelta
from typing import Dict

from pydantic import Field, model_validator

from .enums import HealthFactorEnum
from .model import Model
from .types import FloatBetween0And1, PositiveInt, Score


class HealthWeights(Model):
    """
    Relative weight of each factor in the composite health score.

    Weights must sum to 1.0 so that the composite stays on the same 0-100
    scale as the individual sub-scores.
    """

    occupancy: FloatBetween0And1 = 0.25
    maintenance: FloatBetween0And1 = 0.20
    age: FloatBetween0And1 = 0.15
    amenities: FloatBetween0And1 = 0.15
    financial: FloatBetween0And1 = 0.10
    inspection: FloatBetween0And1 = 0.10
    market: FloatBetween0And1 = 0.05

    @model_validator(mode="after")
    def check_weights_sum_to_one(self) -> "HealthWeights":
        """Ensure the weights describe a proper weighted average."""
        total = sum(self.as_dict().values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Health weights must sum to 1.0 (got {total:.4f})")
        return self

    def as_dict(self) -> Dict[HealthFactorEnum, float]:
        return {factor: getattr(self, factor.value) for factor in HealthFactorEnum}


class SignalDefaults(Model):
    """
    Placeholder values for signals that have no real data source yet.

    Used by the default signal provider, and by the payment-based provider
    when a property has nothing billed.
    """

    collection_rate: Score = Field(
        default=85.0, description="Share of billed rent collected, in percent."
    )
    inspection_status: Score = Field(
        default=80.0, description="Latest inspection outcome on a 0-100 scale."
    )
    market_position: Score = Field(
        default=75.0, description="Competitive standing in the local market, 0-100."
    )


class HealthSettings(Model):
    """Settings for health score calculation and refresh behavior."""

    weights: HealthWeights = Field(default_factory=HealthWeights)
    signal_defaults: SignalDefaults = Field(default_factory=SignalDefaults)
    unknown_age_score: Score = Field(
        default=80.0,
        description="Age sub-score used when the year built is not recorded.",
    )
    staleness_window_hours: PositiveInt = Field(
        default=24,
        description="Stored scores older than this are recalculated on read.",
    )

    @property
    def staleness_window(self) -> timedelta:
        return timedelta(hours=self.staleness_window_hours)


class ReportingSettings(Model):
    """Settings related to report generation and display."""

    decimal_precision: PositiveInt = Field(
        default=1, description="Number of decimal places for sub-scores in reports."
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global settings

    Groups configuration by functional area. Services accept either the
    full settings object or only the section they need.
    """

    health: HealthSettings = Field(default_factory=HealthSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
