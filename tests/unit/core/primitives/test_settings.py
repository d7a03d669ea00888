# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import timedelta

import pytest
from pydantic import ValidationError

from ormi.core.primitives import (
    GlobalSettings,
    HealthFactorEnum,
    HealthSettings,
    HealthWeights,
    ReportingSettings,
    SignalDefaults,
)


def test_global_settings_default_instantiation():
    """Test that GlobalSettings can be instantiated with default values."""
    settings = GlobalSettings()
    assert isinstance(settings.health, HealthSettings)
    assert isinstance(settings.reporting, ReportingSettings)
    assert settings.health.unknown_age_score == 80
    assert settings.reporting.decimal_precision == 1


def test_global_settings_custom_instantiation():
    """Test that nested sections accept plain dictionaries."""
    settings = GlobalSettings(
        health={"staleness_window_hours": 6},
        reporting={"decimal_precision": 0},
    )
    assert settings.health.staleness_window == timedelta(hours=6)
    assert settings.reporting.decimal_precision == 0


def test_default_weights():
    weights = HealthWeights().as_dict()
    assert weights == {
        HealthFactorEnum.OCCUPANCY: 0.25,
        HealthFactorEnum.MAINTENANCE: 0.20,
        HealthFactorEnum.AGE: 0.15,
        HealthFactorEnum.AMENITIES: 0.15,
        HealthFactorEnum.FINANCIAL: 0.10,
        HealthFactorEnum.INSPECTION: 0.10,
        HealthFactorEnum.MARKET: 0.05,
    }
    assert sum(weights.values()) == pytest.approx(1.0)


def test_weights_must_sum_to_one():
    """Test the validator on HealthWeights for unbalanced configurations."""
    with pytest.raises(ValidationError, match="must sum to 1.0"):
        HealthWeights(occupancy=0.5)


def test_rebalanced_weights_accepted():
    weights = HealthWeights(occupancy=0.30, market=0.0)
    assert weights.occupancy == 0.30


def test_weight_out_of_range_rejected():
    with pytest.raises(ValidationError):
        HealthWeights(occupancy=1.5, maintenance=-0.5)


def test_signal_defaults():
    defaults = SignalDefaults()
    assert defaults.collection_rate == 85
    assert defaults.inspection_status == 80
    assert defaults.market_position == 75


def test_signal_defaults_bounded():
    with pytest.raises(ValidationError):
        SignalDefaults(collection_rate=120.0)


def test_default_staleness_window():
    assert HealthSettings().staleness_window == timedelta(hours=24)


def test_staleness_window_field_validation():
    with pytest.raises(ValidationError):
        HealthSettings(staleness_window_hours=-1)
    with pytest.raises(ValidationError):
        HealthSettings(staleness_window_hours=1.5)  # Fails PositiveInt (strict=True)
