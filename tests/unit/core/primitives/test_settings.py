# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rentcycle.core.primitives import (
    GRACE_PERIOD_DAYS,
    MAX_CYCLE_ITERATIONS,
    PENALTY_RATE,
    OverlapAttributionEnum,
    ReconciliationSettings,
    RentCycleTypeEnum,
)


def test_settings_default_instantiation():
    """Defaults mirror the module constants."""
    settings = ReconciliationSettings()
    assert settings.grace_period_days == GRACE_PERIOD_DAYS == 5
    assert settings.penalty_rate == PENALTY_RATE == 0.02
    assert settings.penalty_period_days == 30
    assert settings.max_cycle_iterations == MAX_CYCLE_ITERATIONS == 100
    assert settings.default_cycle_type == RentCycleTypeEnum.CALENDAR
    assert settings.overlap_attribution == OverlapAttributionEnum.FULL_AMOUNT


def test_settings_custom_instantiation():
    settings = ReconciliationSettings(
        grace_period_days=2, penalty_rate=0.05, default_cycle_type="MIDMONTH"
    )
    assert settings.grace_period_days == 2
    assert settings.penalty_rate == 0.05
    assert settings.default_cycle_type == RentCycleTypeEnum.MIDMONTH


@pytest.mark.parametrize(
    "overrides",
    [
        {"grace_period_days": -1},
        {"penalty_rate": 1.5},
        {"penalty_period_days": 0},
        {"max_cycle_iterations": 0},
        {"unknown_field": True},
    ],
)
def test_settings_validation_failure(overrides):
    with pytest.raises(ValidationError):
        ReconciliationSettings(**overrides)


def test_settings_are_immutable():
    settings = ReconciliationSettings()
    with pytest.raises(ValidationError):
        settings.grace_period_days = 10
