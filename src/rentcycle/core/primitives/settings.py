# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .enums import OverlapAttributionEnum, RentCycleTypeEnum
from .model import Model
from .types import FloatBetween0And1, PositiveInt, PositiveIntGt0

GRACE_PERIOD_DAYS = 5
PENALTY_RATE = 0.02
PENALTY_PERIOD_DAYS = 30
MAX_CYCLE_ITERATIONS = 100
OVERLAP_ATTRIBUTION = OverlapAttributionEnum.FULL_AMOUNT


class ReconciliationSettings(Model):
    """
    Configuration for pending-rent, gap and penalty calculations.

    One instance is built per deployment and handed to each service; the
    services keep no other state.

    Usage Examples:
        # Defaults: 5-day grace, 2% per 30 days overdue, 100-cycle walk cap
        settings = ReconciliationSettings()

        # Stricter collection policy
        settings = ReconciliationSettings(grace_period_days=2, penalty_rate=0.05)
    """

    grace_period_days: PositiveInt = Field(
        default=GRACE_PERIOD_DAYS,
        description="Days after a period ends before an unpaid balance is overdue.",
    )
    penalty_rate: FloatBetween0And1 = Field(
        default=PENALTY_RATE,
        description="Penalty charged per started penalty period on an overdue balance.",
    )
    penalty_period_days: PositiveIntGt0 = Field(
        default=PENALTY_PERIOD_DAYS,
        description="Length in days of one penalty period (ceil(days_pending / n)).",
    )
    max_cycle_iterations: PositiveIntGt0 = Field(
        default=MAX_CYCLE_ITERATIONS,
        description=(
            "Maximum number of closed billing cycles a gap walk may examine. "
            "Exceeding it raises RunawayComputationError."
        ),
    )
    default_cycle_type: RentCycleTypeEnum = Field(
        default=RentCycleTypeEnum.CALENDAR,
        description="Cycle type used when a caller does not supply one.",
    )
    overlap_attribution: OverlapAttributionEnum = Field(
        default=OVERLAP_ATTRIBUTION,
        description="How multi-period payments are attributed to overlapping periods.",
    )
