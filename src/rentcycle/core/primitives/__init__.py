# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentcycle Core Primitives

Building blocks shared by every calculation: immutable base model, enums,
settings, date parsing and billing-period date math.
"""

from .enums import (
    SETTLED_STATUSES,
    VOID_STATUSES,
    LedgerTypeEnum,
    OverlapAttributionEnum,
    PaymentStatusEnum,
    PeriodStatusEnum,
    RecommendedActionEnum,
    RentCycleTypeEnum,
)
from .model import Model
from .periods import (
    MIDMONTH_OVERFLOW_POLICY,
    PeriodValidation,
    RentPeriod,
    calendar_period,
    days_in_period,
    midmonth_cycles,
    midmonth_period,
    next_period,
    period_for,
    validate_period,
)
from .settings import (
    GRACE_PERIOD_DAYS,
    MAX_CYCLE_ITERATIONS,
    OVERLAP_ATTRIBUTION,
    PENALTY_PERIOD_DAYS,
    PENALTY_RATE,
    ReconciliationSettings,
)
from .types import Amount, FloatBetween0And1, PositiveInt, PositiveIntGt0
from .validation import (
    format_date,
    parse_date,
    parse_optional_date,
    validate_date_ordering,
    validate_non_negative,
)

__all__ = [
    # Core models
    "Model",
    "RentPeriod",
    "PeriodValidation",
    # Settings
    "ReconciliationSettings",
    "GRACE_PERIOD_DAYS",
    "PENALTY_RATE",
    "PENALTY_PERIOD_DAYS",
    "MAX_CYCLE_ITERATIONS",
    "OVERLAP_ATTRIBUTION",
    # Enums
    "RentCycleTypeEnum",
    "PaymentStatusEnum",
    "LedgerTypeEnum",
    "PeriodStatusEnum",
    "RecommendedActionEnum",
    "OverlapAttributionEnum",
    "SETTLED_STATUSES",
    "VOID_STATUSES",
    # Period math
    "MIDMONTH_OVERFLOW_POLICY",
    "calendar_period",
    "midmonth_period",
    "midmonth_cycles",
    "period_for",
    "next_period",
    "validate_period",
    "days_in_period",
    # Types
    "Amount",
    "PositiveInt",
    "PositiveIntGt0",
    "FloatBetween0And1",
    # Validation
    "parse_date",
    "parse_optional_date",
    "format_date",
    "validate_date_ordering",
    "validate_non_negative",
]
