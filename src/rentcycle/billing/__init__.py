# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentcycle Billing Services

Stateless services over a tenant snapshot:

- RentCycleCalculator: calendar/midmonth period math, yearly periods
- PendingRentCalculator: monthly pending-rent report, bulk summary and filter
- PaymentGapDetector: cycle-aware detection of uncovered billing cycles
- NextPaymentDateAdvisor: suggested date range for the next payment
"""

from .advisor import NextPaymentDateAdvisor
from .calculator import RentCycleCalculator, coerce_cycle_type
from .gaps import CHECKIN_GAP_PRIORITY, PaymentGapDetector
from .pending import PendingRentCalculator
from .results import (
    BillingPeriod,
    Gap,
    GapReport,
    NextPaymentSuggestion,
    PendingRentFilter,
    PendingRentReport,
    TenantPendingSummary,
    YearlyPeriod,
)

__all__ = [
    # Services
    "RentCycleCalculator",
    "PendingRentCalculator",
    "PaymentGapDetector",
    "NextPaymentDateAdvisor",
    "coerce_cycle_type",
    "CHECKIN_GAP_PRIORITY",
    # Results
    "BillingPeriod",
    "Gap",
    "GapReport",
    "NextPaymentSuggestion",
    "PendingRentFilter",
    "PendingRentReport",
    "TenantPendingSummary",
    "YearlyPeriod",
]
