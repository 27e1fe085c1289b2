# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Result models returned by the billing services.

Flat, frozen records that exist only as return values and serialize with
``model_dump(mode="json")`` for transport.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

from pydantic import computed_field

from ..core.ledger import PaymentRow, TenantId
from ..core.primitives import (
    Amount,
    Model,
    PeriodStatusEnum,
    PositiveInt,
    RecommendedActionEnum,
    RentCycleTypeEnum,
)


class YearlyPeriod(Model):
    """One of the twelve periods of a reporting year (``month`` is 1-12)."""

    start: date
    end: date
    month: int


class BillingPeriod(Model):
    """
    One monthly bucket of a pending-rent report.

    Buckets run one month from the check-in day; the last one stops at the
    report date.

    Attributes:
        month_key: ``YYYY-MM`` of the bucket start
        month_name: e.g. ``November 2025``
        start: First day billed in the bucket
        end: Last day billed in the bucket
        expected_amount: Rent due for the bucket
        paid_amount: Settled payments overlapping the bucket
        balance: ``max(0, expected_amount - paid_amount)``
        status: FULLY_PENDING, PARTIALLY_PAID or OVERDUE
        days_pending: Days elapsed since ``end``
        is_overdue: ``days_pending`` beyond the grace period
        payments: Rent rows (any status) overlapping the bucket
    """

    month_key: str
    month_name: str
    start: date
    end: date
    expected_amount: float
    paid_amount: float
    balance: float
    status: PeriodStatusEnum
    days_pending: int
    is_overdue: bool
    payments: Tuple[PaymentRow, ...] = ()


class PendingRentReport(Model):
    """Pending, partial and overdue rent of one tenant as of a date."""

    as_of_date: date

    # Summary
    total_pending_amount: float
    total_partial_amount: float
    total_overdue_amount: float
    total_pending_months: int
    total_overdue_months: int

    # Monthly breakdown
    pending_periods: Tuple[BillingPeriod, ...]

    # Advance payment info
    total_advance_paid: float
    advance_balance: float

    # Next due information
    next_due_date: date
    next_due_amount: float

    # Grace period and penalties
    grace_period_days: int
    penalty_amount: float

    # Payment history summary
    last_payment_date: Optional[date]
    last_payment_amount: float
    total_payments_made: int
    average_payment_amount: float

    # Recommendation
    recommended_action: RecommendedActionEnum
    recommendation_reason: str

    @computed_field
    @property
    def has_any_pending(self) -> bool:
        return self.total_pending_amount > 0

    @computed_field
    @property
    def has_partial_payments(self) -> bool:
        return self.total_partial_amount > 0

    @computed_field
    @property
    def has_overdue_payments(self) -> bool:
        return self.total_overdue_amount > 0

    @computed_field
    @property
    def has_advance_payment(self) -> bool:
        return self.total_advance_paid > 0


class Gap(Model):
    """
    A billing cycle with no PAID/PARTIAL rent payment on record.

    ``priority`` ranks urgency (lower is more urgent): the move-in cycle is
    always -1, later gaps take their running gap index.
    """

    gap_id: str
    start: date
    end: date
    days_missing: int
    priority: int
    is_checkin_gap: bool


class GapReport(Model):
    """Gaps found by a forward cycle walk, in walk order."""

    cycle_type: RentCycleTypeEnum
    gaps: Tuple[Gap, ...] = ()
    tenant_id: Optional[TenantId] = None

    @computed_field
    @property
    def has_gaps(self) -> bool:
        return len(self.gaps) > 0

    @computed_field
    @property
    def gap_count(self) -> int:
        return len(self.gaps)

    @property
    def message(self) -> str:
        if self.gaps:
            return f"Found {len(self.gaps)} gap(s) in rent periods"
        return "No gaps found"


class NextPaymentSuggestion(Model):
    """Advisory date range for a tenant's next rent payment."""

    suggested_start_date: date
    suggested_end_date: Optional[date] = None
    is_gap_fill: bool = False
    gap: Optional[Gap] = None
    cycle_type: RentCycleTypeEnum
    message: str


class PendingRentFilter(Model):
    """
    Criteria for selecting tenants by pending rent. Unset criteria match all.

    Attributes:
        min_pending_amount: Keep tenants owing at least this much
        max_pending_months: Keep tenants with at most this many pending months
        include_overdue: Keep only tenants whose overdue flag equals this value
        include_partial: Keep only tenants whose partial flag equals this value
    """

    min_pending_amount: Optional[Amount] = None
    max_pending_months: Optional[PositiveInt] = None
    include_overdue: Optional[bool] = None
    include_partial: Optional[bool] = None

    def matches(self, report: PendingRentReport) -> bool:
        if (
            self.min_pending_amount is not None
            and report.total_pending_amount < self.min_pending_amount
        ):
            return False
        if (
            self.max_pending_months is not None
            and report.total_pending_months > self.max_pending_months
        ):
            return False
        if (
            self.include_overdue is not None
            and report.has_overdue_payments != self.include_overdue
        ):
            return False
        if (
            self.include_partial is not None
            and report.has_partial_payments != self.include_partial
        ):
            return False
        return True


class TenantPendingSummary(Model):
    """Bulk-summary row: a tenant's report plus quick-access fields."""

    tenant_id: Optional[TenantId]
    report: PendingRentReport

    @computed_field
    @property
    def total_pending_amount(self) -> float:
        return self.report.total_pending_amount

    @computed_field
    @property
    def pending_months_count(self) -> int:
        return self.report.total_pending_months

    @computed_field
    @property
    def is_overdue(self) -> bool:
        return self.report.has_overdue_payments

    @computed_field
    @property
    def recommended_action(self) -> RecommendedActionEnum:
        return self.report.recommended_action
