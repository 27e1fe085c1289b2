# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Pending rent calculator.

Builds a month-by-month pending-rent report for a tenant: which billing
months still carry a balance, which of them are overdue, how much advance
money offsets the total, the estimated late penalty and the recommended
collection step.

The report is always bucketed in one-month steps from the check-in day,
independent of the property's rent cycle type; cycle-aware coverage lives
in ``rentcycle.billing.gaps``.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from dateutil.relativedelta import relativedelta

from ..core.exceptions import InvalidInputError
from ..core.ledger import LedgerAggregator, PaymentRow, TenantAccount
from ..core.primitives import (
    LedgerTypeEnum,
    PeriodStatusEnum,
    RecommendedActionEnum,
    ReconciliationSettings,
    midmonth_cycles,
    parse_date,
    parse_optional_date,
    validate_date_ordering,
    validate_non_negative,
)
from .results import (
    BillingPeriod,
    PendingRentFilter,
    PendingRentReport,
    TenantPendingSummary,
)

logger = logging.getLogger(__name__)


def _money(value: float) -> float:
    return round(value, 2)


def _check_ledger(rows: Iterable[PaymentRow], ledger: LedgerTypeEnum) -> Tuple[PaymentRow, ...]:
    rows = tuple(rows)
    for row in rows:
        if row.ledger != ledger:
            raise InvalidInputError(
                f"Expected {ledger.value} rows, got a {row.ledger.value} row"
            )
    return rows


def resolve_as_of(as_of: Any = None) -> date:
    """Parse an explicit as-of date, or default to today."""
    if as_of is None:
        return date.today()
    return parse_date(as_of, "as_of")


class PendingRentCalculator:
    """
    Calculates pending, partial and overdue rent for tenants.

    Stateless apart from its immutable settings; construct once and share.

    Args:
        settings: Grace period, penalty rate and overlap policy

    Example:
        ```python
        calc = PendingRentCalculator()
        report = calc.calculate_for_account(account, as_of=date(2025, 4, 15))
        if report.recommended_action == RecommendedActionEnum.NOTICE:
            ...
        ```
    """

    def __init__(self, settings: Optional[ReconciliationSettings] = None):
        self.settings = settings or ReconciliationSettings()

    def calculate(
        self,
        check_in_date: Any,
        rent_amount: Any,
        rent_payments: Iterable[PaymentRow] = (),
        advance_payments: Iterable[PaymentRow] = (),
        as_of: Any = None,
        check_out_date: Any = None,
    ) -> PendingRentReport:
        """
        Calculate the pending-rent report for one tenant.

        Args:
            check_in_date: Move-in date
            rent_amount: Current rent per month (non-negative)
            rent_payments: RENT ledger rows
            advance_payments: ADVANCE ledger rows
            as_of: Reporting date (defaults to today)
            check_out_date: Move-out date; caps the reporting date

        Returns:
            PendingRentReport

        Raises:
            InvalidInputError: On malformed dates, a negative rent, rows from the
                wrong ledger or a check-out before check-in
        """
        check_in = parse_date(check_in_date, "check_in_date")
        check_out = parse_optional_date(check_out_date, "check_out_date")
        validate_date_ordering(check_in, check_out, "check_in_date", "check_out_date")
        try:
            rent = float(rent_amount)
        except (TypeError, ValueError):
            raise InvalidInputError(f"rent_amount must be a number, got {rent_amount!r}") from None
        if not math.isfinite(rent):
            raise InvalidInputError(f"rent_amount must be finite, got {rent_amount!r}")
        validate_non_negative(rent, "rent_amount")

        as_of_date = resolve_as_of(as_of)
        if check_out is not None and check_out < as_of_date:
            as_of_date = check_out

        rent_rows = _check_ledger(rent_payments, LedgerTypeEnum.RENT)
        advance_rows = _check_ledger(advance_payments, LedgerTypeEnum.ADVANCE)
        ledger = LedgerAggregator(
            rent_rows + advance_rows, self.settings.overlap_attribution
        )

        pending_periods = self._pending_periods(check_in, as_of_date, rent, ledger)

        total_pending = _money(sum(p.balance for p in pending_periods))
        total_partial = _money(
            sum(p.balance for p in pending_periods if p.status == PeriodStatusEnum.PARTIALLY_PAID)
        )
        overdue = [p for p in pending_periods if p.status == PeriodStatusEnum.OVERDUE]
        total_overdue = _money(sum(p.balance for p in overdue))

        total_advance_paid = _money(ledger.total_advance_paid)
        advance_balance = _money(max(0.0, total_advance_paid - total_pending))

        next_due_date, next_due_amount = self._next_due(pending_periods, as_of_date, rent)
        penalty = self._penalty(pending_periods)
        history = ledger.payment_history()
        action, reason = self.recommend(
            total_pending=total_pending,
            total_overdue=total_overdue,
            pending_months=len(pending_periods),
            overdue_months=len(overdue),
        )

        logger.debug(
            f"Pending rent as of {as_of_date}: {len(pending_periods)} month(s), "
            f"{total_pending:,.2f} pending, {len(overdue)} overdue -> {action.value}"
        )

        return PendingRentReport(
            as_of_date=as_of_date,
            total_pending_amount=total_pending,
            total_partial_amount=total_partial,
            total_overdue_amount=total_overdue,
            total_pending_months=len(pending_periods),
            total_overdue_months=len(overdue),
            pending_periods=tuple(pending_periods),
            total_advance_paid=total_advance_paid,
            advance_balance=advance_balance,
            next_due_date=next_due_date,
            next_due_amount=next_due_amount,
            grace_period_days=self.settings.grace_period_days,
            penalty_amount=penalty,
            last_payment_date=history.last_payment_date,
            last_payment_amount=_money(history.last_payment_amount),
            total_payments_made=history.total_payments_made,
            average_payment_amount=_money(history.average_payment_amount),
            recommended_action=action,
            recommendation_reason=reason,
        )

    def calculate_for_account(
        self, account: TenantAccount, as_of: Any = None
    ) -> PendingRentReport:
        """Pending-rent report for a TenantAccount snapshot."""
        tenant = account.tenant
        return self.calculate(
            check_in_date=tenant.check_in_date,
            rent_amount=tenant.rent_amount,
            rent_payments=account.rent_payments,
            advance_payments=account.advance_payments,
            as_of=as_of,
            check_out_date=tenant.check_out_date,
        )

    def _pending_periods(
        self, check_in: date, as_of: date, rent: float, ledger: LedgerAggregator
    ) -> List[BillingPeriod]:
        """
        One-month buckets from check-in to ``as_of`` that carry a balance.

        Buckets start on the check-in day and run one month each, the next one
        starting the day after the previous ends; the last is cut off at
        ``as_of``. Every bucket expects the full rent.
        """
        grace = self.settings.grace_period_days
        periods = []
        for month in midmonth_cycles(check_in):
            if month.start > as_of:
                break
            start = month.start
            end = min(month.end, as_of)

            paid = ledger.paid_amount(start, end)
            balance = _money(max(0.0, rent - paid))
            if balance <= 0:
                continue

            status = (
                PeriodStatusEnum.FULLY_PENDING
                if paid == 0
                else PeriodStatusEnum.PARTIALLY_PAID
            )
            days_pending = max(0, (as_of - end).days)
            is_overdue = days_pending > grace
            if is_overdue:
                status = PeriodStatusEnum.OVERDUE

            periods.append(
                BillingPeriod(
                    month_key=month.start.strftime("%Y-%m"),
                    month_name=month.start.strftime("%B %Y"),
                    start=start,
                    end=end,
                    expected_amount=_money(rent),
                    paid_amount=_money(paid),
                    balance=balance,
                    status=status,
                    days_pending=days_pending,
                    is_overdue=is_overdue,
                    payments=ledger.overlapping(start, end),
                )
            )
        return periods

    @staticmethod
    def _next_due(
        pending_periods: Sequence[BillingPeriod], as_of: date, rent: float
    ) -> Tuple[date, float]:
        """Earliest pending period's end and balance, else one month ahead at current rent."""
        if pending_periods:
            earliest = min(pending_periods, key=lambda p: p.start)
            return earliest.end, earliest.balance
        return as_of + relativedelta(months=1), _money(rent)

    def _penalty(self, pending_periods: Sequence[BillingPeriod]) -> float:
        """``balance * rate * ceil(days_pending / penalty_period_days)`` over overdue periods."""
        rate = self.settings.penalty_rate
        period_days = self.settings.penalty_period_days
        total = 0.0
        for period in pending_periods:
            if period.is_overdue:
                total += period.balance * rate * math.ceil(period.days_pending / period_days)
        return _money(total)

    @staticmethod
    def recommend(
        total_pending: float,
        total_overdue: float,
        pending_months: int,
        overdue_months: int,
    ) -> Tuple[RecommendedActionEnum, str]:
        """
        Collection step for the given totals, in priority order:
        nothing pending, more than two overdue months, any overdue month,
        several pending months, a single pending month.
        """
        if total_pending == 0:
            return RecommendedActionEnum.NO_ACTION, "All payments are up to date"

        if overdue_months > 2:
            return (
                RecommendedActionEnum.EVICTION_WARNING,
                f"{overdue_months} months overdue with {total_overdue:,.2f} pending",
            )

        if overdue_months > 0:
            return (
                RecommendedActionEnum.NOTICE,
                f"{overdue_months} month(s) overdue, immediate payment required",
            )

        if pending_months > 1:
            return (
                RecommendedActionEnum.URGENT_FOLLOW_UP,
                f"{pending_months} months pending, total {total_pending:,.2f}",
            )

        return (
            RecommendedActionEnum.FOLLOW_UP,
            f"{total_pending:,.2f} pending for current month",
        )

    def summarize(
        self, accounts: Iterable[TenantAccount], as_of: Any = None
    ) -> List[TenantPendingSummary]:
        """
        Pending-rent report for each account, with quick-access fields.

        The as-of date is resolved once so every tenant is measured against
        the same day.
        """
        as_of_date = resolve_as_of(as_of)
        summaries = [
            TenantPendingSummary(
                tenant_id=account.tenant_id,
                report=self.calculate_for_account(account, as_of_date),
            )
            for account in accounts
        ]
        logger.debug(f"Summarized pending rent for {len(summaries)} tenant(s)")
        return summaries

    def filter_accounts(
        self,
        accounts: Iterable[TenantAccount],
        criteria: PendingRentFilter,
        as_of: Any = None,
    ) -> List[TenantPendingSummary]:
        """Bulk summaries of the accounts whose report satisfies every set criterion."""
        return [
            summary
            for summary in self.summarize(accounts, as_of)
            if criteria.matches(summary.report)
        ]
