# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Next payment date suggestions."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.ledger import AccountBook, LedgerAggregator, TenantAccount, TenantId
from ..core.primitives import ReconciliationSettings, format_date
from .calculator import RentCycleCalculator, coerce_cycle_type
from .gaps import PaymentGapDetector
from .results import NextPaymentSuggestion

logger = logging.getLogger(__name__)


class NextPaymentDateAdvisor:
    """
    Suggests the date range of a tenant's next rent payment.

    Purely advisory: reads the snapshot, never changes it.

    Decision order:
        1. No active rent payment yet: start on the check-in date (no end).
        2. ``skip_gaps=True``: the cycle right after the latest coverage end.
        3. Otherwise the highest-priority gap (move-in gap first, then by
           priority and start date), or the cycle after the latest coverage
           end when there are no gaps.
    """

    def __init__(
        self,
        calculator: Optional[RentCycleCalculator] = None,
        gap_detector: Optional[PaymentGapDetector] = None,
        settings: Optional[ReconciliationSettings] = None,
    ):
        self.settings = settings or ReconciliationSettings()
        self.calculator = calculator or RentCycleCalculator()
        self.gap_detector = gap_detector or PaymentGapDetector(
            calculator=self.calculator, settings=self.settings
        )

    def suggest(
        self,
        book: AccountBook,
        tenant_id: TenantId,
        cycle_type: Optional[Any] = None,
        skip_gaps: bool = False,
        as_of: Any = None,
    ) -> NextPaymentSuggestion:
        """
        Resolve ``tenant_id`` and suggest its next payment dates.

        Raises:
            NotFoundError: If the tenant is not in the book
        """
        return self.suggest_for_account(
            book.account(tenant_id), cycle_type, skip_gaps=skip_gaps, as_of=as_of
        )

    def suggest_for_account(
        self,
        account: TenantAccount,
        cycle_type: Optional[Any] = None,
        skip_gaps: bool = False,
        as_of: Any = None,
    ) -> NextPaymentSuggestion:
        """Suggest next payment dates for a tenant snapshot."""
        cycle = coerce_cycle_type(cycle_type or self.settings.default_cycle_type)
        ledger = LedgerAggregator(account.payments, self.settings.overlap_attribution)
        latest_end = ledger.latest_period_end()

        if latest_end is None:
            check_in = account.tenant.check_in_date
            logger.debug(f"Tenant {account.tenant_id}: first payment from {check_in}")
            return NextPaymentSuggestion(
                suggested_start_date=check_in,
                cycle_type=cycle,
                message="First payment - use check-in date",
            )

        if not skip_gaps:
            report = self.gap_detector.detect(account, cycle, as_of=as_of)
            if report.has_gaps:
                gap = min(report.gaps, key=lambda g: (g.priority, g.start))
                logger.debug(f"Tenant {account.tenant_id}: suggesting gap fill {gap.gap_id}")
                return NextPaymentSuggestion(
                    suggested_start_date=gap.start,
                    suggested_end_date=gap.end,
                    is_gap_fill=True,
                    gap=gap,
                    cycle_type=cycle,
                    message=(
                        f"Gap detected from {format_date(gap.start)} to "
                        f"{format_date(gap.end)}. Please fill this gap first."
                    ),
                )

        period = self.calculator.next_period(latest_end, cycle)
        message = f"Next payment cycle - {cycle.value} cycle"
        if skip_gaps:
            message = f"Next payment cycle (skipping gaps) - {cycle.value} cycle"
        return NextPaymentSuggestion(
            suggested_start_date=period.start,
            suggested_end_date=period.end,
            cycle_type=cycle,
            message=message,
        )
