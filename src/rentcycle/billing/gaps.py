# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Payment gap detection.

Walks a tenant's billing cycles forward from move-in and flags every cycle
with no PAID/PARTIAL rent payment overlapping it. Unlike the pending-rent
report, the walk follows the property's cycle type.

Walk bounds:
    The horizon is the later of the as-of date (capped at check-out) and the
    latest coverage end on the ledger. Cycles are examined while they start
    on or before the horizon; a cycle still running at the horizon
    (``end > horizon``) is not yet due and ends the walk.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional

from ..core.exceptions import RunawayComputationError
from ..core.ledger import AccountBook, LedgerAggregator, TenantAccount, TenantId
from ..core.primitives import (
    ReconciliationSettings,
    RentCycleTypeEnum,
    days_in_period,
    format_date,
)
from .calculator import RentCycleCalculator, coerce_cycle_type
from .pending import resolve_as_of
from .results import Gap, GapReport

logger = logging.getLogger(__name__)

CHECKIN_GAP_PRIORITY = -1


class PaymentGapDetector:
    """
    Finds billing cycles not covered by a settled rent payment.

    Args:
        calculator: Cycle generator (a fresh RentCycleCalculator by default)
        settings: Iteration cap, default cycle type and overlap policy

    Example:
        ```python
        detector = PaymentGapDetector()
        report = detector.detect(account, RentCycleTypeEnum.MIDMONTH, as_of=date(2025, 4, 15))
        for gap in report.gaps:
            print(gap.start, gap.end, gap.priority)
        ```
    """

    def __init__(
        self,
        calculator: Optional[RentCycleCalculator] = None,
        settings: Optional[ReconciliationSettings] = None,
    ):
        self.calculator = calculator or RentCycleCalculator()
        self.settings = settings or ReconciliationSettings()

    def detect(
        self,
        account: TenantAccount,
        cycle_type: Optional[Any] = None,
        as_of: Any = None,
    ) -> GapReport:
        """
        Detect gaps for one tenant snapshot.

        Args:
            account: Tenant snapshot and payment rows
            cycle_type: CALENDAR or MIDMONTH (settings default when None)
            as_of: Walk reference date (defaults to today)

        Returns:
            GapReport with gaps in walk order

        Raises:
            RunawayComputationError: If more than ``max_cycle_iterations`` closed
                cycles lie between check-in and the horizon
        """
        cycle = coerce_cycle_type(cycle_type or self.settings.default_cycle_type)
        tenant = account.tenant
        check_in = tenant.check_in_date
        as_of_date = tenant.effective_as_of(resolve_as_of(as_of))

        ledger = LedgerAggregator(account.payments, self.settings.overlap_attribution)
        horizon = as_of_date
        latest_end = ledger.latest_period_end()
        if latest_end is not None and latest_end > horizon:
            horizon = latest_end

        gaps = self._walk(ledger, check_in, cycle, horizon)

        logger.debug(
            f"Tenant {account.tenant_id}: {len(gaps)} gap(s) in {cycle.value} cycles "
            f"from {format_date(check_in)} to {format_date(horizon)}"
        )
        return GapReport(cycle_type=cycle, gaps=tuple(gaps), tenant_id=account.tenant_id)

    def detect_for_tenant(
        self,
        book: AccountBook,
        tenant_id: TenantId,
        cycle_type: Optional[Any] = None,
        as_of: Any = None,
    ) -> GapReport:
        """
        Resolve ``tenant_id`` in ``book`` and detect its gaps.

        Raises:
            NotFoundError: If the tenant is not in the book
        """
        return self.detect(book.account(tenant_id), cycle_type, as_of)

    def _walk(
        self,
        ledger: LedgerAggregator,
        check_in: date,
        cycle_type: RentCycleTypeEnum,
        horizon: date,
    ) -> List[Gap]:
        max_iterations = self.settings.max_cycle_iterations
        prefix = f"gap_{cycle_type.value.lower()}"
        gaps: List[Gap] = []

        cycles = self.calculator.iter_cycles(check_in, cycle_type)
        for iteration, cycle in enumerate(cycles):
            if cycle.start > horizon or cycle.end > horizon:
                break
            if iteration >= max_iterations:
                raise RunawayComputationError(
                    f"Gap detection exceeded {max_iterations} cycles between "
                    f"{format_date(check_in)} and {format_date(horizon)}; "
                    "check-in date inconsistent with current time"
                )

            if ledger.is_covered(cycle.start, cycle.end):
                continue

            is_checkin_gap = iteration == 0
            gap_index = len(gaps)
            gaps.append(
                Gap(
                    gap_id=f"{prefix}_{gap_index}",
                    start=cycle.start,
                    end=cycle.end,
                    days_missing=days_in_period(cycle.start, cycle.end),
                    priority=CHECKIN_GAP_PRIORITY if is_checkin_gap else gap_index,
                    is_checkin_gap=is_checkin_gap,
                )
            )
        return gaps
