# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-tenant ledger aggregation.

Classifies a tenant's payment rows by ledger and status and answers interval
questions ("how much was paid for this period?", "is this cycle covered?")
with vectorized pandas masks over the rent rows.

Overlap attribution:
    A rent payment overlaps an interval when
    ``period_start <= interval_end and period_end >= interval_start``.
    Under ``OverlapAttributionEnum.FULL_AMOUNT`` (the only policy) the whole
    ``amount_paid`` of an overlapping payment counts toward the interval, so a
    payment that spans two periods is counted in both.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Tuple

import pandas as pd

from ..primitives import (
    OVERLAP_ATTRIBUTION,
    LedgerTypeEnum,
    Model,
    OverlapAttributionEnum,
    PaymentStatusEnum,
)
from .records import PaymentRow

logger = logging.getLogger(__name__)


class PaymentHistory(Model):
    """Summary of settled (PAID/PARTIAL) rent payments."""

    last_payment_date: Optional[date] = None
    last_payment_amount: float = 0.0
    total_payments_made: int = 0
    average_payment_amount: float = 0.0


def _sort_key(row: PaymentRow) -> date:
    return row.period_start or row.payment_date or date.min


def _date_column(values: list) -> pd.Series:
    return pd.to_datetime(pd.Series(values, dtype=object))


class LedgerAggregator:
    """
    Read-only view over one tenant's payment rows.

    Args:
        payments: All of the tenant's rows (any ledger); order does not matter
        overlap_attribution: Attribution policy for multi-period payments

    Example:
        ```python
        ledger = LedgerAggregator(account.payments)
        paid = ledger.paid_amount(date(2025, 1, 1), date(2025, 1, 31))
        ```
    """

    def __init__(
        self,
        payments: Iterable[PaymentRow] = (),
        overlap_attribution: OverlapAttributionEnum = OVERLAP_ATTRIBUTION,
    ):
        rows = tuple(payments)
        self._overlap_attribution = overlap_attribution
        self._rent_rows: Tuple[PaymentRow, ...] = tuple(
            sorted(
                (r for r in rows if r.ledger == LedgerTypeEnum.RENT), key=_sort_key
            )
        )
        self._advance_rows: Tuple[PaymentRow, ...] = tuple(
            r for r in rows if r.ledger == LedgerTypeEnum.ADVANCE
        )
        self._frame = self._build_frame(self._rent_rows)

    @staticmethod
    def _build_frame(rows: Tuple[PaymentRow, ...]) -> pd.DataFrame:
        """Columnar view of the rent rows; row ``i`` of the frame is ``rows[i]``."""
        return pd.DataFrame(
            {
                "amount_paid": pd.Series([r.amount_paid for r in rows], dtype="float64"),
                "settled": pd.Series([r.is_settled for r in rows], dtype=bool),
                "void": pd.Series([r.status.is_void for r in rows], dtype=bool),
                "payment_date": _date_column([r.payment_date for r in rows]),
                "period_start": _date_column([r.period_start for r in rows]),
                "period_end": _date_column([r.period_end for r in rows]),
            }
        )

    @property
    def overlap_attribution(self) -> OverlapAttributionEnum:
        return self._overlap_attribution

    @property
    def rent_payments(self) -> Tuple[PaymentRow, ...]:
        """Rent rows sorted by coverage start (payment date when no interval)."""
        return self._rent_rows

    @property
    def advance_payments(self) -> Tuple[PaymentRow, ...]:
        return self._advance_rows

    @property
    def total_advance_paid(self) -> float:
        """Sum of PAID advance rows."""
        return float(
            sum(
                r.amount_paid
                for r in self._advance_rows
                if r.status == PaymentStatusEnum.PAID
            )
        )

    def _overlap_mask(self, start: date, end: date) -> pd.Series:
        frame = self._frame
        return (frame["period_start"] <= pd.Timestamp(end)) & (
            frame["period_end"] >= pd.Timestamp(start)
        )

    def overlapping(self, start: date, end: date) -> Tuple[PaymentRow, ...]:
        """Rent rows of any status whose interval overlaps ``[start, end]``."""
        mask = self._overlap_mask(start, end)
        return tuple(row for row, hit in zip(self._rent_rows, mask) if hit)

    def paid_amount(self, start: date, end: date) -> float:
        """
        Settled amount attributed to ``[start, end]``.

        Sums ``amount_paid`` of every PAID/PARTIAL rent row overlapping the
        interval, each in full (FULL_AMOUNT attribution).
        """
        mask = self._overlap_mask(start, end) & self._frame["settled"]
        return float(self._frame.loc[mask, "amount_paid"].sum())

    def is_covered(self, start: date, end: date) -> bool:
        """True if any PAID/PARTIAL rent row overlaps ``[start, end]``."""
        mask = self._overlap_mask(start, end) & self._frame["settled"]
        return bool(mask.any())

    def latest_period_end(self) -> Optional[date]:
        """Latest coverage end among rent rows that are not CANCELLED/REFUNDED."""
        ends = self._frame.loc[~self._frame["void"], "period_end"].dropna()
        if ends.empty:
            return None
        return ends.max().date()

    def has_active_rent_payments(self) -> bool:
        """True if at least one non-void rent row carries a coverage interval."""
        return self.latest_period_end() is not None

    def payment_history(self) -> PaymentHistory:
        """Most recent settled payment, count and average amount per payment."""
        settled = self._frame[self._frame["settled"]]
        if settled.empty:
            return PaymentHistory()

        latest = settled.sort_values(
            ["payment_date", "period_end"], ascending=False, na_position="last"
        ).iloc[0]
        total_paid = float(settled["amount_paid"].sum())
        count = len(settled)

        return PaymentHistory(
            last_payment_date=(
                None if pd.isna(latest["payment_date"]) else latest["payment_date"].date()
            ),
            last_payment_amount=float(latest["amount_paid"]),
            total_payments_made=count,
            average_payment_amount=total_paid / count,
        )
