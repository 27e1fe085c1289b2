# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
DataFrame views of billing results.

Flattens report models into pandas tables with one row per period, gap or
tenant, for spreadsheet export and ad-hoc analysis. Dates stay as
``datetime.date`` objects; enums are rendered by value.
"""

from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ..billing.results import (
    GapReport,
    PendingRentReport,
    TenantPendingSummary,
    YearlyPeriod,
)

PENDING_PERIOD_COLUMNS = [
    "month_key",
    "month_name",
    "start",
    "end",
    "expected_amount",
    "paid_amount",
    "balance",
    "status",
    "days_pending",
    "is_overdue",
    "payment_count",
]

SUMMARY_COLUMNS = [
    "tenant_id",
    "total_pending_amount",
    "pending_months_count",
    "total_overdue_amount",
    "is_overdue",
    "penalty_amount",
    "next_due_date",
    "recommended_action",
]

GAP_COLUMNS = ["gap_id", "start", "end", "days_missing", "priority", "is_checkin_gap"]

YEARLY_PERIOD_COLUMNS = ["month", "start", "end", "days"]


def pending_periods_frame(report: PendingRentReport) -> pd.DataFrame:
    """
    One row per pending billing month, indexed by ``month_key``.

    Example:
        ```python
        report = PendingRentCalculator().calculate_for_account(account, as_of)
        df = pending_periods_frame(report)
        df.loc[df["is_overdue"], "balance"].sum()
        ```
    """
    rows = [
        {
            "month_key": period.month_key,
            "month_name": period.month_name,
            "start": period.start,
            "end": period.end,
            "expected_amount": period.expected_amount,
            "paid_amount": period.paid_amount,
            "balance": period.balance,
            "status": period.status.value,
            "days_pending": period.days_pending,
            "is_overdue": period.is_overdue,
            "payment_count": len(period.payments),
        }
        for period in report.pending_periods
    ]
    return pd.DataFrame(rows, columns=PENDING_PERIOD_COLUMNS).set_index("month_key")


def summaries_frame(summaries: Iterable[TenantPendingSummary]) -> pd.DataFrame:
    """One row per tenant, most pending first."""
    rows: List[dict] = []
    for summary in summaries:
        report = summary.report
        rows.append(
            {
                "tenant_id": summary.tenant_id,
                "total_pending_amount": summary.total_pending_amount,
                "pending_months_count": summary.pending_months_count,
                "total_overdue_amount": report.total_overdue_amount,
                "is_overdue": summary.is_overdue,
                "penalty_amount": report.penalty_amount,
                "next_due_date": report.next_due_date,
                "recommended_action": summary.recommended_action.value,
            }
        )
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return df.sort_values(
        "total_pending_amount", ascending=False, kind="stable"
    ).reset_index(drop=True)


def gap_report_frame(report: GapReport) -> pd.DataFrame:
    """One row per gap, in walk order."""
    rows = [gap.model_dump() for gap in report.gaps]
    return pd.DataFrame(rows, columns=GAP_COLUMNS)


def yearly_periods_frame(periods: Iterable[YearlyPeriod]) -> pd.DataFrame:
    """Yearly periods indexed by month number, with inclusive day counts."""
    rows = [
        {
            "month": period.month,
            "start": period.start,
            "end": period.end,
            "days": (period.end - period.start).days + 1,
        }
        for period in periods
    ]
    return pd.DataFrame(rows, columns=YEARLY_PERIOD_COLUMNS).set_index("month")
