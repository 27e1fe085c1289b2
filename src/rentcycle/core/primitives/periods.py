# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Billing-period date math for CALENDAR and MIDMONTH rent cycles.

All functions are pure and operate on ``datetime.date``. Month arithmetic uses
``dateutil.relativedelta``, which clamps to the last day of the target month
(Jan 31 + 1 month = Feb 28). For MIDMONTH cycles that means:

    midmonth_period(2025-01-31) == [2025-01-31, 2025-02-27]

i.e. the month is added with clamping first and the day is subtracted after.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, Optional

from dateutil.relativedelta import relativedelta

from .enums import RentCycleTypeEnum
from .model import Model
from .validation import format_date

MIDMONTH_OVERFLOW_POLICY = "clamp"

ONE_DAY = timedelta(days=1)
ONE_MONTH = relativedelta(months=1)


class RentPeriod(Model):
    """
    Inclusive date interval of one billing cycle.

    Attributes:
        start: First day covered
        end: Last day covered (inclusive)
    """

    start: date
    end: date

    @property
    def days(self) -> int:
        """Inclusive number of days in the period."""
        return days_in_period(self.start, self.end)

    def overlaps(self, start: date, end: date) -> bool:
        """True if ``[start, end]`` shares at least one day with this period."""
        return start <= self.end and end >= self.start

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{format_date(self.start)}..{format_date(self.end)}"


class PeriodValidation(Model):
    """Outcome of ``validate_period``."""

    is_valid: bool
    error: Optional[str] = None


def calendar_period(any_date: date) -> RentPeriod:
    """
    Calendar month containing ``any_date``.

    The end is "day 0 of the next month": the first of the next month minus
    one day, so leap Februaries end on the 29th.
    """
    start = any_date.replace(day=1)
    end = start + ONE_MONTH - ONE_DAY
    return RentPeriod(start=start, end=end)


def midmonth_period(start: date) -> RentPeriod:
    """MIDMONTH period beginning on ``start``: ``[start, start + 1 month - 1 day]``."""
    return RentPeriod(start=start, end=start + ONE_MONTH - ONE_DAY)


def midmonth_cycles(start: date) -> Iterator[RentPeriod]:
    """
    Unbounded MIDMONTH cycles beginning with ``midmonth_period(start)``.

    Each cycle starts the day after the previous one ends, so a start day
    clamped in a short month carries forward: starting Jan 31 gives
    Jan 31-Feb 27, Feb 28-Mar 27, Mar 28-Apr 27, ...
    """
    period = midmonth_period(start)
    while True:
        yield period
        period = midmonth_period(period.end + ONE_DAY)


def period_for(start: date, cycle_type: RentCycleTypeEnum) -> RentPeriod:
    """Billing period sized per ``cycle_type`` that begins on or contains ``start``."""
    if cycle_type == RentCycleTypeEnum.CALENDAR:
        return calendar_period(start)
    return midmonth_period(start)


def next_period(last_end: date, cycle_type: RentCycleTypeEnum) -> RentPeriod:
    """
    Period following one that ended on ``last_end``.

    The next period starts on ``last_end + 1 day``. For CALENDAR cycles a
    ``last_end`` that is not a month end rolls forward to the next full
    calendar month, so the result never overlaps ``last_end``.
    """
    start = last_end + ONE_DAY
    if cycle_type == RentCycleTypeEnum.CALENDAR:
        if start.day != 1:
            start = start + relativedelta(months=1, day=1)
        return calendar_period(start)
    return midmonth_period(start)


def validate_period(
    start: date, end: date, cycle_type: RentCycleTypeEnum
) -> PeriodValidation:
    """
    Check that ``[start, end]`` is a well-formed period for ``cycle_type``.

    CALENDAR periods must run from the 1st to the last day of a single month.
    MIDMONTH periods must end within one day of ``midmonth_period(start).end``.
    """
    if start >= end:
        return PeriodValidation(
            is_valid=False, error="Start date must be before end date"
        )

    if cycle_type == RentCycleTypeEnum.CALENDAR:
        expected = calendar_period(start)
        if start.day != 1 or end != expected.end:
            return PeriodValidation(
                is_valid=False,
                error="CALENDAR cycle: Period must be from 1st to last day of the month",
            )
        return PeriodValidation(is_valid=True)

    expected = midmonth_period(start)
    if abs((end - expected.end).days) > 1:
        return PeriodValidation(
            is_valid=False,
            error=(
                f"MIDMONTH cycle: Period starting {format_date(start)} should end on "
                f"{format_date(expected.end)}"
            ),
        )
    return PeriodValidation(is_valid=True)


def days_in_period(start: date, end: date) -> int:
    """Inclusive day count between two dates (order-insensitive)."""
    return abs((end - start).days) + 1
