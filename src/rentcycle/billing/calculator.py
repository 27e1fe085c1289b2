# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rent cycle calculator.

Thin, stateless service over the period math in
``rentcycle.core.primitives.periods``. Accepts loosely-typed date inputs
(strings, datetimes), normalizes them strictly, and adds yearly period
enumeration and chained cycle iteration from a move-in date.
"""

from __future__ import annotations

import logging
from datetime import date
from itertools import count
from typing import Any, Iterator, List

from dateutil.relativedelta import relativedelta

from ..core.exceptions import InvalidInputError
from ..core.primitives import (
    PeriodValidation,
    RentCycleTypeEnum,
    RentPeriod,
    calendar_period,
    days_in_period,
    midmonth_cycles,
    midmonth_period,
    next_period,
    parse_date,
    period_for,
    validate_period,
)
from .results import YearlyPeriod

logger = logging.getLogger(__name__)


def coerce_cycle_type(value: Any) -> RentCycleTypeEnum:
    """Parse a cycle type, raising InvalidInputError for unknown values."""
    try:
        return RentCycleTypeEnum(value)
    except ValueError:
        raise InvalidInputError(f"Unknown rent cycle type: {value!r}") from None


class RentCycleCalculator:
    """
    Calculates CALENDAR and MIDMONTH rent cycle dates.

    Holds no state; construct once and share freely.

    Examples:
        >>> calc = RentCycleCalculator()
        >>> calc.calendar_period("2025-12-15")
        RentPeriod(start=datetime.date(2025, 12, 1), end=datetime.date(2025, 12, 31))
        >>> calc.midmonth_period("2025-12-15").end
        datetime.date(2026, 1, 14)
        >>> calc.next_period("2025-12-31", "CALENDAR").start
        datetime.date(2026, 1, 1)
    """

    def calendar_period(self, any_date: Any) -> RentPeriod:
        """1st to last day of the month containing ``any_date``."""
        return calendar_period(parse_date(any_date))

    def midmonth_period(self, start: Any) -> RentPeriod:
        """``start`` to the day before the same day next month (clamped)."""
        return midmonth_period(parse_date(start))

    def period_for(self, start: Any, cycle_type: Any) -> RentPeriod:
        return period_for(parse_date(start), coerce_cycle_type(cycle_type))

    def next_period(self, last_end: Any, cycle_type: Any) -> RentPeriod:
        """Cycle after one ending on ``last_end``, sized per ``cycle_type``."""
        return next_period(parse_date(last_end, "last_end"), coerce_cycle_type(cycle_type))

    def validate_period(self, start: Any, end: Any, cycle_type: Any) -> PeriodValidation:
        """
        Validate a rent period against its cycle type.

        Unparseable dates produce an invalid result rather than an exception,
        since validation is itself the question being asked.
        """
        try:
            start_date = parse_date(start, "start")
            end_date = parse_date(end, "end")
        except InvalidInputError as e:
            return PeriodValidation(is_valid=False, error=f"Invalid date format: {e}")
        return validate_period(start_date, end_date, coerce_cycle_type(cycle_type))

    def days_in_period(self, start: Any, end: Any) -> int:
        """Inclusive number of days between ``start`` and ``end``."""
        return days_in_period(parse_date(start, "start"), parse_date(end, "end"))

    def describe(self, cycle_type: Any) -> str:
        return coerce_cycle_type(cycle_type).description

    def yearly_periods(
        self, year: int, cycle_type: Any, starting_day: int = 1
    ) -> List[YearlyPeriod]:
        """
        Twelve consecutive rent periods for ``year``.

        CALENDAR: the twelve calendar months (``starting_day`` is ignored).
        MIDMONTH: month ``m`` starts on ``starting_day`` (clamped to the month's
        last day) and ends the day before month ``m + 1`` starts, so the
        December period runs into the following January.

        Raises:
            InvalidInputError: If ``starting_day`` is outside 1-31 or ``year`` is
                outside the supported date range
        """
        cycle = coerce_cycle_type(cycle_type)
        if not 1 <= starting_day <= 31:
            raise InvalidInputError(f"starting_day must be between 1 and 31, got {starting_day}")
        if not 1 <= year < 9999:
            raise InvalidInputError(f"year out of range: {year}")

        if cycle == RentCycleTypeEnum.CALENDAR:
            periods = []
            for month in range(1, 13):
                period = calendar_period(date(year, month, 1))
                periods.append(YearlyPeriod(start=period.start, end=period.end, month=month))
            return periods

        january = date(year, 1, 1)
        starts = [
            january + relativedelta(months=offset, day=starting_day)
            for offset in range(13)
        ]
        return [
            YearlyPeriod(start=starts[i], end=starts[i + 1] - relativedelta(days=1), month=i + 1)
            for i in range(12)
        ]

    def iter_cycles(self, check_in: Any, cycle_type: Any) -> Iterator[RentPeriod]:
        """
        Contiguous billing cycles from move-in onwards (unbounded).

        CALENDAR cycles begin with the calendar month containing ``check_in``;
        MIDMONTH cycles begin on ``check_in`` and each next cycle starts the day
        after the previous one ends. Callers must bound the iteration.
        """
        anchor = parse_date(check_in, "check_in_date")
        cycle = coerce_cycle_type(cycle_type)

        if cycle == RentCycleTypeEnum.CALENDAR:
            month_start = anchor.replace(day=1)
            for offset in count():
                yield calendar_period(month_start + relativedelta(months=offset))
        else:
            yield from midmonth_cycles(anchor)
