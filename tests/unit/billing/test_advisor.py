# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest

from rentcycle.core.exceptions import NotFoundError
from rentcycle.core.primitives import RentCycleTypeEnum

from tests.conftest import make_account, rent_payment

MIDMONTH = RentCycleTypeEnum.MIDMONTH
CALENDAR = RentCycleTypeEnum.CALENDAR


def test_first_payment_uses_check_in(advisor):
    account = make_account(check_in=date(2025, 1, 10))
    suggestion = advisor.suggest_for_account(account, MIDMONTH, as_of=date(2025, 4, 15))
    assert suggestion.suggested_start_date == date(2025, 1, 10)
    assert suggestion.suggested_end_date is None
    assert not suggestion.is_gap_fill
    assert suggestion.message == "First payment - use check-in date"


def test_void_rows_do_not_count_as_first_payment(advisor):
    account = make_account(
        payments=[rent_payment(date(2025, 1, 1), date(2025, 1, 31), status="REFUNDED")]
    )
    suggestion = advisor.suggest_for_account(account, CALENDAR, as_of=date(2025, 3, 1))
    assert suggestion.suggested_start_date == date(2025, 1, 1)
    assert suggestion.suggested_end_date is None


def test_gap_fill_suggested_first(advisor):
    account = make_account(payments=[rent_payment(date(2025, 2, 1), date(2025, 2, 28))])
    suggestion = advisor.suggest_for_account(account, CALENDAR, as_of=date(2025, 3, 15))
    assert suggestion.is_gap_fill
    assert suggestion.gap is not None
    assert suggestion.gap.is_checkin_gap
    assert suggestion.suggested_start_date == date(2025, 1, 1)
    assert suggestion.suggested_end_date == date(2025, 1, 31)
    assert "Please fill this gap first" in suggestion.message


def test_check_in_gap_outranks_earlier_walk_order(advisor):
    account = make_account(
        check_in=date(2025, 1, 10),
        payments=[rent_payment(date(2025, 3, 10), date(2025, 4, 9))],
    )
    suggestion = advisor.suggest_for_account(account, MIDMONTH, as_of=date(2025, 4, 15))
    assert suggestion.gap.priority == -1
    assert suggestion.suggested_start_date == date(2025, 1, 10)


def test_skip_gaps_goes_past_latest_coverage(advisor):
    account = make_account(payments=[rent_payment(date(2025, 2, 1), date(2025, 2, 28))])
    suggestion = advisor.suggest_for_account(
        account, CALENDAR, skip_gaps=True, as_of=date(2025, 3, 15)
    )
    assert not suggestion.is_gap_fill
    assert suggestion.gap is None
    assert suggestion.suggested_start_date == date(2025, 3, 1)
    assert suggestion.suggested_end_date == date(2025, 3, 31)
    assert "skipping gaps" in suggestion.message


def test_next_cycle_when_no_gaps(advisor, sample_book):
    suggestion = advisor.suggest(sample_book, 3, CALENDAR, as_of=date(2025, 4, 15))
    assert not suggestion.is_gap_fill
    assert suggestion.suggested_start_date == date(2025, 5, 1)
    assert suggestion.suggested_end_date == date(2025, 5, 31)
    assert suggestion.message == "Next payment cycle - CALENDAR cycle"


def test_next_midmonth_cycle(advisor):
    account = make_account(
        check_in=date(2025, 1, 10),
        payments=[rent_payment(date(2025, 1, 10), date(2025, 2, 9))],
    )
    suggestion = advisor.suggest_for_account(account, MIDMONTH, as_of=date(2025, 2, 5))
    assert suggestion.cycle_type == MIDMONTH
    assert suggestion.suggested_start_date == date(2025, 2, 10)
    assert suggestion.suggested_end_date == date(2025, 3, 9)


def test_suggestion_does_not_mutate_account(advisor):
    account = make_account(payments=[rent_payment(date(2025, 2, 1), date(2025, 2, 28))])
    before = account.model_dump_json()
    advisor.suggest_for_account(account, CALENDAR, as_of=date(2025, 3, 15))
    assert account.model_dump_json() == before


def test_unknown_tenant(advisor, sample_book):
    with pytest.raises(NotFoundError):
        advisor.suggest(sample_book, 404, as_of=date(2025, 4, 15))


def test_gap_fill_and_next_cycle_agree_for_month_end_check_in(advisor, gap_detector):
    account = make_account(
        check_in=date(2025, 1, 31),
        payments=[rent_payment(date(2025, 1, 31), date(2025, 2, 27))],
    )
    as_of = date(2025, 3, 31)
    (gap,) = gap_detector.detect(account, MIDMONTH, as_of=as_of).gaps
    fill = advisor.suggest_for_account(account, MIDMONTH, as_of=as_of)
    skip = advisor.suggest_for_account(account, MIDMONTH, skip_gaps=True, as_of=as_of)

    assert (gap.start, gap.end) == (date(2025, 2, 28), date(2025, 3, 27))
    assert fill.is_gap_fill
    assert (fill.suggested_start_date, fill.suggested_end_date) == (gap.start, gap.end)
    assert (skip.suggested_start_date, skip.suggested_end_date) == (gap.start, gap.end)
