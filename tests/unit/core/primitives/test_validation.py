# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date, datetime

import pandas as pd
import pytest

from rentcycle.core.exceptions import InvalidInputError
from rentcycle.core.primitives import (
    format_date,
    parse_date,
    parse_optional_date,
    validate_date_ordering,
    validate_non_negative,
)


@pytest.mark.parametrize(
    "value",
    [
        date(2025, 1, 31),
        datetime(2025, 1, 31, 18, 30),
        pd.Timestamp("2025-01-31 09:00"),
        "2025-01-31",
        " 2025-01-31 ",
        "2025-01-31T10:00:00",
        "2025-01-31T10:00:00Z",
        "31 Jan 2025",
        "31 January 2025",
    ],
)
def test_parse_date_accepts_supported_forms(value):
    assert parse_date(value) == date(2025, 1, 31)


@pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2025-02-30", 20250131])
def test_parse_date_rejects_garbage(value):
    with pytest.raises(InvalidInputError):
        parse_date(value, "check_in_date")


def test_parse_date_error_names_field():
    with pytest.raises(InvalidInputError, match="period_start"):
        parse_date("yesterday", "period_start")


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        parse_date("nope")


def test_parse_optional_date():
    assert parse_optional_date(None) is None
    assert parse_optional_date("") is None
    assert parse_optional_date("2025-03-01") == date(2025, 3, 1)


def test_format_date():
    assert format_date(date(2025, 3, 1)) == "2025-03-01"


def test_validate_date_ordering():
    validate_date_ordering(date(2025, 1, 1), date(2025, 1, 1))
    validate_date_ordering(None, date(2025, 1, 1))
    validate_date_ordering(date(2025, 1, 1), None)
    with pytest.raises(InvalidInputError, match="check_out_date"):
        validate_date_ordering(
            date(2025, 2, 1), date(2025, 1, 1), "check_in_date", "check_out_date"
        )


def test_validate_non_negative():
    assert validate_non_negative(0.0, "rent_amount") == 0.0
    with pytest.raises(InvalidInputError, match="rent_amount"):
        validate_non_negative(-1.0, "rent_amount")
