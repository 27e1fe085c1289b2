# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Date parsing and validation helpers shared by records and services.

Inputs coming from the persistence layer are loosely typed (ISO strings,
datetimes, display strings). Everything is normalized to ``datetime.date``
here; anything that cannot be parsed raises ``InvalidInputError`` instead of
being replaced with today's date.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..exceptions import InvalidInputError

DISPLAY_DATE_FORMATS = ("%d %b %Y", "%d %B %Y")


def parse_date(value: Any, field_name: str = "date") -> date:
    """
    Normalize a date-like value to ``datetime.date``.

    Accepts ``date``, ``datetime`` (including ``pandas.Timestamp``), ISO
    strings (``2025-01-31`` or ``2025-01-31T10:00:00``) and display strings
    (``31 Jan 2025``).

    Raises:
        InvalidInputError: If the value is empty or cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field_name} is required, got {value!r}")

    text = value.strip()
    if "T" in text:
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    else:
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    for fmt in DISPLAY_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise InvalidInputError(f"{field_name} has an unrecognized date format: {value!r}")


def parse_optional_date(value: Any, field_name: str = "date") -> Optional[date]:
    """Like ``parse_date`` but passes ``None`` and empty strings through."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_date(value, field_name)


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.strftime("%Y-%m-%d")


def validate_date_ordering(
    start: Optional[date],
    end: Optional[date],
    start_field: str = "start",
    end_field: str = "end",
) -> None:
    """
    Validate that ``end`` is not before ``start``.

    Equal dates are allowed (a one-day interval). Missing values are skipped.

    Raises:
        InvalidInputError: If end is before start
    """
    if start is not None and end is not None and end < start:
        raise InvalidInputError(
            f"{end_field} ({format_date(end)}) must not be before {start_field} ({format_date(start)})"
        )


def validate_non_negative(value: float, field_name: str) -> float:
    """Raise ``InvalidInputError`` for negative amounts."""
    if value < 0:
        raise InvalidInputError(f"{field_name} must be non-negative, got {value}")
    return value
