# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class RentCycleTypeEnum(str, Enum):
    """
    Billing convention of a property.

    Options:
        CALENDAR: 1st to last day of each calendar month
        MIDMONTH: Any start day to the day before that day in the next month
    """

    CALENDAR = "CALENDAR"
    MIDMONTH = "MIDMONTH"

    @property
    def description(self) -> str:
        """Human-readable description for display."""
        if self is RentCycleTypeEnum.CALENDAR:
            return "Calendar (1st - Last day of month)"
        return "Mid-Month (Any day - Same day next month - 1)"

    @classmethod
    def _missing_(cls, value: object) -> Optional["RentCycleTypeEnum"]:
        if isinstance(value, str):
            normalized = value.strip().upper().replace("-", "").replace("_", "")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class PaymentStatusEnum(str, Enum):
    """
    Lifecycle status of a payment row.

    Only PAID and PARTIAL rows count as money received. FAILED (used by the
    payment gateway) is accepted as an alias of CANCELLED.
    """

    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"
    REFUNDED = "REFUNDED"

    @property
    def is_settled(self) -> bool:
        """True for statuses that represent money actually received."""
        return self in SETTLED_STATUSES

    @property
    def is_void(self) -> bool:
        """True for statuses whose coverage interval no longer counts."""
        return self in VOID_STATUSES

    @classmethod
    def _missing_(cls, value: object) -> Optional["PaymentStatusEnum"]:
        if isinstance(value, str):
            normalized = value.strip().upper()
            if normalized == "FAILED":
                return cls.CANCELLED
            for member in cls:
                if member.value == normalized:
                    return member
        return None


SETTLED_STATUSES = frozenset({PaymentStatusEnum.PAID, PaymentStatusEnum.PARTIAL})
VOID_STATUSES = frozenset({PaymentStatusEnum.CANCELLED, PaymentStatusEnum.REFUNDED})


class LedgerTypeEnum(str, Enum):
    """
    Ledger a payment row belongs to.

    Attributes:
        RENT: Rent for a coverage interval (period_start/period_end)
        ADVANCE: Advance deposit, offsets pending balances
        REFUND: Money returned to the tenant
    """

    RENT = "RENT"
    ADVANCE = "ADVANCE"
    REFUND = "REFUND"

    @classmethod
    def _missing_(cls, value: object) -> Optional["LedgerTypeEnum"]:
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class PeriodStatusEnum(str, Enum):
    """Status of a billing period that still carries a balance."""

    FULLY_PENDING = "FULLY_PENDING"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    OVERDUE = "OVERDUE"


class RecommendedActionEnum(str, Enum):
    """
    Collection step recommended by the pending-rent report, in escalating order.
    """

    NO_ACTION = "NO_ACTION"
    FOLLOW_UP = "FOLLOW_UP"
    URGENT_FOLLOW_UP = "URGENT_FOLLOW_UP"
    NOTICE = "NOTICE"
    EVICTION_WARNING = "EVICTION_WARNING"


class OverlapAttributionEnum(str, Enum):
    """
    How a rent payment is attributed to the periods its interval overlaps.

    FULL_AMOUNT: the full amount_paid counts toward every overlapping period,
    so a payment spanning two months is counted against both.
    """

    FULL_AMOUNT = "full_amount"
