# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for rentcycle testing.

Helpers build snapshot records with sensible defaults so each test only
spells out the fields it cares about. ``as_of`` is always passed explicitly.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from rentcycle.billing import (
    NextPaymentDateAdvisor,
    PaymentGapDetector,
    PendingRentCalculator,
    RentCycleCalculator,
)
from rentcycle.core.ledger import AccountBook, PaymentRow, TenantAccount, TenantSnapshot
from rentcycle.core.primitives import ReconciliationSettings

RENT = 8000.0


# Record Utilities
def rent_payment(
    start: date,
    end: date,
    amount: float = RENT,
    status: str = "PAID",
    payment_date: Optional[date] = None,
    tenant_id: Optional[int] = None,
) -> PaymentRow:
    """RENT row covering ``[start, end]``, paid on ``start`` unless given."""
    return PaymentRow(
        amount_paid=amount,
        expected_amount=amount,
        period_start=start,
        period_end=end,
        payment_date=payment_date or start,
        status=status,
        ledger="RENT",
        tenant_id=tenant_id,
    )


def advance_payment(
    amount: float, status: str = "PAID", tenant_id: Optional[int] = None
) -> PaymentRow:
    return PaymentRow(
        amount_paid=amount, status=status, ledger="ADVANCE", tenant_id=tenant_id
    )


def make_tenant(
    check_in: date = date(2025, 1, 1),
    rent: float = RENT,
    tenant_id: Optional[int] = 1,
    check_out: Optional[date] = None,
) -> TenantSnapshot:
    return TenantSnapshot(
        tenant_id=tenant_id,
        check_in_date=check_in,
        check_out_date=check_out,
        rent_amount=rent,
        name=f"Tenant {tenant_id}",
    )


def make_account(
    check_in: date = date(2025, 1, 1),
    payments=(),
    rent: float = RENT,
    tenant_id: Optional[int] = 1,
    check_out: Optional[date] = None,
) -> TenantAccount:
    """TenantAccount with the given rows (any ledger)."""
    return TenantAccount(
        tenant=make_tenant(check_in, rent, tenant_id, check_out),
        payments=tuple(payments),
    )


# Pytest Fixtures
@pytest.fixture
def settings():
    """Default reconciliation settings."""
    return ReconciliationSettings()


@pytest.fixture
def cycle_calculator():
    return RentCycleCalculator()


@pytest.fixture
def pending_calculator(settings):
    return PendingRentCalculator(settings)


@pytest.fixture
def gap_detector(settings):
    return PaymentGapDetector(settings=settings)


@pytest.fixture
def advisor(settings):
    return NextPaymentDateAdvisor(settings=settings)


@pytest.fixture
def sample_book():
    """
    Three tenants as of spring 2025:

    - 1: paid January and February (calendar months), nothing since
    - 2: moved in mid-January, no payments at all
    - 3: fully paid through April
    """
    tenants = [
        make_tenant(date(2025, 1, 1), tenant_id=1),
        make_tenant(date(2025, 1, 10), tenant_id=2),
        make_tenant(date(2025, 1, 1), rent=6000.0, tenant_id=3),
    ]
    payments = [
        rent_payment(date(2025, 1, 1), date(2025, 1, 31), tenant_id=1),
        rent_payment(date(2025, 2, 1), date(2025, 2, 28), tenant_id=1),
    ] + [
        rent_payment(start, end, amount=6000.0, tenant_id=3)
        for start, end in [
            (date(2025, 1, 1), date(2025, 1, 31)),
            (date(2025, 2, 1), date(2025, 2, 28)),
            (date(2025, 3, 1), date(2025, 3, 31)),
            (date(2025, 4, 1), date(2025, 4, 30)),
        ]
    ]
    return AccountBook.from_rows(tenants, payments)
