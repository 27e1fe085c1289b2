# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from rentcycle.core.exceptions import InvalidInputError
from rentcycle.core.ledger import PaymentRow, TenantAccount, TenantSnapshot
from rentcycle.core.primitives import LedgerTypeEnum, PaymentStatusEnum

from tests.conftest import advance_payment, make_account, rent_payment


class TestTenantSnapshot:
    def test_from_mapping_parses_strings(self):
        tenant = TenantSnapshot.from_mapping(
            {
                "tenant_id": 7,
                "check_in_date": "2025-01-10T00:00:00Z",
                "check_out_date": "",
                "rent_amount": "8000",
            }
        )
        assert tenant.check_in_date == date(2025, 1, 10)
        assert tenant.check_out_date is None
        assert tenant.rent_amount == 8000.0
        assert not tenant.is_checked_out

    def test_from_mapping_invalid_date(self):
        with pytest.raises(InvalidInputError, match="TenantSnapshot"):
            TenantSnapshot.from_mapping({"check_in_date": "someday"})

    def test_check_out_before_check_in(self):
        with pytest.raises(InvalidInputError):
            TenantSnapshot.from_mapping(
                {"check_in_date": "2025-03-01", "check_out_date": "2025-02-01"}
            )

    def test_direct_construction_raises_validation_error(self):
        with pytest.raises(ValidationError):
            TenantSnapshot(check_in_date=date(2025, 1, 1), rent_amount=-5)

    def test_effective_as_of_capped_at_check_out(self):
        tenant = TenantSnapshot(
            check_in_date=date(2025, 1, 1), check_out_date=date(2025, 3, 15)
        )
        assert tenant.effective_as_of(date(2025, 6, 1)) == date(2025, 3, 15)
        assert tenant.effective_as_of(date(2025, 2, 1)) == date(2025, 2, 1)


class TestPaymentRow:
    def test_defaults_to_rent_ledger(self):
        row = PaymentRow(amount_paid=100, status="PAID")
        assert row.ledger == LedgerTypeEnum.RENT
        assert not row.has_interval
        assert not row.overlaps(date(2025, 1, 1), date(2025, 12, 31))

    def test_from_mapping_with_decimal_like_amount(self):
        row = PaymentRow.from_mapping(
            {
                "amount_paid": "4000.50",
                "status": "failed",
                "ledger": "rent",
                "period_start": "2025-01-01",
                "period_end": "2025-01-31",
                "payment_date": "05 Jan 2025",
            }
        )
        assert row.amount_paid == 4000.5
        assert row.status == PaymentStatusEnum.CANCELLED
        assert row.payment_date == date(2025, 1, 5)
        assert not row.is_settled

    def test_interval_bounds_must_come_together(self):
        with pytest.raises(InvalidInputError, match="together"):
            PaymentRow.from_mapping(
                {"amount_paid": 1, "status": "PAID", "period_start": "2025-01-01"}
            )

    def test_interval_must_be_ordered(self):
        with pytest.raises(InvalidInputError):
            PaymentRow.from_mapping(
                {
                    "amount_paid": 1,
                    "status": "PAID",
                    "period_start": "2025-02-01",
                    "period_end": "2025-01-01",
                }
            )

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidInputError):
            PaymentRow.from_mapping({"amount_paid": -1, "status": "PAID"})

    def test_unknown_status_rejected(self):
        with pytest.raises(InvalidInputError):
            PaymentRow.from_mapping({"amount_paid": 1, "status": "BOUNCED"})

    def test_overlap_is_inclusive(self):
        row = rent_payment(date(2025, 1, 10), date(2025, 2, 9))
        assert row.overlaps(date(2025, 2, 9), date(2025, 2, 28))
        assert row.overlaps(date(2025, 1, 1), date(2025, 1, 10))
        assert not row.overlaps(date(2025, 2, 10), date(2025, 2, 28))


def test_tenant_account_splits_ledgers():
    account = make_account(
        payments=[
            rent_payment(date(2025, 1, 1), date(2025, 1, 31)),
            advance_payment(10000.0),
            PaymentRow(amount_paid=500, status="PAID", ledger="REFUND"),
        ]
    )
    assert isinstance(account, TenantAccount)
    assert account.tenant_id == 1
    assert len(account.rent_payments) == 1
    assert len(account.advance_payments) == 1
    assert len(account.rows_for(LedgerTypeEnum.REFUND)) == 1
