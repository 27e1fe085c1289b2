# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Input records for rent reconciliation.

These models describe the already-fetched snapshot a caller hands to the
calculators: the tenant's occupancy facts and their payment rows. Every
optional field is explicit; nothing is inferred at call sites. Rows are
expected to exclude soft-deleted records.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import ValidationError, ValidationInfo, field_validator, model_validator

from ..exceptions import InvalidInputError
from ..primitives import (
    Amount,
    LedgerTypeEnum,
    Model,
    PaymentStatusEnum,
    parse_date,
    parse_optional_date,
    validate_date_ordering,
)

TenantId = Union[int, str]


def _from_mapping(cls, data: Mapping[str, Any]):
    """Validate a loosely-typed row, converting pydantic errors to InvalidInputError."""
    try:
        return cls.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidInputError(f"Invalid {cls.__name__}: {e}") from e


class TenantSnapshot(Model):
    """
    Occupancy facts of one tenant.

    Attributes:
        tenant_id: Identifier used to resolve the tenant in an AccountBook
        check_in_date: Move-in date; billing starts here
        check_out_date: Move-out date, if the tenant has left
        rent_amount: Current rent per cycle
        name: Display name
    """

    check_in_date: date
    check_out_date: Optional[date] = None
    rent_amount: Amount = 0.0
    tenant_id: Optional[TenantId] = None
    name: Optional[str] = None

    @field_validator("check_in_date", mode="before")
    @classmethod
    def _parse_check_in(cls, v: Any) -> date:
        return parse_date(v, "check_in_date")

    @field_validator("check_out_date", mode="before")
    @classmethod
    def _parse_check_out(cls, v: Any) -> Optional[date]:
        return parse_optional_date(v, "check_out_date")

    @model_validator(mode="after")
    def check_dates(self) -> "TenantSnapshot":
        validate_date_ordering(
            self.check_in_date, self.check_out_date, "check_in_date", "check_out_date"
        )
        return self

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_date is not None

    def effective_as_of(self, as_of: date) -> date:
        """``as_of`` capped at the check-out date, if any."""
        if self.check_out_date is not None and self.check_out_date < as_of:
            return self.check_out_date
        return as_of

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TenantSnapshot":
        """Build from a raw row; raises InvalidInputError on bad data."""
        return _from_mapping(cls, data)


class PaymentRow(Model):
    """
    One row of a tenant's payment ledger.

    RENT rows carry a coverage interval ``[period_start, period_end]``;
    ADVANCE and REFUND rows normally do not.

    Attributes:
        amount_paid: Amount received (or refunded)
        expected_amount: Amount that was due for the row, if recorded
        payment_date: Date the money moved
        period_start: First day the payment covers (RENT rows)
        period_end: Last day the payment covers (RENT rows)
        status: Payment status
        ledger: RENT, ADVANCE or REFUND
        payment_id: Source row identifier
        tenant_id: Owning tenant
        payment_method: Cash, UPI, gateway, ...
        remarks: Free-text note
    """

    amount_paid: Amount
    status: PaymentStatusEnum
    ledger: LedgerTypeEnum = LedgerTypeEnum.RENT
    expected_amount: Optional[Amount] = None
    payment_date: Optional[date] = None
    period_start: Optional[date] = None
    period_end: Optional[date] = None
    payment_id: Optional[TenantId] = None
    tenant_id: Optional[TenantId] = None
    payment_method: Optional[str] = None
    remarks: Optional[str] = None

    @field_validator("payment_date", "period_start", "period_end", mode="before")
    @classmethod
    def _parse_dates(cls, v: Any, info: ValidationInfo) -> Optional[date]:
        return parse_optional_date(v, info.field_name)

    @model_validator(mode="after")
    def check_interval(self) -> "PaymentRow":
        if (self.period_start is None) != (self.period_end is None):
            raise InvalidInputError(
                "period_start and period_end must be provided together"
            )
        validate_date_ordering(
            self.period_start, self.period_end, "period_start", "period_end"
        )
        return self

    @property
    def has_interval(self) -> bool:
        return self.period_start is not None

    @property
    def is_settled(self) -> bool:
        """PAID or PARTIAL: money that actually arrived."""
        return self.status.is_settled

    def overlaps(self, start: date, end: date) -> bool:
        """True if this row's coverage interval shares a day with ``[start, end]``."""
        if not self.has_interval:
            return False
        return self.period_start <= end and self.period_end >= start

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PaymentRow":
        """Build from a raw row; raises InvalidInputError on bad data."""
        return _from_mapping(cls, data)


class TenantAccount(Model):
    """A tenant snapshot together with all of its (non-deleted) payment rows."""

    tenant: TenantSnapshot
    payments: Tuple[PaymentRow, ...] = ()

    @property
    def tenant_id(self) -> Optional[TenantId]:
        return self.tenant.tenant_id

    def rows_for(self, ledger: LedgerTypeEnum) -> Tuple[PaymentRow, ...]:
        return tuple(p for p in self.payments if p.ledger == ledger)

    @property
    def rent_payments(self) -> Tuple[PaymentRow, ...]:
        return self.rows_for(LedgerTypeEnum.RENT)

    @property
    def advance_payments(self) -> Tuple[PaymentRow, ...]:
        return self.rows_for(LedgerTypeEnum.ADVANCE)
