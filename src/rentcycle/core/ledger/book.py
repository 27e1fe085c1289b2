# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant-indexed snapshot of accounts.

The AccountBook is the only place a tenant identity is resolved; operations
that look a tenant up by id go through ``account()`` and surface a
``NotFoundError`` when the id is absent.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, Mapping

from ..exceptions import InvalidInputError, NotFoundError
from .records import PaymentRow, TenantAccount, TenantId, TenantSnapshot

logger = logging.getLogger(__name__)


class AccountBook:
    """
    Read-only mapping of tenant id to TenantAccount.

    Examples:
        >>> book = AccountBook.from_rows(tenants, payments)
        >>> account = book.account(42)  # raises NotFoundError if unknown
    """

    __slots__ = ("_accounts",)

    def __init__(self, accounts: Mapping[TenantId, TenantAccount]):
        self._accounts: Dict[TenantId, TenantAccount] = dict(accounts)

    @classmethod
    def from_rows(
        cls, tenants: Iterable[TenantSnapshot], payments: Iterable[PaymentRow] = ()
    ) -> "AccountBook":
        """
        Group payment rows under their tenant by ``tenant_id``.

        Raises:
            InvalidInputError: If a tenant has no id, ids repeat, or a payment row
                references no tenant
        """
        snapshots: Dict[TenantId, TenantSnapshot] = {}
        for tenant in tenants:
            if tenant.tenant_id is None:
                raise InvalidInputError("Every tenant in an AccountBook needs a tenant_id")
            if tenant.tenant_id in snapshots:
                raise InvalidInputError(f"Duplicate tenant_id {tenant.tenant_id!r}")
            snapshots[tenant.tenant_id] = tenant

        grouped: Dict[TenantId, list] = {tenant_id: [] for tenant_id in snapshots}
        orphaned = 0
        for payment in payments:
            if payment.tenant_id is None:
                raise InvalidInputError("Payment rows in an AccountBook need a tenant_id")
            if payment.tenant_id not in grouped:
                orphaned += 1
                continue
            grouped[payment.tenant_id].append(payment)

        if orphaned:
            logger.debug(f"Ignored {orphaned} payment row(s) for tenants not in the snapshot")

        return cls(
            {
                tenant_id: TenantAccount(tenant=snapshots[tenant_id], payments=rows)
                for tenant_id, rows in grouped.items()
            }
        )

    def account(self, tenant_id: TenantId) -> TenantAccount:
        """Resolve a tenant id, raising NotFoundError if it is not in the snapshot."""
        try:
            return self._accounts[tenant_id]
        except KeyError:
            raise NotFoundError(f"Tenant with ID {tenant_id} not found") from None

    def __contains__(self, tenant_id: object) -> bool:
        return tenant_id in self._accounts

    def __iter__(self) -> Iterator[TenantAccount]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)
