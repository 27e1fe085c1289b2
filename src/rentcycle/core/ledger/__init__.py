# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tenant ledger snapshot: input records, per-tenant aggregation and the
tenant-indexed AccountBook.
"""

from .aggregator import LedgerAggregator, PaymentHistory
from .book import AccountBook
from .records import PaymentRow, TenantAccount, TenantId, TenantSnapshot

__all__ = [
    "AccountBook",
    "LedgerAggregator",
    "PaymentHistory",
    "PaymentRow",
    "TenantAccount",
    "TenantId",
    "TenantSnapshot",
]
