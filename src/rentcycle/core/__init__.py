# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentcycle Core

Primitives (models, enums, settings, period math), the tenant ledger snapshot
and the exception hierarchy.
"""

from . import ledger, primitives
from .exceptions import (
    InvalidInputError,
    NotFoundError,
    RentCycleError,
    RunawayComputationError,
)
from .ledger import (
    AccountBook,
    LedgerAggregator,
    PaymentHistory,
    PaymentRow,
    TenantAccount,
    TenantSnapshot,
)
from .primitives import (
    LedgerTypeEnum,
    PaymentStatusEnum,
    PeriodStatusEnum,
    RecommendedActionEnum,
    ReconciliationSettings,
    RentCycleTypeEnum,
    RentPeriod,
)

__all__ = [
    "ledger",
    "primitives",
    # Exceptions
    "RentCycleError",
    "InvalidInputError",
    "NotFoundError",
    "RunawayComputationError",
    # Ledger
    "AccountBook",
    "LedgerAggregator",
    "PaymentHistory",
    "PaymentRow",
    "TenantAccount",
    "TenantSnapshot",
    # Primitives
    "LedgerTypeEnum",
    "PaymentStatusEnum",
    "PeriodStatusEnum",
    "RecommendedActionEnum",
    "ReconciliationSettings",
    "RentCycleTypeEnum",
    "RentPeriod",
]
