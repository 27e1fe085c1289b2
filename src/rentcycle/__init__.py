# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
rentcycle - Rent-Cycle Reconciliation Engine

Pure, snapshot-driven calculations for a rental backend: billing-cycle date
math, ledger reconciliation, pending-rent reports, payment-gap detection and
next-payment suggestions.

Key Entry Points:
- rentcycle.billing.RentCycleCalculator - Calendar/midmonth period math
- rentcycle.billing.PendingRentCalculator - Pending/overdue rent report
- rentcycle.billing.PaymentGapDetector - Uncovered billing cycles
- rentcycle.billing.NextPaymentDateAdvisor - Next payment date range
- rentcycle.reporting - DataFrame views for export

Example Usage:
    ```python
    from datetime import date

    from rentcycle.billing import PendingRentCalculator
    from rentcycle.core.ledger import PaymentRow

    report = PendingRentCalculator().calculate(
        check_in_date=date(2025, 1, 10),
        rent_amount=8000.0,
        rent_payments=[
            PaymentRow(
                amount_paid=8000.0,
                period_start=date(2025, 1, 10),
                period_end=date(2025, 2, 9),
                status="PAID",
                ledger="RENT",
            )
        ],
        as_of=date(2025, 4, 15),
    )
    print(report.recommended_action)
    ```
"""

# Add a NullHandler to the package logger so that applications which do not
# configure logging get no "No handlers could be found" warnings.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "billing",
    "core",
    "reporting",
]


_LAZY_MODULES = {
    "billing": "rentcycle.billing",
    "core": "rentcycle.core",
    "reporting": "rentcycle.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'rentcycle' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
