# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by rent-cycle computations."""

from __future__ import annotations


class RentCycleError(Exception):
    """Base class for all rentcycle errors."""


class InvalidInputError(RentCycleError, ValueError):
    """Raised for malformed dates, negative amounts or inconsistent date ranges."""


class NotFoundError(RentCycleError, LookupError):
    """Raised when a tenant is missing from the supplied snapshot."""


class RunawayComputationError(RentCycleError, RuntimeError):
    """Raised when a cycle walk exceeds its iteration limit."""
