# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for rentcycle components.

Every test works on an in-memory snapshot with an explicit as-of date.
"""
