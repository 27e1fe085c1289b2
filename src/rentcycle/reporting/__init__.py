# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentcycle Reporting

pandas DataFrame views over billing results.
"""

from .frames import (
    gap_report_frame,
    pending_periods_frame,
    summaries_frame,
    yearly_periods_frame,
)

__all__ = [
    "pending_periods_frame",
    "summaries_frame",
    "gap_report_frame",
    "yearly_periods_frame",
]
