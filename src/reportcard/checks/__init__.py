# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checks producing scored per-file summaries."""

from __future__ import annotations

from .catalog import adhoc_check, select_checks
from .formatters import BlackFormatter, Formatter, GofmtFormatter, formatter_for
from .native_format import FormatCheck, NativeFormatChecker
from .runner import CheckerRunner, collect_stream

__all__ = [
    "BlackFormatter",
    "CheckerRunner",
    "FormatCheck",
    "Formatter",
    "GofmtFormatter",
    "NativeFormatChecker",
    "adhoc_check",
    "collect_stream",
    "formatter_for",
    "select_checks",
]
