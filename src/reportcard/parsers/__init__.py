# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting check reports into summaries."""

from __future__ import annotations

from .base import parse_line, split_path
from .summaries import SummaryCollector

__all__ = ["SummaryCollector", "parse_line", "split_path"]
