# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers for the reportcard package."""

from __future__ import annotations

from .filesystem import FileDiscoverer
from .rules import has_generated_marker, has_skipped_suffix, is_excluded_file, is_generated

__all__ = [
    "FileDiscoverer",
    "has_generated_marker",
    "has_skipped_suffix",
    "is_excluded_file",
    "is_generated",
]
