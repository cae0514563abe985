# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers for the reportcard package."""

from __future__ import annotations

from .paths import display_filename, strip_source_root

__all__ = ["display_filename", "strip_source_root"]
