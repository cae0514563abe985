# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution helpers for launching checks and streaming their reports."""

from __future__ import annotations

from .process import CheckCapability, CheckStream, CommandCheck, LineStream, ProcessStream, classify_exit, launch

__all__ = [
    "CheckCapability",
    "CheckStream",
    "CommandCheck",
    "LineStream",
    "ProcessStream",
    "classify_exit",
    "launch",
]
