# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exclusion rules shared by discovery and report parsing."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import AnalysisProfile

_LOGGER = logging.getLogger(__name__)


def has_skipped_suffix(name: str, profile: AnalysisProfile) -> bool:
    """Return whether ``name`` ends with one of the profile's excluded suffixes.

    Args:
        name: File name or path string.
        profile: Profile supplying the suffix list.

    Returns:
        bool: ``True`` when the file is excluded by suffix.
    """

    return any(name.endswith(suffix) for suffix in profile.skip_suffixes)


def has_generated_marker(first_line: str, profile: AnalysisProfile) -> bool:
    """Return whether ``first_line`` flags the file as machine generated.

    The line must start with a comment opener immediately followed by a
    marker phrase. Matching is case-insensitive.

    Args:
        first_line: First line of the file.
        profile: Profile supplying comment openers and markers.

    Returns:
        bool: ``True`` when a generated-file marker is present.
    """

    line = first_line.lower()
    for opener in profile.comment_openers:
        if not line.startswith(opener):
            continue
        remainder = line[len(opener) :]
        if any(remainder.startswith(marker) for marker in profile.generated_markers):
            return True
    return False


def read_first_line(path: Path) -> str:
    """Return the first line of ``path`` without its line terminator."""

    with path.open("r", encoding="utf-8", errors="replace") as handle:
        return handle.readline().rstrip("\r\n")


def is_generated(path: Path, profile: AnalysisProfile) -> bool:
    """Return whether the file at ``path`` carries a generated-file marker.

    Only the first line is read. Unreadable files are logged and treated as
    hand written.

    Args:
        path: File to inspect.
        profile: Profile supplying comment openers and markers.

    Returns:
        bool: ``True`` when the first line marks the file as generated.
    """

    try:
        first_line = read_first_line(path)
    except OSError as exc:
        _LOGGER.warning("unable to read %s: %s", path, exc)
        return False
    return has_generated_marker(first_line, profile)


def is_excluded_file(path: Path, profile: AnalysisProfile) -> bool:
    """Return whether ``path`` is excluded by suffix or generated marker."""

    return has_skipped_suffix(path.name, profile) or is_generated(path, profile)


__all__ = [
    "has_generated_marker",
    "has_skipped_suffix",
    "is_excluded_file",
    "is_generated",
    "read_first_line",
]
