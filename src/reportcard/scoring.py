# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert failure counts into normalised scores."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .errors import ScoringError

_CHUNK_SIZE: Final[int] = 1 << 16


def directory_score(total_files: int, failing_files: int) -> float:
    """Return the per-file pass rate.

    Args:
        total_files: Number of eligible files.
        failing_files: Files with at least one issue.

    Returns:
        float: ``(total - failing) / total``.

    Raises:
        ScoringError: If ``total_files`` is zero.
    """

    if total_files == 0:
        raise ScoringError("cannot score a check over zero files")
    return (total_files - failing_files) / total_files


def single_file_score(line_count: int, issue_count: int) -> float:
    """Return the line-based score for a single file.

    Each issue consumes one full line of credit, so the result turns
    negative when issues outnumber lines.

    Args:
        line_count: Number of lines in the file.
        issue_count: Issues reported for the file.

    Returns:
        float: ``(lines - issues) / lines``.

    Raises:
        ScoringError: If ``line_count`` is zero.
    """

    if line_count == 0:
        raise ScoringError("cannot score an empty file")
    return (line_count - issue_count) / line_count


def count_lines(path: Path) -> int:
    """Return the number of newline characters in ``path``, as ``wc -l`` does."""

    count = 0
    with path.open("rb") as handle:
        while chunk := handle.read(_CHUNK_SIZE):
            count += chunk.count(b"\n")
    return count


__all__ = ["count_lines", "directory_score", "single_file_score"]
