# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsing of ``path:line:column:message`` report lines."""

from __future__ import annotations

from typing import Final

from ..constants import REPORT_SEPARATOR
from ..errors import OutputParseError
from ..models import Issue

# line number, column, message
_LOCATION_FIELDS: Final[int] = 3


def split_path(line: str) -> tuple[str, str]:
    """Split ``line`` into its leading path token and the remainder.

    Args:
        line: Raw report line.

    Returns:
        tuple[str, str]: Path token and the text after the first separator.

    Raises:
        OutputParseError: If the line has no separator.
    """

    path, sep, remainder = line.partition(REPORT_SEPARATOR)
    if not sep or not path:
        raise OutputParseError(line, "missing path")
    return path, remainder


def parse_line(line: str) -> Issue:
    """Parse one report line into an :class:`Issue`.

    The column is discarded. Separators embedded in the message are kept and
    surrounding whitespace is trimmed.

    Args:
        line: Raw report line, e.g. ``pkg/file.go:42:7: unused variable x``.

    Returns:
        Issue: Line number and message.

    Raises:
        OutputParseError: If fields are missing or the line number is not a
            positive integer.
    """

    _, remainder = split_path(line)
    fields = remainder.split(REPORT_SEPARATOR, _LOCATION_FIELDS - 1)
    if len(fields) < _LOCATION_FIELDS:
        raise OutputParseError(line, "expected line:column:message")
    raw_line_number, _column, message = fields
    if not (raw_line_number.isascii() and raw_line_number.isdigit()):
        raise OutputParseError(line, f"invalid line number {raw_line_number!r}")
    line_number = int(raw_line_number)
    if line_number < 1:
        raise OutputParseError(line, f"line number {line_number} out of range")
    return Issue(line_number=line_number, message=message.strip())


__all__ = ["parse_line", "split_path"]
