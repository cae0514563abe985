# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about reported file paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from ..constants import GITHUB_HOST

_SEPARATOR: Final[str] = "/"
# "", host, owner are dropped from hosted display names.
_HOSTED_PREFIX_PARTS: Final[int] = 3


def strip_source_root(path: str, source_root: str) -> str:
    """Return ``path`` without the staging ``source_root`` prefix.

    The leading separator after the prefix is preserved, so
    ``repos/src/github.com/o/r/a.go`` becomes ``/github.com/o/r/a.go``.

    Args:
        path: Path token as reported by a tool.
        source_root: Conventional staging prefix, e.g. ``repos/src``.

    Returns:
        str: Normalised path used as the per-run summary key.
    """

    posix = path.replace(os.sep, _SEPARATOR)
    if source_root and posix.startswith(source_root):
        return posix[len(source_root) :]
    return posix


def display_filename(normalized: str, *, base_dir: Path | None = None) -> str:
    """Return the user-facing filename for a normalised report path.

    Hosted paths drop the host and owner segments
    (``/github.com/owner/repo/a.go`` becomes ``repo/a.go``). Other paths are
    shown relative to ``base_dir`` when they live beneath it.

    Args:
        normalized: Path returned by :func:`strip_source_root`.
        base_dir: Analysed directory used to relativise local paths.

    Returns:
        str: Display filename.
    """

    if normalized.startswith(f"{_SEPARATOR}{GITHUB_HOST}"):
        parts = normalized.split(_SEPARATOR)
        if len(parts) > _HOSTED_PREFIX_PARTS:
            return _SEPARATOR.join(parts[_HOSTED_PREFIX_PARTS:])
        return normalized
    if base_dir is None:
        return normalized
    try:
        return Path(normalized).resolve().relative_to(base_dir.resolve()).as_posix()
    except (OSError, ValueError):
        return normalized


__all__ = ["display_filename", "strip_source_root"]
