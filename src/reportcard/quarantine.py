# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reversible renaming of skipped files hidden from directory-scanning tools."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from .constants import QUARANTINE_SUFFIX
from .errors import QuarantineError

_LOGGER = logging.getLogger(__name__)


def quarantined_name(path: Path, suffix: str = QUARANTINE_SUFFIX) -> Path:
    """Return the name ``path`` carries while quarantined."""

    return path.with_name(f"{path.name}{suffix}")


def _rename_all(pairs: Sequence[tuple[Path, Path]]) -> OSError | None:
    last_error: OSError | None = None
    for source, target in pairs:
        try:
            os.rename(source, target)
        except OSError as exc:
            _LOGGER.warning("unable to rename %s to %s: %s", source, target, exc)
            last_error = exc
    return last_error


def quarantine_files(paths: Sequence[Path], *, suffix: str = QUARANTINE_SUFFIX) -> OSError | None:
    """Append ``suffix`` to every path so scanners no longer see it.

    Every path is attempted even when an earlier rename fails.

    Args:
        paths: Files to hide.
        suffix: Suffix appended to each file name.

    Returns:
        OSError | None: Last error encountered, or ``None`` when all succeeded.
    """

    return _rename_all([(path, quarantined_name(path, suffix)) for path in paths])


def restore_files(paths: Sequence[Path], *, suffix: str = QUARANTINE_SUFFIX) -> OSError | None:
    """Reverse :func:`quarantine_files` for ``paths``.

    Args:
        paths: Original (unsuffixed) file paths.
        suffix: Suffix previously appended.

    Returns:
        OSError | None: Last error encountered, or ``None`` when all succeeded.
    """

    return _rename_all([(quarantined_name(path, suffix), path) for path in paths])


@contextmanager
def quarantined(paths: Sequence[Path], *, suffix: str = QUARANTINE_SUFFIX) -> Iterator[OSError | None]:
    """Hide ``paths`` for the duration of the ``with`` block.

    Restoration runs on every exit path. Files that failed to quarantine are
    left alone during restore. Quarantine failures are yielded to the caller
    instead of raised.

    Args:
        paths: Files to hide.
        suffix: Suffix appended while hidden.

    Yields:
        OSError | None: Last quarantine error, if any.

    Raises:
        QuarantineError: If restoring original names fails after the block
            completed without raising.
    """

    moved: list[Path] = []
    last_error: OSError | None = None
    for path in paths:
        error = quarantine_files([path], suffix=suffix)
        if error is None:
            moved.append(path)
        else:
            last_error = error
    restore_error: OSError | None = None
    try:
        yield last_error
    finally:
        restore_error = restore_files(moved, suffix=suffix)
        if restore_error is not None:
            _LOGGER.error("unable to restore quarantined files: %s", restore_error)
    if restore_error is not None:
        raise QuarantineError(f"Unable to restore quarantined files: {restore_error}", cause=restore_error)


__all__ = ["quarantine_files", "quarantined", "quarantined_name", "restore_files"]
