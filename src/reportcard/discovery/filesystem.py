# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem discovery of analysable source files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from ..config import AnalysisProfile
from ..models import DiscoveryResult
from .rules import has_skipped_suffix, is_generated

_LOGGER = logging.getLogger(__name__)


class FileDiscoverer:
    """Walk a directory tree splitting source files into eligible and skipped."""

    def __init__(self, profile: AnalysisProfile, *, follow_symlinks: bool = False) -> None:
        """Create a discoverer bound to ``profile``.

        Args:
            profile: Exclusion rules and recognised extensions.
            follow_symlinks: When ``True`` walk directories pointed to by
                symlinks instead of skipping them.
        """

        self.profile = profile
        self.follow_symlinks = follow_symlinks
        self._skip_dirs = frozenset(profile.skip_dirs)

    def discover(self, root: Path) -> DiscoveryResult:
        """Return eligible and skipped files beneath ``root``.

        Subtrees named in the profile's ``skip_dirs`` are pruned entirely.
        Files with an unrecognised extension are ignored. Files matching an
        excluded suffix or carrying a generated marker are reported as
        skipped. Errors while visiting a subtree are logged and the walk
        continues elsewhere.

        Args:
            root: Directory to analyse.

        Returns:
            DiscoveryResult: Eligible and skipped file paths.
        """

        eligible: list[Path] = []
        skipped: list[Path] = []
        for candidate in self._walk(root):
            if has_skipped_suffix(candidate.name, self.profile):
                skipped.append(candidate)
                continue
            if candidate.suffix not in self.profile.extensions:
                continue
            if is_generated(candidate, self.profile):
                skipped.append(candidate)
                continue
            eligible.append(candidate)
        return DiscoveryResult(eligible=tuple(eligible), skipped=tuple(skipped))

    def _walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(
            root,
            onerror=self._log_walk_error,
            followlinks=self.follow_symlinks,
        ):
            current = Path(dirpath)
            dirnames[:] = sorted(name for name in dirnames if name not in self._skip_dirs)
            for filename in sorted(filenames):
                candidate = current / filename
                if candidate.is_file():
                    yield candidate

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        _LOGGER.warning("unable to walk %s: %s", error.filename, error.strerror or error)


__all__ = ["FileDiscoverer"]
