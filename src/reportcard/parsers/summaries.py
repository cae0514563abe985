# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Group parsed report lines into per-file summaries."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..config import AnalysisProfile
from ..discovery.rules import has_skipped_suffix, is_generated
from ..filesystem.paths import display_filename, strip_source_root
from ..models import FileSummary, Issue
from ..urls import SourceURLResolver
from .base import parse_line, split_path


class SummaryCollector:
    """Accumulate issues per file for a single check run.

    Files are keyed by their normalised path, so the same file reported
    several times out of order maps onto one summary.
    """

    def __init__(
        self,
        profile: AnalysisProfile,
        directory: Path,
        *,
        resolver: SourceURLResolver | None = None,
        skipped: Iterable[Path] = (),
    ) -> None:
        self.profile = profile
        self.directory = directory
        self.resolver = resolver or SourceURLResolver(source_root=profile.source_root)
        self._skipped = frozenset(_resolve(path) for path in skipped)
        self._summaries: dict[str, FileSummary] = {}

    def add_line(self, line: str) -> bool:
        """Parse ``line`` and record its issue.

        Args:
            line: Raw report line.

        Returns:
            bool: ``False`` when the file was excluded and nothing was recorded.

        Raises:
            OutputParseError: If the line is malformed.
        """

        raw_path, _ = split_path(line)
        filename = strip_source_root(raw_path, self.profile.source_root)
        if self._is_excluded(raw_path, filename):
            return False
        self._record(filename, parse_line(line))
        return True

    def add(self, path: str, issue: Issue) -> bool:
        """Record ``issue`` for ``path`` without going through report text.

        Args:
            path: File path as the check saw it.
            issue: Issue to attach.

        Returns:
            bool: ``False`` when the file was excluded and nothing was recorded.
        """

        filename = strip_source_root(path, self.profile.source_root)
        if self._is_excluded(path, filename):
            return False
        self._record(filename, issue)
        return True

    def _record(self, filename: str, issue: Issue) -> None:
        summary = self._summaries.get(filename)
        if summary is None:
            summary = FileSummary(
                filename=display_filename(filename, base_dir=self.directory),
                file_url=self.resolver.resolve(self.directory.as_posix(), filename),
            )
            self._summaries[filename] = summary
        summary.add_issue(issue)

    def _is_excluded(self, raw_path: str, filename: str) -> bool:
        if has_skipped_suffix(filename, self.profile):
            return True
        path = Path(raw_path)
        if self._skipped and _resolve(path) in self._skipped:
            return True
        return path.is_file() and is_generated(path, self.profile)

    def summaries(self) -> list[FileSummary]:
        """Return collected summaries sorted by filename."""

        return sorted(self._summaries.values(), key=lambda summary: summary.filename)

    def __len__(self) -> int:
        return len(self._summaries)


def _resolve(path: Path) -> Path:
    try:
        return path.resolve()
    except OSError:
        return path.absolute()


__all__ = ["SummaryCollector"]
