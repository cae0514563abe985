# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatting check computed without scanning the directory."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import AnalysisProfile
from ..discovery.rules import is_excluded_file
from ..errors import FormatError
from ..models import CheckResult, Issue
from ..parsers.summaries import SummaryCollector
from ..scoring import directory_score
from ..urls import SourceURLResolver
from .formatters import Formatter, formatter_for


@dataclass(frozen=True, slots=True)
class FormatCheck:
    """Compare files with the canonical form produced by ``formatter``."""

    profile: AnalysisProfile
    formatter: Formatter

    def unformatted(self, files: Sequence[Path]) -> Iterator[Path]:
        """Yield every file in ``files`` whose formatting differs.

        Files excluded by suffix or generated marker are passed over.

        Raises:
            FormatError: If a file cannot be read or formatted.
        """

        for path in files:
            if is_excluded_file(path, self.profile):
                continue
            try:
                source = path.read_bytes()
            except OSError as exc:
                raise FormatError(path, str(exc)) from exc
            if self.formatter(source, path) != source:
                yield path


class NativeFormatChecker:
    """Compare each file with its canonical formatted form.

    The Python profile formats in-process with black. The Go profile pipes
    each file through ``gofmt``, which must therefore be on ``PATH``; the
    directory itself is never handed to an external tool.
    """

    def __init__(
        self,
        profile: AnalysisProfile,
        formatter: Formatter | None = None,
        *,
        resolver: SourceURLResolver | None = None,
    ) -> None:
        self.profile = profile
        self.formatter = formatter if formatter is not None else formatter_for(profile)
        self.resolver = resolver or SourceURLResolver(source_root=profile.source_root)

    def check_formatting(self, directory: Path, files: Sequence[Path]) -> CheckResult:
        """Score ``files`` by the share that is already formatted.

        Args:
            directory: Directory the files belong to.
            files: Eligible files to format.

        Returns:
            CheckResult: Per-file pass rate and one summary per unformatted file.

        Raises:
            FormatError: If any file cannot be read or formatted; the whole
                batch is abandoned.
            ScoringError: If ``files`` is empty.
        """

        check = FormatCheck(profile=self.profile, formatter=self.formatter)
        collector = SummaryCollector(self.profile, directory, resolver=self.resolver)
        for path in check.unformatted(files):
            collector.add(str(path), Issue(line_number=1, message=self.profile.format_message))
        summaries = collector.summaries()
        failing = sum(1 for summary in summaries if summary.issues)
        return CheckResult(score=directory_score(len(files), failing), summaries=summaries)


__all__ = ["FormatCheck", "NativeFormatChecker"]
