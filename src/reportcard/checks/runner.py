# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run line-reporting checks and score their findings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..config import AnalysisProfile
from ..errors import CheckerExecutionError, OutputParseError, ScoringError
from ..execution.process import CheckCapability, CheckStream, CommandCheck
from ..models import CheckResult, ExitClassification, FileSummary
from ..parsers.summaries import SummaryCollector
from ..scoring import directory_score, single_file_score
from ..urls import SourceURLResolver

_LOGGER = logging.getLogger(__name__)


def collect_stream(stream: CheckStream, collector: SummaryCollector) -> list[FileSummary]:
    """Feed every line of ``stream`` into ``collector`` and reap the check.

    Args:
        stream: Running check.
        collector: Collector receiving parsed lines.

    Returns:
        list[FileSummary]: Summaries sorted by filename.

    Raises:
        OutputParseError: If any line is malformed; no partial data is kept.
        CheckerExecutionError: If the check exits with an unexpected status;
            the summaries gathered so far are attached.
    """

    try:
        for line in stream:
            if not line.strip():
                continue
            collector.add_line(line)
    except OutputParseError:
        stream.close()
        raise
    summaries = collector.summaries()
    classification = stream.wait()
    if classification is ExitClassification.FAILURE:
        raise CheckerExecutionError(stream.command, stream.returncode, summaries)
    return summaries


class CheckerRunner:
    """Drive a check over a directory and score the reported issues."""

    def __init__(self, profile: AnalysisProfile, *, resolver: SourceURLResolver | None = None) -> None:
        self.profile = profile
        self.resolver = resolver or SourceURLResolver(source_root=profile.source_root)

    def run(
        self,
        directory: Path,
        files: Sequence[Path],
        check: CheckCapability | Sequence[str],
        *,
        line_count: int | None = None,
        excluded: Iterable[Path] = (),
    ) -> CheckResult:
        """Run ``check`` over ``directory`` and score it against ``files``.

        With exactly one file the score is line based and ``line_count`` is
        required; otherwise it is the per-file pass rate.

        Args:
            directory: Directory the check scans.
            files: Eligible files; their count is the score denominator.
            check: Check capability, or a bare command vector.
            line_count: Line count of the single file in single-file mode.
            excluded: Skipped files that must never produce a summary.

        Returns:
            CheckResult: Score and summaries sorted by filename.

        Raises:
            CheckerLaunchError: If the command cannot be started.
            CheckerExecutionError: If the check exits unexpectedly.
            OutputParseError: If the report contains a malformed line.
            ScoringError: If there is nothing to score against.
        """

        capability = self._capability(check)
        skipped = tuple(excluded)
        collector = SummaryCollector(self.profile, directory, resolver=self.resolver, skipped=skipped)
        stream = capability(directory, files, excluded=skipped)
        summaries = collect_stream(stream, collector)
        _LOGGER.debug("check=%s files=%d failing=%d", stream.command[0], len(files), len(summaries))
        return CheckResult(score=self._score(files, summaries, line_count), summaries=summaries)

    def _capability(self, check: CheckCapability | Sequence[str]) -> CheckCapability:
        if isinstance(check, (list, tuple)):
            return CommandCheck(command=tuple(check), profile=self.profile)
        return check

    @staticmethod
    def _score(files: Sequence[Path], summaries: Sequence[FileSummary], line_count: int | None) -> float:
        if len(files) == 1:
            if line_count is None:
                raise ScoringError("single-file mode requires the file's line count")
            issues = sum(summary.issue_count for summary in summaries)
            return single_file_score(line_count, issues)
        failing = sum(1 for summary in summaries if summary.issues)
        return directory_score(len(files), failing)


__all__ = ["CheckerRunner", "collect_stream"]
