# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analysis pipeline: discover, hide skipped files, check, restore."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from .checks.formatters import Formatter
from .checks.native_format import NativeFormatChecker
from .checks.runner import CheckerRunner
from .config import AnalysisProfile, CheckDefinition
from .discovery.filesystem import FileDiscoverer
from .errors import NoEligibleFilesError
from .execution.process import CheckCapability
from .models import CheckResult, DiscoveryResult
from .quarantine import quarantined
from .scoring import count_lines
from .urls import SourceURLResolver

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NamedResult:
    """Result of a catalog check paired with its definition."""

    check: CheckDefinition
    result: CheckResult


class AnalysisEngine:
    """Run checks over a directory according to an :class:`AnalysisProfile`.

    Runs are sequential and mutate the target tree while skipped files are
    quarantined, so two engines must never analyse the same directory at
    the same time.
    """

    def __init__(
        self,
        profile: AnalysisProfile,
        *,
        resolver: SourceURLResolver | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self.profile = profile
        self.resolver = resolver or SourceURLResolver(source_root=profile.source_root)
        self.discoverer = FileDiscoverer(profile)
        self.runner = CheckerRunner(profile, resolver=self.resolver)
        self._formatter = formatter

    def discover(self, root: Path) -> DiscoveryResult:
        """Return eligible and skipped files under ``root``."""

        return self.discoverer.discover(root)

    def analyze(
        self,
        root: Path,
        check: CheckCapability | Sequence[str],
        *,
        discovery: DiscoveryResult | None = None,
    ) -> CheckResult:
        """Run ``check`` over ``root``.

        Args:
            root: Directory to analyse.
            check: Check capability or command vector.
            discovery: Previously computed discovery result to reuse.

        Returns:
            CheckResult: Score and per-file summaries.

        Raises:
            NoEligibleFilesError: If no file under ``root`` is eligible.
            QuarantineError: If skipped files could not be restored.
        """

        found = discovery if discovery is not None else self.discover(root)
        self._require_files(root, found)
        line_count = count_lines(found.eligible[0]) if found.is_single_file else None
        with self._hidden(found.skipped):
            return self.runner.run(
                root,
                found.eligible,
                check,
                line_count=line_count,
                excluded=found.skipped,
            )

    def analyze_all(
        self,
        root: Path,
        checks: Sequence[CheckDefinition],
    ) -> Iterator[NamedResult]:
        """Yield the result of each catalog check in order.

        Discovery runs once and is shared by every check. Errors propagate
        from the check that raised them.
        """

        found = self.discover(root)
        self._require_files(root, found)
        for definition in checks:
            _LOGGER.debug("check=%s root=%s", definition.name, root)
            yield NamedResult(check=definition, result=self.analyze(root, definition.command, discovery=found))

    def check_formatting(self, root: Path, *, discovery: DiscoveryResult | None = None) -> CheckResult:
        """Run the in-process formatting check over ``root``."""

        found = discovery if discovery is not None else self.discover(root)
        self._require_files(root, found)
        checker = NativeFormatChecker(self.profile, self._formatter, resolver=self.resolver)
        return checker.check_formatting(root, found.eligible)

    @contextmanager
    def _hidden(self, skipped: Sequence[Path]) -> Iterator[None]:
        if self.profile.supports_file_exclusion or not skipped:
            yield
            return
        with quarantined(skipped, suffix=self.profile.quarantine_suffix) as error:
            if error is not None:
                _LOGGER.warning("some skipped files could not be quarantined: %s", error)
            yield

    @staticmethod
    def _require_files(root: Path, found: DiscoveryResult) -> None:
        if not found.eligible:
            raise NoEligibleFilesError(root)


__all__ = ["AnalysisEngine", "NamedResult"]
