# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the analysis engine."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import FileSummary


class ReportCardError(RuntimeError):
    """Base class for all engine failures surfaced to callers."""


class ConfigError(ReportCardError):
    """Raised when configuration input is invalid."""


class CheckerLaunchError(ReportCardError):
    """Raised when a check command cannot be started."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        """Record the command that failed to launch.

        Args:
            command: Argument vector passed to the process boundary.
            reason: Human-readable cause reported by the operating system.
        """

        head = command[0] if command else "<empty>"
        super().__init__(f"Unable to launch '{head}': {reason}")
        self.command = tuple(command)


class CheckerExecutionError(ReportCardError):
    """Raised when a check exits with an unexpected status.

    Summaries already gathered from the output stream travel with the error
    so callers may inspect partial data.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        summaries: Sequence[FileSummary] = (),
    ) -> None:
        head = command[0] if command else "<check>"
        super().__init__(f"Command '{head}' exited with status {returncode}")
        self.command = tuple(command)
        self.returncode = returncode
        self.summaries = list(summaries)


class OutputParseError(ReportCardError, ValueError):
    """Raised when a report line does not follow ``path:line:column:message``."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Malformed report line ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class FormatError(ReportCardError):
    """Raised when the in-process formatter rejects a file."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Unable to format {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class QuarantineError(ReportCardError):
    """Raised when quarantined files could not be restored."""

    def __init__(self, message: str, *, cause: OSError | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ScoringError(ReportCardError, ValueError):
    """Raised when a score would require dividing by zero."""


class NoEligibleFilesError(ReportCardError):
    """Raised when discovery yields nothing to analyse."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"No eligible source files found under {root}")
        self.root = root


__all__ = [
    "CheckerExecutionError",
    "CheckerLaunchError",
    "ConfigError",
    "FormatError",
    "NoEligibleFilesError",
    "OutputParseError",
    "QuarantineError",
    "ReportCardError",
    "ScoringError",
]
