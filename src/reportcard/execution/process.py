# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Check capabilities producing line-oriented reports.

A check capability is any callable taking ``(directory, files)`` plus the
files to exclude and returning a :class:`CheckStream`. External commands and
in-process checks share this seam so both flow through the same parser.
"""

from __future__ import annotations

import logging
import shlex
import shutil

# Bandit: subprocess usage is intentional; commands are passed as argument
# lists and never through a shell.
import subprocess  # nosec B404
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..config import AnalysisProfile
from ..constants import FINDINGS_EXIT_CODE
from ..errors import CheckerLaunchError
from ..models import ExitClassification

_LOGGER = logging.getLogger(__name__)


def classify_exit(returncode: int, findings_exit_code: int = FINDINGS_EXIT_CODE) -> ExitClassification:
    """Interpret ``returncode`` for a check.

    Args:
        returncode: Exit status reported by the process.
        findings_exit_code: Status the tool uses to signal reported findings.

    Returns:
        ExitClassification: Success, findings, or failure.
    """

    if returncode == 0:
        return ExitClassification.SUCCESS
    if returncode == findings_exit_code:
        return ExitClassification.FINDINGS
    return ExitClassification.FAILURE


@runtime_checkable
class CheckStream(Protocol):
    """Line stream produced by a running check."""

    command: tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        """Yield report lines without trailing newlines."""
        ...

    def wait(self) -> ExitClassification:
        """Block until the check finished and classify its exit."""
        ...

    @property
    def returncode(self) -> int | None:
        """Return the raw exit status once available."""
        ...

    def close(self) -> None:
        """Abandon the stream, stopping any underlying process."""
        ...


@runtime_checkable
class CheckCapability(Protocol):
    """Callable launching a check over ``directory``."""

    def __call__(
        self,
        directory: Path,
        files: Sequence[Path],
        *,
        excluded: Sequence[Path] = (),
    ) -> CheckStream:
        """Start the check and return its report stream."""
        ...


@dataclass(slots=True)
class LineStream:
    """Stream over an iterable of lines with a fixed exit status."""

    lines: Iterable[str]
    exit_code: int = 0
    findings_exit_code: int = FINDINGS_EXIT_CODE
    command: tuple[str, ...] = ("<in-process>",)

    def __iter__(self) -> Iterator[str]:
        for line in self.lines:
            yield line.rstrip("\r\n")

    def wait(self) -> ExitClassification:
        return classify_exit(self.exit_code, self.findings_exit_code)

    @property
    def returncode(self) -> int | None:
        return self.exit_code

    def close(self) -> None:
        return None


@dataclass(slots=True)
class ProcessStream:
    """Stream attached to a child process's standard output."""

    process: subprocess.Popen[str]
    command: tuple[str, ...]
    findings_exit_code: int = FINDINGS_EXIT_CODE

    def __iter__(self) -> Iterator[str]:
        stdout = self.process.stdout
        if stdout is None:
            return
        for line in stdout:
            yield line.rstrip("\r\n")

    def wait(self) -> ExitClassification:
        """Drain remaining output, reap the child, and classify its exit."""

        if self.process.stdout is not None:
            for _ in self.process.stdout:
                pass
            self.process.stdout.close()
        returncode = self.process.wait()
        classification = classify_exit(returncode, self.findings_exit_code)
        _LOGGER.debug("command=%s returncode=%s classification=%s", self.command[0], returncode, classification.value)
        return classification

    @property
    def returncode(self) -> int | None:
        return self.process.returncode

    def close(self) -> None:
        """Terminate the child when the caller stops consuming its report."""

        if self.process.poll() is None:
            self.process.kill()
        if self.process.stdout is not None:
            self.process.stdout.close()
        self.process.wait()


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        raise CheckerLaunchError(args, "command requires at least one argument")
    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]
    resolved = shutil.which(head)
    if resolved is None:
        raise CheckerLaunchError(args, f"executable '{head}' was not found on PATH")
    return [resolved, *rest]


def launch(command: Sequence[str], *, findings_exit_code: int = FINDINGS_EXIT_CODE) -> ProcessStream:
    """Start ``command`` with stdout attached as a text line stream.

    Args:
        command: Argument vector; the executable is resolved via ``PATH``.
        findings_exit_code: Status treated as reported findings.

    Returns:
        ProcessStream: Stream over the child's standard output.

    Raises:
        CheckerLaunchError: If the executable is missing or cannot start.
    """

    normalized = _normalize_args(command)
    _LOGGER.debug("command=%s", shlex.join(command))
    try:
        # Bandit: commands originate from vetted profile configuration and are
        # passed as argument lists without shell expansion.
        process = subprocess.Popen(  # nosec B603
            normalized,
            stdout=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            text=True,
            bufsize=1,
            errors="replace",
        )
    except OSError as exc:
        raise CheckerLaunchError(command, str(exc)) from exc
    return ProcessStream(process=process, command=tuple(command), findings_exit_code=findings_exit_code)


@dataclass(frozen=True, slots=True)
class CommandCheck:
    """Check capability backed by an external command.

    The argument vector is the base command, one exclusion flag per excluded
    directory name, one flag per excluded file when the profile supports
    per-file exclusion, and finally the recursive scope on ``directory``.
    """

    command: tuple[str, ...]
    profile: AnalysisProfile
    extra_args: tuple[str, ...] = field(default_factory=tuple)

    def build_command(self, directory: Path, excluded: Sequence[Path] = ()) -> list[str]:
        """Return the full argument vector for ``directory``.

        Args:
            directory: Directory the check should scan.
            excluded: Files excluded through the profile's file flag.

        Returns:
            list[str]: Complete argument vector.
        """

        params = [*self.command, *self.extra_args]
        params.extend(self._dir_exclusions())
        if self.profile.file_exclude_flag is not None:
            params.extend(self.profile.file_exclude_flag.format(path=str(path)) for path in excluded)
        params.append(self.profile.scope_template.format(dir=str(directory)))
        return params

    def _dir_exclusions(self) -> list[str]:
        names = list(self.profile.skip_dirs)
        if not names:
            return []
        if self.profile.exclude_separator is not None:
            return [self.profile.exclude_dir_flag.format(name=self.profile.exclude_separator.join(names))]
        return [self.profile.exclude_dir_flag.format(name=name) for name in names]

    def __call__(
        self,
        directory: Path,
        files: Sequence[Path],
        *,
        excluded: Sequence[Path] = (),
    ) -> CheckStream:
        del files  # the command scans ``directory`` recursively
        return launch(
            self.build_command(directory, excluded),
            findings_exit_code=self.profile.findings_exit_code,
        )


__all__ = [
    "CheckCapability",
    "CheckStream",
    "CommandCheck",
    "LineStream",
    "ProcessStream",
    "classify_exit",
    "launch",
]
