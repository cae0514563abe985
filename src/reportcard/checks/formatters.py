# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatters computing the canonical form of a source file."""

from __future__ import annotations

import shutil

# Bandit: gofmt is invoked with an argument list and fed through stdin.
import subprocess  # nosec B404
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

import black

from ..config import AnalysisProfile
from ..errors import ConfigError, FormatError


@runtime_checkable
class Formatter(Protocol):
    """Callable returning the canonical bytes for ``source``."""

    def __call__(self, source: bytes, path: Path) -> bytes:
        """Return the formatted form of ``source``.

        Raises:
            FormatError: If ``source`` cannot be formatted.
        """
        ...


@dataclass(frozen=True, slots=True)
class BlackFormatter:
    """Format Python sources in-process with :mod:`black`."""

    mode: black.Mode = field(default_factory=black.Mode)

    def __call__(self, source: bytes, path: Path) -> bytes:
        try:
            text = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError(path, f"not valid UTF-8: {exc}") from exc
        try:
            formatted = black.format_file_contents(text, fast=False, mode=self.mode)
        except black.NothingChanged:
            return source
        except black.InvalidInput as exc:
            raise FormatError(path, str(exc)) from exc
        return formatted.encode("utf-8")


@dataclass(frozen=True, slots=True)
class GofmtFormatter:
    """Format Go sources by piping them through ``gofmt``.

    Only the file's bytes cross the process boundary; ``gofmt`` never scans
    the directory, so quarantine is not involved.
    """

    executable: str = "gofmt"
    args: tuple[str, ...] = ()

    def __call__(self, source: bytes, path: Path) -> bytes:
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise FormatError(path, f"executable '{self.executable}' was not found on PATH")
        # Bandit: fixed argument list without shell expansion.
        completed = subprocess.run(  # nosec B603
            [resolved, *self.args],
            input=source,
            capture_output=True,
            check=False,
        )
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise FormatError(path, stderr or f"gofmt exited with status {completed.returncode}")
        return completed.stdout


def formatter_for(profile: AnalysisProfile) -> Formatter:
    """Return the formatter named by ``profile``.

    Args:
        profile: Profile whose ``formatter`` setting selects the implementation.

    Returns:
        Formatter: Formatter instance.

    Raises:
        ConfigError: If the profile names an unknown formatter.
    """

    if profile.formatter == "black":
        return BlackFormatter()
    if profile.formatter == "gofmt":
        return GofmtFormatter()
    raise ConfigError(f"Unknown formatter '{profile.formatter}'")


__all__ = ["BlackFormatter", "Formatter", "GofmtFormatter", "formatter_for"]
