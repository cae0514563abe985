# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, option types)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` and route engine log records to the console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(no_color=no_color, highlight=False, stderr=True)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, show_time=False)],
        force=True,
    )
    return CLILogger(console=console, use_emoji=emoji)


ROOT_ARGUMENT = Annotated[
    Path,
    typer.Argument(exists=True, file_okay=False, dir_okay=True, help="Directory to analyse."),
]
PROFILE_OPTION = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Analysis profile (defaults to the configured profile)."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", help="Configuration file overriding discovery."),
]
JSON_OPTION = Annotated[bool, typer.Option("--json", help="Emit machine-readable JSON.")]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Enable debug logging.")]


__all__ = [
    "CLIError",
    "CLILogger",
    "CONFIG_OPTION",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "JSON_OPTION",
    "PROFILE_OPTION",
    "ROOT_ARGUMENT",
    "build_cli_logger",
]
