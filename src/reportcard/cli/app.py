# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ..checks.catalog import adhoc_check, select_checks
from ..config import AnalysisProfile, CheckDefinition
from ..config_loader import load_config
from ..engine import AnalysisEngine, NamedResult
from ..errors import CheckerExecutionError, ReportCardError
from .rendering import (
    discovery_json,
    render_catalog,
    render_discovery,
    render_result,
    render_results,
    results_json,
)
from .shared import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    JSON_OPTION,
    PROFILE_OPTION,
    ROOT_ARGUMENT,
    CLIError,
    CLILogger,
    build_cli_logger,
)

app = typer.Typer(help="Grade source trees with line-reporting checks.", no_args_is_help=True)


def _load_profile(root: Path, profile: str | None, config_path: Path | None) -> AnalysisProfile:
    try:
        return load_config(root, config_path=config_path).profile(profile)
    except ReportCardError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def _abort(logger: CLILogger, exc: CLIError) -> typer.Exit:
    logger.fail(str(exc))
    return typer.Exit(code=exc.exit_code)


@app.command("discover")
def discover(
    root: ROOT_ARGUMENT,
    profile: PROFILE_OPTION = None,
    config: CONFIG_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """List the files eligible for analysis and those skipped."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    resolved = root.resolve()
    try:
        selected = _load_profile(resolved, profile, config)
    except CLIError as exc:
        raise _abort(logger, exc) from exc
    found = AnalysisEngine(selected).discover(resolved)
    if as_json:
        logger.echo(discovery_json(found, resolved))
        return
    logger.info(f"Profile '{selected.name}': {len(found.eligible)} eligible, {len(found.skipped)} skipped")
    render_discovery(found, resolved)


@app.command("checks")
def list_checks(
    root: Annotated[Path, typer.Option("--root", help="Directory searched for configuration.")] = Path("."),
    profile: PROFILE_OPTION = None,
    config: CONFIG_OPTION = None,
    emoji: EMOJI_OPTION = True,
) -> None:
    """List the checks declared by the active profile."""

    logger = build_cli_logger(emoji=emoji)
    try:
        selected = _load_profile(root.resolve(), profile, config)
    except CLIError as exc:
        raise _abort(logger, exc) from exc
    render_catalog(selected)


@app.command("check")
def check(
    root: ROOT_ARGUMENT,
    names: Annotated[
        list[str] | None,
        typer.Option("--check", "-c", help="Catalog check to run (repeatable; defaults to all)."),
    ] = None,
    command: Annotated[
        str | None,
        typer.Option("--command", help="Ad-hoc command reporting path:line:column:message lines."),
    ] = None,
    profile: PROFILE_OPTION = None,
    config: CONFIG_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Run catalog checks (or an ad-hoc command) and print their scores."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    resolved = root.resolve()
    try:
        selected = _load_profile(resolved, profile, config)
        if command is not None:
            argv = shlex.split(command)
            if not argv:
                raise CLIError("--command must name an executable", exit_code=2)
            definitions = [adhoc_check(argv)]
        else:
            try:
                definitions = select_checks(selected, names or ())
            except ReportCardError as exc:
                raise CLIError(str(exc), exit_code=2) from exc
        results = _run_checks(AnalysisEngine(selected), resolved, definitions)
    except CLIError as exc:
        raise _abort(logger, exc) from exc
    if as_json:
        logger.echo(results_json(results))
    else:
        render_results(results)


def _run_checks(engine: AnalysisEngine, root: Path, definitions: Sequence[CheckDefinition]) -> list[NamedResult]:
    try:
        return list(engine.analyze_all(root, definitions))
    except CheckerExecutionError as exc:
        partial = len(exc.summaries)
        raise CLIError(f"{exc} ({partial} file summaries gathered before failure)") from exc
    except ReportCardError as exc:
        raise CLIError(str(exc)) from exc


@app.command("fmt")
def fmt(
    root: ROOT_ARGUMENT,
    profile: PROFILE_OPTION = None,
    config: CONFIG_OPTION = None,
    as_json: JSON_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check formatting in-process against the profile's formatter."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    resolved = root.resolve()
    try:
        selected = _load_profile(resolved, profile, config)
        try:
            result = AnalysisEngine(selected).check_formatting(resolved)
        except ReportCardError as exc:
            raise CLIError(str(exc)) from exc
    except CLIError as exc:
        raise _abort(logger, exc) from exc
    if as_json:
        logger.echo(result.model_dump_json(indent=2))
        return
    render_result(selected.formatter, result)
    if not result.summaries:
        logger.ok("All files are formatted")


__all__ = ["app"]
