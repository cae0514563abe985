# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for check results."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from rich import box
from rich.table import Table
from rich.text import Text

from ..config import AnalysisProfile
from ..console import get_console_manager
from ..engine import NamedResult
from ..models import CheckResult, DiscoveryResult


def _percent(score: float) -> str:
    return f"{score * 100:.1f}%"


def render_result(name: str, result: CheckResult, *, use_color: bool = True) -> None:
    """Print the score and issues of one check as Rich tables.

    Args:
        name: Check name shown in the table title.
        result: Result to render.
        use_color: Flag indicating whether colour output is desired.
    """

    console = get_console_manager().get(color=use_color, emoji=False)
    style = "green" if result.failing_files == 0 else "yellow"
    console.print(Text(f"{name}: {_percent(result.score)}", style=style if use_color else ""))
    if not result.summaries:
        return
    table = Table(box=box.SIMPLE, show_header=True, expand=False)
    table.add_column("File", no_wrap=True)
    table.add_column("Line", justify="right")
    table.add_column("Message")
    for summary in result.summaries:
        for issue in summary.issues:
            table.add_row(summary.filename, str(issue.line_number), issue.message)
    console.print(table)


def render_results(results: Sequence[NamedResult], *, use_color: bool = True) -> None:
    """Render each named result in order."""

    for named in results:
        render_result(named.check.name, named.result, use_color=use_color)


def render_discovery(found: DiscoveryResult, root: Path) -> None:
    """Print eligible and skipped files relative to ``root``."""

    console = get_console_manager().get(color=False, emoji=False)
    for label, paths in (("eligible", found.eligible), ("skipped", found.skipped)):
        console.print(f"{label} ({len(paths)}):")
        for path in paths:
            console.print(f"  {_relative(path, root)}")


def render_catalog(profile: AnalysisProfile) -> None:
    """Print the checks declared by ``profile``."""

    table = Table(box=box.SIMPLE, title=f"Checks for profile '{profile.name}'")
    table.add_column("Name", no_wrap=True)
    table.add_column("Command")
    table.add_column("Description")
    for definition in profile.checks:
        table.add_row(definition.name, " ".join(definition.command), definition.description)
    get_console_manager().get(color=False, emoji=False).print(table)


def results_json(results: Sequence[NamedResult]) -> str:
    """Return ``results`` serialised as a JSON document."""

    payload = [
        {"name": named.check.name, "description": named.check.description, **named.result.model_dump(mode="json")}
        for named in results
    ]
    return json.dumps(payload, indent=2)


def discovery_json(found: DiscoveryResult, root: Path) -> str:
    """Return ``found`` serialised as a JSON document with root-relative paths."""

    payload = {
        "eligible": [_relative(path, root) for path in found.eligible],
        "skipped": [_relative(path, root) for path in found.skipped],
    }
    return json.dumps(payload, indent=2)


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = [
    "discovery_json",
    "render_catalog",
    "render_discovery",
    "render_result",
    "render_results",
    "results_json",
]
