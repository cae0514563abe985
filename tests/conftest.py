# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from reportcard.config import AnalysisProfile, go_profile, python_profile


@pytest.fixture
def go() -> AnalysisProfile:
    """Return the built-in Go profile."""
    return go_profile()


@pytest.fixture
def python() -> AnalysisProfile:
    """Return the built-in Python profile."""
    return python_profile()


@pytest.fixture
def write() -> Callable[[Path, str], Path]:
    """Return a helper writing ``text`` to ``path`` creating parents."""

    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def report_script(tmp_path: Path) -> Callable[[Sequence[str], int], list[str]]:
    """Return a factory building a command that prints ``lines`` and exits with ``code``."""

    def _build(lines: Sequence[str], code: int = 0) -> list[str]:
        script = tmp_path / f"report_{len(list(tmp_path.glob('report_*.py')))}.py"
        body = "".join(f"print({line!r})\n" for line in lines)
        script.write_text(f"import sys\n{body}sys.exit({code})\n", encoding="utf-8")
        return [sys.executable, str(script)]

    return _build
