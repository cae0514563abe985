# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for score formulas."""

from __future__ import annotations

from pathlib import Path

import pytest

from reportcard.errors import ScoringError
from reportcard.scoring import count_lines, directory_score, single_file_score


def test_single_file_score_consumes_one_line_per_issue() -> None:
    assert single_file_score(100, 3) == pytest.approx(0.97)


def test_single_file_score_may_go_negative() -> None:
    assert single_file_score(2, 5) == pytest.approx(-1.5)


def test_directory_score_is_pass_rate() -> None:
    assert directory_score(10, 2) == pytest.approx(0.8)
    assert directory_score(4, 0) == 1.0


@pytest.mark.parametrize("call", [lambda: directory_score(0, 0), lambda: single_file_score(0, 1)])
def test_zero_denominator_raises(call) -> None:
    with pytest.raises(ScoringError):
        call()


@pytest.mark.parametrize(("text", "expected"), [("a\nb\nc", 2), ("a\nb\n", 2), ("", 0), ("\n\n\n", 3)])
def test_count_lines_matches_wc(tmp_path: Path, text: str, expected: int) -> None:
    path = tmp_path / "file.go"
    path.write_text(text, encoding="utf-8")

    assert count_lines(path) == expected
