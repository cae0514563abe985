# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering report line parsing and per-file grouping."""

from __future__ import annotations

from pathlib import Path

import pytest

from reportcard.config import AnalysisProfile
from reportcard.errors import OutputParseError
from reportcard.models import Issue
from reportcard.parsers import SummaryCollector, parse_line


def test_parse_line_extracts_line_and_message() -> None:
    assert parse_line("pkg/file.go:42:7: unused variable x") == Issue(line_number=42, message="unused variable x")


def test_parse_line_keeps_embedded_separators() -> None:
    issue = parse_line("main.go:3:10: expected ':', found 'x' (and 2 more: a:b)")

    assert issue.line_number == 3
    assert issue.message == "expected ':', found 'x' (and 2 more: a:b)"


@pytest.mark.parametrize(
    "line",
    [
        "no separators at all",
        "main.go:12",
        "main.go:12: missing column",
        "main.go:twelve:1: bad line number",
        "main.go:0:1: line numbers start at one",
        ":1:1: missing path",
        "main.go: 42:1: padded line number",
        "main.go:4_2:1: underscore separated line number",
        "main.go:+42:1: signed line number",
    ],
)
def test_parse_line_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(OutputParseError) as excinfo:
        parse_line(line)
    assert excinfo.value.line == line


def test_collector_groups_repeated_files(tmp_path: Path, go: AnalysisProfile) -> None:
    collector = SummaryCollector(go, tmp_path)

    for line in (
        f"{tmp_path}/b.go:9:1: second file",
        f"{tmp_path}/a.go:1:1: first",
        f"{tmp_path}/b.go:2:4: again",
        f"{tmp_path}/a.go:5:2: second",
    ):
        assert collector.add_line(line)

    summaries = collector.summaries()
    assert [summary.filename for summary in summaries] == ["a.go", "b.go"]
    assert [issue.line_number for issue in summaries[0].issues] == [1, 5]
    assert [issue.message for issue in summaries[1].issues] == ["second file", "again"]
    assert all(summary.file_url == "" for summary in summaries)


def test_collector_normalises_staged_paths(go: AnalysisProfile) -> None:
    collector = SummaryCollector(go, Path("repos/src/github.com/owner/repo"))

    collector.add_line("repos/src/github.com/owner/repo/sub/file.go:3:1: exported func should have comment")

    (summary,) = collector.summaries()
    assert summary.filename == "repo/sub/file.go"
    assert summary.file_url == "https://github.com/owner/repo/blob/master/sub/file.go"


def test_collector_filters_suffix_excluded_files(tmp_path: Path, go: AnalysisProfile) -> None:
    collector = SummaryCollector(go, tmp_path)

    assert not collector.add_line(f"{tmp_path}/api.pb.go:1:1: generated")
    assert not collector.add_line(f"{tmp_path}/api.pb.go:not-a-number")
    assert collector.summaries() == []


def test_collector_filters_generated_files(tmp_path: Path, go: AnalysisProfile, write) -> None:
    generated = write(tmp_path / "nested" / "gen.go", "// Code generated by mockgen. DO NOT EDIT.\n")

    collector = SummaryCollector(go, tmp_path)

    assert not collector.add_line(f"{generated}:4:1: ineffectual assignment")
    assert len(collector) == 0


def test_collector_never_reports_skipped_files(tmp_path: Path, go: AnalysisProfile, write) -> None:
    skipped = write(tmp_path / "hand.go", "package hand\n")

    collector = SummaryCollector(go, tmp_path, skipped=[skipped])

    assert not collector.add_line(f"{skipped}:1:1: should be hidden")
    assert collector.summaries() == []


def test_collector_records_issues_for_paths_with_separators(tmp_path: Path, go: AnalysisProfile) -> None:
    collector = SummaryCollector(go, tmp_path)

    assert collector.add(f"{tmp_path}/a:b.go", Issue(line_number=1, message="file is not gofmted"))
    assert not collector.add(f"{tmp_path}/x:y.pb.go", Issue(line_number=1, message="generated"))

    (summary,) = collector.summaries()
    assert summary.filename == "a:b.go"
    assert summary.issues == [Issue(line_number=1, message="file is not gofmted")]
