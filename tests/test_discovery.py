# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for source file discovery and exclusion rules."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from reportcard.config import AnalysisProfile
from reportcard.discovery import FileDiscoverer, has_generated_marker, is_generated

GENERATED_HEADER = "// Code generated by tool; DO NOT EDIT.\n"


def _build_tree(root: Path, write) -> None:
    write(root / "a.go", "package a\n")
    write(root / "b.go", GENERATED_HEADER + "package a\n")
    write(root / "c.pb.go", "package a\n")
    write(root / "g.go", "/* AUTOGENERATED FILE */\npackage a\n")
    write(root / "readme.md", "# readme\n")
    write(root / "vendor" / "x" / "d.go", "package x\n")
    write(root / "vendor" / "x" / "d.pb.go", "package x\n")
    write(root / "sub" / "e.go", "package sub\n")
    write(root / "sub" / "f_string.go", "package sub\n")
    write(root / "sub" / "third_party" / "h.go", "package h\n")


def test_discover_splits_eligible_and_skipped(tmp_path: Path, go: AnalysisProfile, write) -> None:
    _build_tree(tmp_path, write)

    found = FileDiscoverer(go).discover(tmp_path)

    eligible = {path.relative_to(tmp_path).as_posix() for path in found.eligible}
    skipped = {path.relative_to(tmp_path).as_posix() for path in found.skipped}
    assert eligible == {"a.go", "sub/e.go"}
    assert skipped == {"b.go", "c.pb.go", "g.go", "sub/f_string.go"}


def test_discover_results_are_disjoint_and_cover_tree(tmp_path: Path, go: AnalysisProfile, write) -> None:
    _build_tree(tmp_path, write)

    found = FileDiscoverer(go).discover(tmp_path)

    assert not set(found.eligible) & set(found.skipped)
    analysable = {
        path
        for path in tmp_path.rglob("*.go")
        if not {"vendor", "third_party", "Godeps"} & set(path.relative_to(tmp_path).parts)
    }
    assert set(found.eligible) | set(found.skipped) == analysable


def test_discover_logs_walk_errors_and_continues(
    tmp_path: Path, go: AnalysisProfile, caplog: pytest.LogCaptureFixture
) -> None:
    missing = tmp_path / "missing"

    with caplog.at_level(logging.WARNING):
        found = FileDiscoverer(go).discover(missing)

    assert found.eligible == ()
    assert "unable to walk" in caplog.text


def test_discover_python_profile_uses_hash_comments(tmp_path: Path, python: AnalysisProfile, write) -> None:
    write(tmp_path / "app.py", "x = 1\n")
    write(tmp_path / "gen.py", "# @generated by protoc\nx = 1\n")
    write(tmp_path / "msg_pb2.py", "x = 1\n")
    write(tmp_path / ".venv" / "lib.py", "x = 1\n")

    found = FileDiscoverer(python).discover(tmp_path)

    assert [path.name for path in found.eligible] == ["app.py"]
    assert sorted(path.name for path in found.skipped) == ["gen.py", "msg_pb2.py"]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("// Code generated by tool; DO NOT EDIT.", True),
        ("//Code generated by tool", True),
        ("/* generated */", True),
        ("/*@generated", True),
        ("// AUTO-GENERATED FILE", True),
        ("// This file was generated", False),
        ("  // code generated", False),
        ("package main", False),
        ("", False),
    ],
)
def test_generated_marker_detection(line: str, expected: bool, go: AnalysisProfile) -> None:
    assert has_generated_marker(line, go) is expected


def test_generated_detection_reads_first_line_only(tmp_path: Path, go: AnalysisProfile, write) -> None:
    path = write(tmp_path / "late.go", "package late\n// Code generated by tool\n")

    assert not is_generated(path, go)


def test_generated_detection_treats_unreadable_file_as_handwritten(tmp_path: Path, go: AnalysisProfile) -> None:
    assert not is_generated(tmp_path / "absent.go", go)
