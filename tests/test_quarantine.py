# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for reversible quarantine of skipped files."""

from __future__ import annotations

from pathlib import Path

import pytest

from reportcard.errors import QuarantineError
from reportcard.quarantine import quarantine_files, quarantined, quarantined_name, restore_files


def _files(root: Path, *names: str) -> list[Path]:
    paths = []
    for name in names:
        path = root / name
        path.write_text(f"content of {name}\n", encoding="utf-8")
        paths.append(path)
    return paths


def test_quarantine_then_restore_is_identity(tmp_path: Path) -> None:
    paths = _files(tmp_path, "a.pb.go", "b.go")

    assert quarantine_files(paths) is None
    assert not any(path.exists() for path in paths)
    assert all(quarantined_name(path).exists() for path in paths)

    assert restore_files(paths) is None
    assert [path.read_text(encoding="utf-8") for path in paths] == [
        "content of a.pb.go\n",
        "content of b.go\n",
    ]
    assert not list(tmp_path.glob("*.grc.bk"))


def test_quarantine_continues_after_failure(tmp_path: Path) -> None:
    present = _files(tmp_path, "present.go")[0]
    missing = tmp_path / "missing.go"

    error = quarantine_files([missing, present])

    assert isinstance(error, FileNotFoundError)
    assert quarantined_name(present).exists()

    error = restore_files([missing, present])

    assert isinstance(error, FileNotFoundError)
    assert present.exists()


def test_quarantined_context_restores_on_exception(tmp_path: Path) -> None:
    paths = _files(tmp_path, "gen.go")

    with pytest.raises(RuntimeError, match="check failed"):
        with quarantined(paths):
            assert not paths[0].exists()
            raise RuntimeError("check failed")

    assert paths[0].exists()


def test_quarantined_context_reports_quarantine_errors(tmp_path: Path) -> None:
    present = _files(tmp_path, "gen.go")[0]

    with quarantined([tmp_path / "missing.go", present], suffix=".hidden") as error:
        assert isinstance(error, FileNotFoundError)
        assert (tmp_path / "gen.go.hidden").exists()

    assert present.exists()


def test_quarantined_context_raises_when_restore_fails(tmp_path: Path) -> None:
    path = _files(tmp_path, "gen.go")[0]

    with pytest.raises(QuarantineError):
        with quarantined([path]):
            quarantined_name(path).unlink()
