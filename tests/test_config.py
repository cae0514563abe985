# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and sources."""

from __future__ import annotations

from pathlib import Path

import pytest

from reportcard.checks import adhoc_check, select_checks
from reportcard.config import AnalysisProfile, CheckDefinition, Config
from reportcard.config_loader import load_config
from reportcard.errors import ConfigError


def test_defaults_expose_builtin_profiles(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.default_profile == "go"
    go = config.profile()
    assert go.skip_dirs == ("Godeps", "vendor", "third_party")
    assert ".pb.go" in go.skip_suffixes
    assert go.quarantine_suffix == ".grc.bk"
    assert config.profile("python").formatter == "black"


def test_standalone_file_refines_builtin_profile(tmp_path: Path, write) -> None:
    write(
        tmp_path / ".reportcard.toml",
        '[profiles.go]\nskip_dirs = ["vendor", "testdata"]\nsource_root = "/srv/src"\n',
    )

    profile = load_config(tmp_path).profile("go")

    assert profile.skip_dirs == ("vendor", "testdata")
    assert profile.source_root == "/srv/src"
    assert profile.skip_suffixes == Config().profile("go").skip_suffixes


def test_standalone_file_wins_over_pyproject(tmp_path: Path, write) -> None:
    write(tmp_path / ".reportcard.toml", 'default_profile = "python"\n')
    write(tmp_path / "pyproject.toml", '[tool.reportcard]\ndefault_profile = "go"\n')

    assert load_config(tmp_path).default_profile == "python"


def test_pyproject_declares_custom_profile(tmp_path: Path, write) -> None:
    write(
        tmp_path / "pyproject.toml",
        """
[project]
name = "demo"

[tool.reportcard]
default_profile = "rust"

[tool.reportcard.profiles.rust]
extensions = [".rs"]
skip_dirs = ["target"]
scope_template = "{dir}"

[[tool.reportcard.profiles.rust.checks]]
name = "clippy"
command = ["cargo", "clippy"]
""",
    )

    profile = load_config(tmp_path).profile()

    assert profile.name == "rust"
    assert profile.extensions == (".rs",)
    assert profile.check("clippy").command == ("cargo", "clippy")


def test_include_fragments_are_merged(tmp_path: Path, write) -> None:
    write(tmp_path / "base.toml", '[profiles.go]\nskip_dirs = ["vendor"]\nfindings_exit_code = 3\n')
    write(tmp_path / ".reportcard.toml", 'include = "base.toml"\n[profiles.go]\nfindings_exit_code = 4\n')

    profile = load_config(tmp_path).profile("go")

    assert profile.skip_dirs == ("vendor",)
    assert profile.findings_exit_code == 4


def test_circular_include_is_rejected(tmp_path: Path, write) -> None:
    write(tmp_path / "a.toml", 'include = "b.toml"\n')
    write(tmp_path / "b.toml", 'include = "a.toml"\n')

    with pytest.raises(ConfigError, match="Circular include"):
        load_config(tmp_path, config_path=tmp_path / "a.toml")


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, config_path=tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "document",
    [
        "unknown_key = 1\n",
        'default_profile = "cobol"\n',
        '[profiles.go]\nscope_template = "./..."\n',
        '[profiles.go]\nno_such_field = true\n',
        "[profiles.go\n",
    ],
)
def test_invalid_documents_raise_config_error(tmp_path: Path, write, document: str) -> None:
    write(tmp_path / ".reportcard.toml", document)

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_profile_lookup() -> None:
    with pytest.raises(ConfigError, match="Unknown profile"):
        Config().profile("cobol")


def test_check_definition_requires_executable() -> None:
    with pytest.raises(ValueError):
        CheckDefinition(name="empty", command=())


def test_markers_are_lowercased() -> None:
    profile = AnalysisProfile(name="x", extensions=(".x",), generated_markers=("DO NOT EDIT",))

    assert profile.generated_markers == ("do not edit",)


def test_select_checks(go: AnalysisProfile) -> None:
    assert [check.name for check in select_checks(go)] == [check.name for check in go.checks]
    assert [check.name for check in select_checks(go, ["golint", "gofmt", "golint"])] == ["golint", "gofmt"]
    with pytest.raises(ConfigError, match="Unknown check"):
        select_checks(go, ["pylint"])


def test_adhoc_check_names_itself_after_the_executable() -> None:
    check = adhoc_check(["staticcheck", "./..."])

    assert check.name == "staticcheck"
    assert check.command == ("staticcheck", "./...")
