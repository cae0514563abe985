# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing analysis profiles and built-in checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .constants import (
    C_COMMENT_OPENERS,
    FINDINGS_EXIT_CODE,
    GENERATED_MARKERS,
    GO_EXTENSIONS,
    GO_FORMAT_MESSAGE,
    GO_SKIP_DIRS,
    GO_SKIP_SUFFIXES,
    HASH_COMMENT_OPENERS,
    PYTHON_EXTENSIONS,
    PYTHON_FORMAT_MESSAGE,
    PYTHON_SKIP_DIRS,
    PYTHON_SKIP_SUFFIXES,
    QUARANTINE_SUFFIX,
    SOURCE_ROOT,
)
from .errors import ConfigError

FormatterName = Literal["gofmt", "black"]

DEFAULT_PROFILE: Final[str] = "go"


class CheckDefinition(BaseModel):
    """Named command producing ``path:line:column:message`` reports."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    command: tuple[str, ...]
    description: str = ""

    @field_validator("command", mode="after")
    @classmethod
    def _require_executable(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Reject empty command vectors.

        Args:
            value: Command vector declared for the check.

        Returns:
            tuple[str, ...]: The unchanged command vector.

        Raises:
            ValueError: If the vector has no executable.
        """

        if not value or not value[0].strip():
            raise ValueError("check command requires an executable")
        return value


class AnalysisProfile(BaseModel):
    """Exclusion rules and tool conventions for one source language.

    Profiles are injected into each component at construction time so several
    independent configurations can coexist within one process.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    extensions: tuple[str, ...]
    skip_dirs: tuple[str, ...] = Field(default_factory=tuple)
    skip_suffixes: tuple[str, ...] = Field(default_factory=tuple)
    generated_markers: tuple[str, ...] = GENERATED_MARKERS
    comment_openers: tuple[str, ...] = C_COMMENT_OPENERS
    exclude_dir_flag: str = "--skip={name}"
    exclude_separator: str | None = None
    file_exclude_flag: str | None = None
    scope_template: str = "{dir}/..."
    source_root: str = SOURCE_ROOT
    findings_exit_code: int = FINDINGS_EXIT_CODE
    quarantine_suffix: str = QUARANTINE_SUFFIX
    formatter: FormatterName = "gofmt"
    format_message: str = GO_FORMAT_MESSAGE
    checks: tuple[CheckDefinition, ...] = Field(default_factory=tuple)

    @field_validator("generated_markers", "comment_openers", mode="after")
    @classmethod
    def _lowercase(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Store markers lowercased for case-insensitive matching.

        Args:
            value: Configured marker or opener strings.

        Returns:
            tuple[str, ...]: Lowercased entries.
        """

        return tuple(entry.lower() for entry in value)

    @model_validator(mode="after")
    def _validate_templates(self) -> AnalysisProfile:
        """Ensure command templates reference their placeholders."""

        if "{dir}" not in self.scope_template:
            raise ValueError("scope_template must contain '{dir}'")
        if "{name}" not in self.exclude_dir_flag:
            raise ValueError("exclude_dir_flag must contain '{name}'")
        if self.file_exclude_flag is not None and "{path}" not in self.file_exclude_flag:
            raise ValueError("file_exclude_flag must contain '{path}'")
        if not self.quarantine_suffix:
            raise ValueError("quarantine_suffix must not be empty")
        return self

    @property
    def supports_file_exclusion(self) -> bool:
        """Return whether checks accept per-file exclusion flags."""

        return self.file_exclude_flag is not None

    def check(self, name: str) -> CheckDefinition:
        """Return the check registered under ``name``.

        Args:
            name: Catalog name of the check.

        Returns:
            CheckDefinition: Matching check definition.

        Raises:
            ConfigError: If the profile defines no such check.
        """

        for definition in self.checks:
            if definition.name == name:
                return definition
        known = ", ".join(sorted(entry.name for entry in self.checks)) or "<none>"
        raise ConfigError(f"Unknown check '{name}' for profile '{self.name}' (known: {known})")


def _gometalinter(linter: str, *extra: str) -> tuple[str, ...]:
    return ("gometalinter", "--deadline=180s", "--disable-all", f"--enable={linter}", *extra)


GO_CHECKS: Final[tuple[CheckDefinition, ...]] = (
    CheckDefinition(
        name="gofmt",
        command=_gometalinter("gofmt"),
        description="Gofmt formats Go programs; files must match gofmt -s output.",
    ),
    CheckDefinition(
        name="go_vet",
        command=_gometalinter("vet"),
        description="go vet examines Go source code and reports suspicious constructs.",
    ),
    CheckDefinition(
        name="gocyclo",
        command=_gometalinter("gocyclo", "--cyclo-over=15"),
        description="Gocyclo reports functions with cyclomatic complexity over 15.",
    ),
    CheckDefinition(
        name="golint",
        command=_gometalinter("golint", "--min-confidence=0.85"),
        description="Golint is a linter for Go source code.",
    ),
    CheckDefinition(
        name="ineffassign",
        command=_gometalinter("ineffassign"),
        description="IneffAssign detects ineffectual assignments in Go code.",
    ),
    CheckDefinition(
        name="misspell",
        command=_gometalinter("misspell"),
        description="Misspell finds commonly misspelled English words.",
    ),
)

PYTHON_CHECKS: Final[tuple[CheckDefinition, ...]] = (
    CheckDefinition(
        name="flake8",
        command=("flake8",),
        description="Flake8 wraps pyflakes, pycodestyle and mccabe.",
    ),
    CheckDefinition(
        name="pyflakes",
        command=("flake8", "--select=F"),
        description="Pyflakes detects unused names and undefined references.",
    ),
    CheckDefinition(
        name="pycodestyle",
        command=("flake8", "--select=E,W"),
        description="Pycodestyle enforces PEP 8 layout rules.",
    ),
)


def go_profile() -> AnalysisProfile:
    """Return the built-in profile for Go repositories."""

    return AnalysisProfile(
        name="go",
        extensions=GO_EXTENSIONS,
        skip_dirs=GO_SKIP_DIRS,
        skip_suffixes=GO_SKIP_SUFFIXES,
        checks=GO_CHECKS,
    )


def python_profile() -> AnalysisProfile:
    """Return the built-in profile for Python repositories."""

    return AnalysisProfile(
        name="python",
        extensions=PYTHON_EXTENSIONS,
        skip_dirs=PYTHON_SKIP_DIRS,
        skip_suffixes=PYTHON_SKIP_SUFFIXES,
        comment_openers=HASH_COMMENT_OPENERS,
        exclude_dir_flag="--extend-exclude={name}",
        exclude_separator=",",
        scope_template="{dir}",
        formatter="black",
        format_message=PYTHON_FORMAT_MESSAGE,
        checks=PYTHON_CHECKS,
    )


def _builtin_profiles() -> dict[str, AnalysisProfile]:
    return {"go": go_profile(), "python": python_profile()}


class Config(BaseModel):
    """Top-level configuration holding every available profile."""

    model_config = ConfigDict(validate_assignment=True)

    default_profile: str = DEFAULT_PROFILE
    profiles: dict[str, AnalysisProfile] = Field(default_factory=_builtin_profiles)

    def profile(self, name: str | None = None) -> AnalysisProfile:
        """Return the profile called ``name`` or the configured default.

        Args:
            name: Optional profile name overriding :attr:`default_profile`.

        Returns:
            AnalysisProfile: Matching analysis profile.

        Raises:
            ConfigError: If the profile is unknown.
        """

        key = name or self.default_profile
        try:
            return self.profiles[key]
        except KeyError as exc:
            known = ", ".join(sorted(self.profiles))
            raise ConfigError(f"Unknown profile '{key}' (known: {known})") from exc

    def with_overrides(self, data: Mapping[str, object]) -> Config:
        """Return a copy of the configuration with ``data`` merged in.

        ``data`` follows the ``[tool.reportcard]`` layout: an optional
        ``default_profile`` key and a ``profiles`` table whose entries either
        refine a built-in profile or declare a new one.

        Args:
            data: Mapping loaded from a configuration source.

        Returns:
            Config: New configuration instance.

        Raises:
            ConfigError: If the mapping contains invalid values.
        """

        unknown = sorted(set(data) - {"default_profile", "profiles"})
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        profiles = dict(self.profiles)
        raw_profiles = data.get("profiles", {})
        if not isinstance(raw_profiles, Mapping):
            raise ConfigError("'profiles' must be a table")
        for name, raw in raw_profiles.items():
            if not isinstance(raw, Mapping):
                raise ConfigError(f"Profile '{name}' must be a table")
            profiles[str(name)] = _merge_profile(str(name), profiles.get(str(name)), raw)
        default = data.get("default_profile", self.default_profile)
        if not isinstance(default, str):
            raise ConfigError("'default_profile' must be a string")
        if default not in profiles:
            raise ConfigError(f"Default profile '{default}' is not defined")
        return Config(default_profile=default, profiles=profiles)


def _merge_profile(name: str, base: AnalysisProfile | None, raw: Mapping[str, object]) -> AnalysisProfile:
    payload: dict[str, object] = base.model_dump() if base is not None else {"name": name}
    payload.update(raw)
    payload["name"] = name
    try:
        return AnalysisProfile.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid profile '{name}': {exc}") from exc


__all__ = [
    "DEFAULT_PROFILE",
    "GO_CHECKS",
    "PYTHON_CHECKS",
    "AnalysisProfile",
    "CheckDefinition",
    "Config",
    "ConfigError",
    "go_profile",
    "python_profile",
]
