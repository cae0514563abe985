# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lookup helpers for the named checks declared by a profile."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import AnalysisProfile, CheckDefinition
from ..errors import ConfigError


def select_checks(profile: AnalysisProfile, names: Sequence[str] = ()) -> list[CheckDefinition]:
    """Return the checks named in ``names``, or every check when empty.

    Args:
        profile: Profile owning the catalog.
        names: Requested check names, in execution order.

    Returns:
        list[CheckDefinition]: Matching definitions.

    Raises:
        ConfigError: If a name is unknown or the profile has no checks.
    """

    if not names:
        if not profile.checks:
            raise ConfigError(f"Profile '{profile.name}' declares no checks")
        return list(profile.checks)
    return [profile.check(name) for name in dict.fromkeys(names)]


def adhoc_check(command: Sequence[str], *, name: str | None = None) -> CheckDefinition:
    """Wrap a command vector supplied by the caller as a check definition."""

    return CheckDefinition(name=name or command[0], command=tuple(command), description="ad-hoc command")


__all__ = ["adhoc_check", "select_checks"]
