# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models shared across the reportcard package."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Issue(BaseModel):
    """Single finding reported against a line of a file."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    message: str


class FileSummary(BaseModel):
    """Issues collected for one file during a single check run."""

    model_config = ConfigDict(validate_assignment=True)

    filename: str
    file_url: str = ""
    issues: list[Issue] = Field(default_factory=list)

    def add_issue(self, issue: Issue) -> None:
        """Append ``issue`` to the summary.

        Args:
            issue: Parsed finding belonging to this file.
        """

        self.issues.append(issue)

    @property
    def issue_count(self) -> int:
        """Return the number of issues recorded for the file."""

        return len(self.issues)


class CheckResult(BaseModel):
    """Score and per-file summaries produced by a check."""

    model_config = ConfigDict(validate_assignment=True)

    score: float
    summaries: list[FileSummary] = Field(default_factory=list)

    @field_validator("summaries", mode="after")
    @classmethod
    def _sort_summaries(cls, value: list[FileSummary]) -> list[FileSummary]:
        """Order summaries by filename so output is deterministic.

        Args:
            value: Summaries in collection order.

        Returns:
            list[FileSummary]: Summaries sorted by filename.
        """

        return sorted(value, key=lambda summary: summary.filename)

    @property
    def failing_files(self) -> int:
        """Return how many files reported at least one issue."""

        return sum(1 for summary in self.summaries if summary.issues)

    @property
    def issue_count(self) -> int:
        """Return the total number of issues across all files."""

        return sum(summary.issue_count for summary in self.summaries)


class ExitClassification(str, Enum):
    """Interpretation of a check's exit status."""

    SUCCESS = "success"
    FINDINGS = "findings"
    FAILURE = "failure"


class DiscoveryResult(BaseModel):
    """Files found eligible for analysis alongside those deliberately skipped."""

    model_config = ConfigDict(frozen=True)

    eligible: tuple[Path, ...] = Field(default_factory=tuple)
    skipped: tuple[Path, ...] = Field(default_factory=tuple)

    @property
    def is_single_file(self) -> bool:
        """Return whether exactly one file is eligible."""

        return len(self.eligible) == 1


__all__ = [
    "CheckResult",
    "DiscoveryResult",
    "ExitClassification",
    "FileSummary",
    "Issue",
]
