# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for source URL resolution."""

from __future__ import annotations

import pytest

from reportcard.urls import SourceURLResolver, resolve_url


def test_resolve_github_repository_subdirectory() -> None:
    url = resolve_url("repos/src/github.com/owner/repo/sub", "/github.com/owner/repo/sub/file.go")

    assert url == "https://github.com/owner/repo/blob/master/sub/file.go"


def test_resolve_github_repository_root() -> None:
    url = resolve_url("repos/src/github.com/owner/repo", "/github.com/owner/repo/main.go")

    assert url == "https://github.com/owner/repo/blob/master/main.go"


def test_resolve_golang_x_namespace() -> None:
    url = resolve_url("repos/src/golang.org/x/tools/cmd", "/golang.org/x/tools/cmd/guru/main.go")

    assert url == "https://github.com/golang/tools/blob/master/cmd/guru/main.go"


@pytest.mark.parametrize(
    "base_dir",
    [
        "repos/src/example.com/owner/repo",
        "repos/src/github.com/owner",
        "/tmp/checkout",
        "repos/src/golang.org/x/",
    ],
)
def test_unknown_layouts_yield_empty_url(base_dir: str) -> None:
    assert resolve_url(base_dir, "/example.com/owner/repo/a.go") == ""


def test_resolver_honours_custom_root_and_branch() -> None:
    resolver = SourceURLResolver(source_root="/srv/stage", branch="main")

    url = resolver.resolve("/srv/stage/github.com/acme/widgets", "/github.com/acme/widgets/pkg/w.go")

    assert url == "https://github.com/acme/widgets/blob/main/pkg/w.go"
