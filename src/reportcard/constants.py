# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Default exclusion lists and conventions shared by analysis profiles."""

from __future__ import annotations

from typing import Final

GO_EXTENSIONS: Final[tuple[str, ...]] = (".go",)
PYTHON_EXTENSIONS: Final[tuple[str, ...]] = (".py",)

GO_SKIP_DIRS: Final[tuple[str, ...]] = ("Godeps", "vendor", "third_party")
PYTHON_SKIP_DIRS: Final[tuple[str, ...]] = (
    ".git",
    ".venv",
    "venv",
    "__pycache__",
    "build",
    "dist",
    "site-packages",
)

GO_SKIP_SUFFIXES: Final[tuple[str, ...]] = (
    ".pb.go",
    ".pb.gw.go",
    ".generated.go",
    "bindata.go",
    "_string.go",
)
PYTHON_SKIP_SUFFIXES: Final[tuple[str, ...]] = ("_pb2.py", "_pb2_grpc.py")

# Lowercase phrases; compared against the lowercased first line.
GENERATED_MARKERS: Final[tuple[str, ...]] = (
    "code generated",
    "generated",
    "autogenerated",
    "@generated",
    "code autogenerated",
    "auto-generated",
)

C_COMMENT_OPENERS: Final[tuple[str, ...]] = ("// ", "//", "/* ", "/*")
HASH_COMMENT_OPENERS: Final[tuple[str, ...]] = ("# ", "#")

QUARANTINE_SUFFIX: Final[str] = ".grc.bk"
SOURCE_ROOT: Final[str] = "repos/src"
FINDINGS_EXIT_CODE: Final[int] = 1
REPORT_SEPARATOR: Final[str] = ":"

GO_FORMAT_MESSAGE: Final[str] = "file is not gofmted"
PYTHON_FORMAT_MESSAGE: Final[str] = "file is not black formatted"

DEFAULT_BRANCH: Final[str] = "master"
GITHUB_HOST: Final[str] = "github.com"
GOLANG_X_NAMESPACE: Final[str] = "golang.org/x"
GOLANG_X_HOSTING: Final[str] = "https://github.com/golang"

__all__ = [
    "C_COMMENT_OPENERS",
    "DEFAULT_BRANCH",
    "FINDINGS_EXIT_CODE",
    "GENERATED_MARKERS",
    "GITHUB_HOST",
    "GOLANG_X_HOSTING",
    "GOLANG_X_NAMESPACE",
    "GO_EXTENSIONS",
    "GO_FORMAT_MESSAGE",
    "GO_SKIP_DIRS",
    "GO_SKIP_SUFFIXES",
    "HASH_COMMENT_OPENERS",
    "PYTHON_EXTENSIONS",
    "PYTHON_FORMAT_MESSAGE",
    "PYTHON_SKIP_DIRS",
    "PYTHON_SKIP_SUFFIXES",
    "QUARANTINE_SUFFIX",
    "REPORT_SEPARATOR",
    "SOURCE_ROOT",
]
