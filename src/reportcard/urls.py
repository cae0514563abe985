# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map staged source paths to browsable repository URLs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .constants import DEFAULT_BRANCH, GITHUB_HOST, GOLANG_X_HOSTING, GOLANG_X_NAMESPACE, SOURCE_ROOT

_SEPARATOR: Final[str] = "/"


@dataclass(frozen=True, slots=True)
class ModuleNamespace:
    """Cross-repository namespace hosted under a canonical location.

    ``golang.org/x/tools/...`` lives at ``https://github.com/golang/tools``.
    """

    prefix: str
    hosting: str

    def repository_root(self, base: str) -> tuple[str, str] | None:
        """Return ``(namespace_path, repo)`` for ``base`` when it matches."""

        if not base.startswith(f"{self.prefix}{_SEPARATOR}"):
            return None
        remainder = base[len(self.prefix) + 1 :].split(_SEPARATOR)
        repo = remainder[0]
        if not repo:
            return None
        return f"{self.prefix}{_SEPARATOR}{repo}", repo

    def url(self, repo: str) -> str:
        return f"{self.hosting}{_SEPARATOR}{repo}"


@dataclass(frozen=True, slots=True)
class RepositoryHost:
    """Generic ``host/owner/repo`` namespace."""

    host: str

    def repository_root(self, base: str) -> str | None:
        """Return ``host/owner/repo`` for ``base`` when it matches."""

        if not base.startswith(f"{self.host}{_SEPARATOR}"):
            return None
        parts = base.split(_SEPARATOR)
        if len(parts) < 3 or not all(parts[:3]):
            return None
        return _SEPARATOR.join(parts[:3])


@dataclass(frozen=True, slots=True)
class SourceURLResolver:
    """Resolve file paths beneath the staging root to hosted source URLs."""

    source_root: str = SOURCE_ROOT
    branch: str = DEFAULT_BRANCH
    namespaces: tuple[ModuleNamespace, ...] = field(
        default=(ModuleNamespace(GOLANG_X_NAMESPACE, GOLANG_X_HOSTING),),
    )
    hosts: tuple[RepositoryHost, ...] = field(default=(RepositoryHost(GITHUB_HOST),))

    def resolve(self, base_dir: str, file_path: str) -> str:
        """Return the browsable URL for ``file_path`` or an empty string.

        Args:
            base_dir: Analysed directory, rooted at :attr:`source_root`.
            file_path: Normalised path with the staging root stripped.

        Returns:
            str: Source URL, or ``""`` when the layout is not recognised.
        """

        base = base_dir.removeprefix(f"{self.source_root}{_SEPARATOR}").strip(_SEPARATOR)
        for namespace in self.namespaces:
            match = namespace.repository_root(base)
            if match is not None:
                root, repo = match
                return self._blob_url(namespace.url(repo), root, file_path)
        for host in self.hosts:
            root = host.repository_root(base)
            if root is not None:
                return self._blob_url(f"https://{root}", root, file_path)
        return ""

    def _blob_url(self, repository_url: str, root: str, file_path: str) -> str:
        in_repo = file_path.removeprefix(f"{_SEPARATOR}{root}")
        return f"{repository_url}/blob/{self.branch}{in_repo}"


_DEFAULT_RESOLVER: Final[SourceURLResolver] = SourceURLResolver()


def resolve_url(base_dir: str, file_path: str) -> str:
    """Resolve ``file_path`` with the default staging conventions."""

    return _DEFAULT_RESOLVER.resolve(base_dir, file_path)


__all__ = ["ModuleNamespace", "RepositoryHost", "SourceURLResolver", "resolve_url"]
