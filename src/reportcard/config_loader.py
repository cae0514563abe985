# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration sources (standalone TOML and ``pyproject.toml``)."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final

from .config import Config
from .errors import ConfigError

DEFAULT_INCLUDE_KEY: Final[str] = "include"
STANDALONE_CONFIG_NAME: Final[str] = ".reportcard.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "reportcard"

_LOGGER = logging.getLogger(__name__)


class TomlConfigSource:
    """Load configuration data from a TOML document with include support."""

    def __init__(self, path: Path, *, include_key: str = DEFAULT_INCLUDE_KEY) -> None:
        self._root_path = path
        self.name = str(path)
        self._include_key = include_key

    def load(self) -> Mapping[str, Any]:
        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> Mapping[str, Any]:
        if not path.exists():
            return {}
        resolved = path.resolve()
        if resolved in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, resolved))
            raise ConfigError(f"Circular include detected: {include_chain}")
        try:
            with resolved.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
        document: dict[str, Any] = dict(data)
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, resolved.parent):
            fragment = self._load(include_path, stack + (resolved,))
            merged = _deep_merge(merged, fragment)
        return _deep_merge(merged, document)

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return [self._resolve_path(Path(raw), base_dir)]
        if isinstance(raw, list):
            return [self._resolve_path(Path(str(item)), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.reportcard]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        existing = result.get(key)
        if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(existing, value)
        else:
            result[key] = value
    return result


def discover_source(root: Path) -> TomlConfigSource | None:
    """Return the configuration source applicable to ``root``.

    A standalone ``.reportcard.toml`` takes precedence over
    ``[tool.reportcard]`` in ``pyproject.toml``.

    Args:
        root: Directory searched for configuration files.

    Returns:
        TomlConfigSource | None: Source to load, or ``None`` when neither exists.
    """

    standalone = root / STANDALONE_CONFIG_NAME
    if standalone.is_file():
        return TomlConfigSource(standalone)
    pyproject = root / PYPROJECT_NAME
    if pyproject.is_file():
        return PyProjectConfigSource(pyproject)
    return None


def load_config(root: Path, *, config_path: Path | None = None) -> Config:
    """Build the effective configuration for ``root``.

    Args:
        root: Analysed directory, searched when ``config_path`` is omitted.
        config_path: Explicit configuration file overriding discovery.

    Returns:
        Config: Built-in defaults merged with the discovered source.

    Raises:
        ConfigError: If an explicit file is missing or any source is invalid.
    """

    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")
        source: TomlConfigSource | None = (
            PyProjectConfigSource(config_path) if config_path.name == PYPROJECT_NAME else TomlConfigSource(config_path)
        )
    else:
        source = discover_source(root)
    config = Config()
    if source is None:
        return config
    _LOGGER.debug("loading configuration from %s", source.describe())
    data = source.load()
    if not data:
        return config
    return config.with_overrides(data)


__all__ = [
    "PyProjectConfigSource",
    "TomlConfigSource",
    "discover_source",
    "load_config",
]
