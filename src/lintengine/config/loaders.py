# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load :class:`EngineConfig` from TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from ..errors import ConfigurationError
from .models import EngineConfig

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintengine"


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except OSError as exc:
        raise ConfigurationError(f"unable to read configuration at {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"invalid TOML in {path}: {exc}") from exc


def _select_section(path: Path, data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the ``[tool.lintengine]`` table for pyproject files, else the whole document."""

    if path.name != PYPROJECT_FILENAME:
        return data
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def load_config(path: Path | None = None) -> EngineConfig:
    """Load engine configuration from ``path``.

    Args:
        path: TOML file to read. ``pyproject.toml`` files are read from their
            ``[tool.lintengine]`` table. ``None`` returns the defaults.

    Returns:
        EngineConfig: Validated configuration.

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated.
    """

    if path is None:
        return EngineConfig()
    section = _select_section(path, _read_toml(path))
    try:
        return EngineConfig.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration in {path}: {exc}") from exc


__all__ = ["PYPROJECT_SECTION_KEY", "load_config"]
