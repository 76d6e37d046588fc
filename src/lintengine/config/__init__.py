# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loaders import load_config
from .models import CustomWordRule, EngineConfig, JsonLintConfig, SpellingConfig

__all__ = [
    "CustomWordRule",
    "EngineConfig",
    "JsonLintConfig",
    "SpellingConfig",
    "load_config",
]
