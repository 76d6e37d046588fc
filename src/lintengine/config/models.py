# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the lintengine checkers."""

from __future__ import annotations

import math
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..checkers.spelling_data import IMPORTANT, PICKY


def default_parallel_jobs() -> int:
    """Return a CPU count scaled down for concurrent checking.

    Returns:
        int: Roughly 75% of available CPU cores, never less than one.
    """
    cores = os.cpu_count() or 1
    return max(1, math.floor(cores * 0.75))


class CustomWordRule(BaseModel):
    """A misspelling added on top of (or overriding) the built-in word list."""

    model_config = ConfigDict(frozen=True)

    incorrect: str
    correct: str
    tier: str = IMPORTANT
    whole_word: bool = False


class SpellingConfig(BaseModel):
    """Options controlling the spelling checker."""

    model_config = ConfigDict(validate_assignment=True)

    severity_threshold: str = PICKY
    enabled_tiers: dict[str, bool] = Field(default_factory=dict)
    custom_word_rules: list[CustomWordRule] = Field(default_factory=list)
    include_defaults: bool = True


class JsonLintConfig(BaseModel):
    """Options controlling the jsonlint external checker."""

    model_config = ConfigDict(validate_assignment=True)

    binary: str = Field(default="jsonlint", min_length=1)
    extra_flags: tuple[str, ...] = Field(default_factory=tuple)
    timeout: float | None = Field(default=60.0, ge=0)

    @field_validator("extra_flags", mode="before")
    @classmethod
    def _coerce_flags(cls, value: object) -> object:
        """Accept a single flag string in place of a list."""

        if isinstance(value, str):
            return (value,)
        return value


class EngineConfig(BaseModel):
    """Top-level configuration bundle."""

    model_config = ConfigDict(validate_assignment=True)

    spelling: SpellingConfig = Field(default_factory=SpellingConfig)
    jsonlint: JsonLintConfig = Field(default_factory=JsonLintConfig)
    jobs: int = Field(default_factory=default_parallel_jobs, ge=1)


__all__ = [
    "CustomWordRule",
    "EngineConfig",
    "JsonLintConfig",
    "SpellingConfig",
    "default_parallel_jobs",
]
