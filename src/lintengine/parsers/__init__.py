# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers translating external tool output into lint messages."""

from __future__ import annotations

from .base import (
    UNKNOWN_VERSION,
    VERSION_PATTERN,
    StderrParser,
    TextTransform,
    iter_pattern_matches,
    parse_version,
)
from .jsonlint import JSONLINT_CODE, JSONLINT_PATTERN, parse_jsonlint

__all__ = [
    "JSONLINT_CODE",
    "JSONLINT_PATTERN",
    "StderrParser",
    "TextTransform",
    "UNKNOWN_VERSION",
    "VERSION_PATTERN",
    "iter_pattern_matches",
    "parse_jsonlint",
    "parse_version",
]
