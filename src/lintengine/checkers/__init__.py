# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in checkers."""

from __future__ import annotations

from .external import ExternalToolAdapter, ExternalToolSpec, Invocation, InvocationState
from .jsonlint import build_jsonlint_checker
from .spelling import RuleKind, ScanMode, SpellingChecker, WordRule, fix_letter_case

__all__ = [
    "ExternalToolAdapter",
    "ExternalToolSpec",
    "Invocation",
    "InvocationState",
    "RuleKind",
    "ScanMode",
    "SpellingChecker",
    "WordRule",
    "build_jsonlint_checker",
    "fix_letter_case",
]
