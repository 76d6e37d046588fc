# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models, severities and runtime helpers."""

from __future__ import annotations

from .models import ExternalCheckResult, LintMessage
from .severity import Severity, SeverityRegistry, SeverityTier

__all__ = [
    "ExternalCheckResult",
    "LintMessage",
    "Severity",
    "SeverityRegistry",
    "SeverityTier",
]
