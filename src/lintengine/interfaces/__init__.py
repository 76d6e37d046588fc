# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol definitions shared by checkers, parsers and the engine."""

from __future__ import annotations

from .checkers import Checker, CommandRunner, OutputParser

__all__ = ["Checker", "CommandRunner", "OutputParser"]
