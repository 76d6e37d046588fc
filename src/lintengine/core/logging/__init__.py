# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared user-facing logging helpers."""

from __future__ import annotations

from .public import emoji, fail, ok, warn

__all__ = [
    "emoji",
    "fail",
    "ok",
    "warn",
]
