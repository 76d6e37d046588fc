# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Capability interfaces implemented by in-process and external checkers."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from subprocess import CompletedProcess
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.models import ExternalCheckResult, LintMessage
    from ..core.runtime.process import CommandOptions


@runtime_checkable
class Checker(Protocol):
    """Produce lint messages for one path and its textual content."""

    @property
    def name(self) -> str:
        """Return the configuration name of the checker (e.g. ``spelling``)."""

        raise NotImplementedError

    @property
    def code(self) -> str:
        """Return the short code stamped on every message (e.g. ``SPELL``)."""

        raise NotImplementedError

    def check(self, path: str, content: str) -> Sequence[LintMessage]:
        """Return every message raised for ``content``.

        Args:
            path: Identifier of the scanned resource.
            content: Full text buffer to check.

        Returns:
            Sequence[LintMessage]: Messages in emission order; callers treat them as a multiset.
        """

        raise NotImplementedError


@runtime_checkable
class OutputParser(Protocol):
    """Translate the captured output of an external tool into lint messages."""

    def parse(self, path: str, result: ExternalCheckResult) -> Sequence[LintMessage]:
        """Return messages parsed from ``result`` attributed to ``path``."""

        raise NotImplementedError


@runtime_checkable
class CommandRunner(Protocol):
    """Callable protocol for invoking external tool commands."""

    def __call__(
        self,
        args: Sequence[str],
        *,
        options: CommandOptions | None = None,
    ) -> CompletedProcess[str]:
        """Execute ``args`` returning a completed subprocess."""

        raise NotImplementedError


__all__ = ["Checker", "CommandRunner", "OutputParser"]
