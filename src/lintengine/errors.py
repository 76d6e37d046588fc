# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised by the lint engine and its checkers."""

from __future__ import annotations

from collections.abc import Sequence


class LintEngineError(RuntimeError):
    """Base class for failures reported by lintengine."""


class ConfigurationError(LintEngineError):
    """Raised when rule definitions, tiers or configuration input are invalid."""


class ToolInvocationFailure(LintEngineError):
    """Raised when an external checker could not produce a usable result.

    This is distinct from a clean file: the tool failed to launch, timed out,
    or exited with a failure status without emitting any parseable diagnostic.
    """

    def __init__(
        self,
        reason: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str | None = None,
    ) -> None:
        """Initialise the failure with the captured invocation metadata.

        Args:
            reason: Short human-readable explanation of the failure.
            command: Command sequence that was executed.
            returncode: Exit status reported by the process, when it ran.
            stderr: Captured standard error text, when available.
        """
        detail = f"{reason} (exit status {returncode})" if returncode is not None else reason
        if command:
            detail = f"{detail}: {command[0]}"
        super().__init__(detail)
        self.reason = reason
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


__all__ = ["ConfigurationError", "LintEngineError", "ToolInvocationFailure"]
