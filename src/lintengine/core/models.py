# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintengine package."""

from __future__ import annotations

from dataclasses import dataclass, field
from subprocess import CompletedProcess

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .severity import Severity


def capitalize_first(text: str) -> str:
    """Upper-case the first character of ``text`` leaving the rest untouched."""

    return text[:1].upper() + text[1:]


def split_output_lines(text: str) -> tuple[str, ...]:
    """Split tool output on ``\\n`` or ``\\r\\n`` only.

    Form feeds and other characters :meth:`str.splitlines` treats as breaks
    stay inside the line they appear on.
    """

    if not text:
        return ()
    return tuple(line.removesuffix("\r") for line in text.removesuffix("\n").split("\n"))


class LintMessage(BaseModel):
    """A single diagnostic raised against one path.

    ``original_text`` and ``replacement_text`` travel together: a message
    either proposes a fix (both set) or does not (both ``None``).
    """

    model_config = ConfigDict(frozen=True)

    path: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    code: str
    severity: Severity
    description: str
    name: str | None = None
    original_text: str | None = None
    replacement_text: str | None = None

    @field_validator("description")
    @classmethod
    def _normalise_description(cls, value: str) -> str:
        """Start every description with an upper-case letter.

        Args:
            value: Description supplied by the checker.

        Returns:
            str: Description with its first character upper-cased.
        """

        return capitalize_first(value)

    @model_validator(mode="after")
    def _check_fix_pair(self) -> LintMessage:
        """Reject messages carrying only one half of an autofix."""

        if (self.original_text is None) != (self.replacement_text is None):
            raise ValueError("original_text and replacement_text must be provided together")
        return self

    @property
    def has_autofix(self) -> bool:
        """Return ``True`` when the message proposes a replacement."""

        return self.replacement_text is not None

    def sort_key(self) -> tuple[str, int, int, str]:
        """Return the key used when comparing message sets by position and code."""

        return (self.path, self.line, self.column, self.code)


@dataclass(frozen=True, slots=True)
class ExternalCheckResult:
    """Exit status and captured output of one external tool run."""

    exit_status: int
    stdout: str
    stderr_lines: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_process(cls, completed: CompletedProcess[str]) -> ExternalCheckResult:
        """Build a result from a completed subprocess.

        Args:
            completed: Finished process with text-mode captured output.

        Returns:
            ExternalCheckResult: Result with stderr split into lines.
        """

        return cls(
            exit_status=completed.returncode,
            stdout=completed.stdout or "",
            stderr_lines=split_output_lines(completed.stderr or ""),
        )

    @property
    def ok(self) -> bool:
        """Return ``True`` when the tool exited successfully."""

        return self.exit_status == 0

    @property
    def stderr(self) -> str:
        """Return standard error rejoined as text."""

        return "\n".join(self.stderr_lines)


__all__ = ["ExternalCheckResult", "LintMessage", "capitalize_first", "split_output_lines"]
