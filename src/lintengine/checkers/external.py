# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run an external executable against file content and parse its diagnostics."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from ..core.models import ExternalCheckResult, LintMessage
from ..core.runtime.process import CommandOptions, CommandTimeoutError, run_command
from ..errors import ToolInvocationFailure
from ..interfaces.checkers import CommandRunner, OutputParser
from ..parsers.base import parse_version

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 60.0
_STDERR_EXCERPT_LINES: Final[int] = 5


class ExternalToolSpec(BaseModel):
    """Describe how an external checker is invoked."""

    model_config = ConfigDict(frozen=True)

    binary: str = Field(min_length=1)
    mandatory_flags: tuple[str, ...] = Field(default_factory=tuple)
    extra_flags: tuple[str, ...] = Field(default_factory=tuple)
    version_flag: str = "--version"
    read_from_stdin: bool = True
    expect_command_errors: bool = True
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, ge=0)
    file_suffix: str = ""

    def command(self) -> list[str]:
        """Return the base command: binary, mandatory flags, then extra flags."""

        return [self.binary, *self.mandatory_flags, *self.extra_flags]


class InvocationState(str, Enum):
    """Lifecycle of one external tool invocation."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED_WITH_OUTPUT = "completed_with_output"
    FAILED_NO_OUTPUT = "failed_no_output"


_TRANSITIONS: Final[dict[InvocationState, frozenset[InvocationState]]] = {
    InvocationState.NOT_STARTED: frozenset({InvocationState.RUNNING}),
    InvocationState.RUNNING: frozenset(
        {InvocationState.COMPLETED_WITH_OUTPUT, InvocationState.FAILED_NO_OUTPUT},
    ),
    InvocationState.COMPLETED_WITH_OUTPUT: frozenset(),
    InvocationState.FAILED_NO_OUTPUT: frozenset(),
}


class Invocation:
    """Track the state of a single run of an external tool."""

    __slots__ = ("messages", "path", "result", "state")

    def __init__(self, path: str) -> None:
        self.path = path
        self.state = InvocationState.NOT_STARTED
        self.result: ExternalCheckResult | None = None
        self.messages: tuple[LintMessage, ...] = ()

    def advance(self, target: InvocationState) -> None:
        """Move to ``target``.

        Raises:
            RuntimeError: If the transition is not allowed from the current state.
        """

        if target not in _TRANSITIONS[self.state]:
            raise RuntimeError(f"invalid invocation transition {self.state.value} -> {target.value}")
        self.state = target


class ExternalToolAdapter:
    """Checker delegating to an external executable.

    The tool is run once per :meth:`check` call. A non-zero exit status is an
    expected outcome when the tool reports diagnostics; a failing exit with no
    parseable diagnostic raises :class:`ToolInvocationFailure` instead of
    returning an empty result.
    """

    def __init__(
        self,
        *,
        name: str,
        code: str,
        spec: ExternalToolSpec,
        parser: OutputParser,
        runner: CommandRunner = run_command,
        version_parser: Callable[[str], str] = parse_version,
    ) -> None:
        self._name = name
        self._code = code
        self._spec = spec
        self._parser = parser
        self._runner = runner
        self._version_parser = version_parser

    @property
    def name(self) -> str:
        """Return the configuration name of the checker."""

        return self._name

    @property
    def code(self) -> str:
        """Return the code stamped on every message."""

        return self._code

    @property
    def spec(self) -> ExternalToolSpec:
        """Return the invocation spec."""

        return self._spec

    def check(self, path: str, content: str) -> list[LintMessage]:
        """Run the tool against ``content`` and return its messages.

        Args:
            path: Identifier of the checked resource; messages carry this path.
            content: Full text buffer handed to the tool.

        Returns:
            list[LintMessage]: Parsed messages; empty when the file is clean.

        Raises:
            ToolInvocationFailure: If the tool cannot be launched, times out,
                or fails without producing any parseable diagnostic.
        """

        invocation = self.run(path, content)
        return list(invocation.messages)

    def run(self, path: str, content: str) -> Invocation:
        """Run the tool and return the completed invocation record.

        Raises:
            ToolInvocationFailure: Under the same conditions as :meth:`check`.
        """

        invocation = Invocation(path)
        invocation.advance(InvocationState.RUNNING)
        try:
            result = self._execute(content)
        except ToolInvocationFailure:
            invocation.advance(InvocationState.FAILED_NO_OUTPUT)
            raise
        invocation.result = result
        messages = tuple(self._parser.parse(path, result))

        if not result.ok and (not messages or not self._spec.expect_command_errors):
            invocation.advance(InvocationState.FAILED_NO_OUTPUT)
            reason = (
                "tool exited with a failure status and produced no parseable diagnostics"
                if not messages
                else "tool exited with a failure status"
            )
            raise ToolInvocationFailure(
                reason,
                command=self._spec.command(),
                returncode=result.exit_status,
                stderr=result.stderr,
            )

        invocation.messages = messages
        invocation.advance(InvocationState.COMPLETED_WITH_OUTPUT)
        LOGGER.debug(
            "%s on %s exited %d with %d message(s)",
            self._spec.binary,
            path,
            result.exit_status,
            len(messages),
        )
        return invocation

    def _execute(self, content: str) -> ExternalCheckResult:
        with self._prepared_command(content) as (command, options):
            LOGGER.debug("running %s", " ".join(command))
            try:
                completed = self._runner(command, options=options)
            except CommandTimeoutError as exc:
                raise ToolInvocationFailure(
                    f"tool timed out after {exc.timeout:.1f}s",
                    command=command,
                    stderr=exc.stderr,
                ) from exc
            except OSError as exc:
                raise ToolInvocationFailure(f"unable to launch tool: {exc}", command=command) from exc
        result = ExternalCheckResult.from_process(completed)
        if not result.ok:
            excerpt = "\n".join(result.stderr_lines[:_STDERR_EXCERPT_LINES])
            LOGGER.debug("%s exited %d; stderr starts: %s", command[0], result.exit_status, excerpt)
        return result

    @contextmanager
    def _prepared_command(self, content: str) -> Iterator[tuple[list[str], CommandOptions]]:
        """Yield the command and options, staging content in a temporary file when needed."""

        command = self._spec.command()
        if self._spec.read_from_stdin:
            yield command, CommandOptions(timeout=self._spec.timeout, input_text=content)
            return
        handle, staged = tempfile.mkstemp(suffix=self._spec.file_suffix, prefix="lintengine-")
        try:
            with os.fdopen(handle, "w", encoding="utf-8", errors="replace") as stream:
                stream.write(content)
            yield [*command, staged], CommandOptions(timeout=self._spec.timeout)
        finally:
            Path(staged).unlink(missing_ok=True)

    def probe_version(self) -> str:
        """Return the tool version printed by ``<binary> <version_flag>``.

        Some tools exit non-zero for a version query, so the exit status is
        ignored and only standard output is matched.

        Returns:
            str: ``MAJOR.MINOR.PATCH`` version, or ``"unknown"``.
        """

        command: Sequence[str] = [self._spec.binary, self._spec.version_flag]
        try:
            completed = self._runner(command, options=CommandOptions(timeout=self._spec.timeout))
        except (OSError, CommandTimeoutError) as exc:
            LOGGER.debug("version probe of %s failed: %s", self._spec.binary, exc)
            return self._version_parser("")
        return self._version_parser(completed.stdout or "")


__all__ = [
    "ExternalToolAdapter",
    "ExternalToolSpec",
    "Invocation",
    "InvocationState",
]
