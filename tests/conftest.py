# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from subprocess import CompletedProcess

import pytest

from lintengine.core.runtime.process import CommandOptions


@dataclass
class FakeRunner:
    """Command runner returning a canned process result and recording calls."""

    returncode: int = 0
    stdout: str = ""
    stderr: str = ""
    error: Exception | None = None
    calls: list[tuple[list[str], CommandOptions | None]] = field(default_factory=list)
    on_call: Callable[[list[str], CommandOptions | None], None] | None = None

    def __call__(
        self,
        args: Sequence[str],
        *,
        options: CommandOptions | None = None,
    ) -> CompletedProcess[str]:
        command = list(args)
        self.calls.append((command, options))
        if self.on_call is not None:
            self.on_call(command, options)
        if self.error is not None:
            raise self.error
        return CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    """Return a factory building :class:`FakeRunner` instances."""

    def _factory(**kwargs: object) -> FakeRunner:
        return FakeRunner(**kwargs)  # type: ignore[arg-type]

    return _factory
