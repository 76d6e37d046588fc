# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Run checkers against one or many sources."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Final

from .checkers.jsonlint import JSONLINT_NAME, build_jsonlint_checker
from .checkers.spelling import SPELLING_NAME, SpellingChecker
from .config.models import EngineConfig
from .core.models import LintMessage
from .core.severity import Severity
from .errors import ConfigurationError
from .interfaces.checkers import Checker

LOGGER = logging.getLogger(__name__)

CheckerFactory = Callable[[EngineConfig], Checker]

CHECKER_FACTORIES: Final[dict[str, CheckerFactory]] = {
    SPELLING_NAME: lambda config: SpellingChecker.from_config(config.spelling),
    JSONLINT_NAME: lambda config: build_jsonlint_checker(config.jsonlint),
}


def build_checkers(names: Iterable[str], config: EngineConfig | None = None) -> list[Checker]:
    """Instantiate the named built-in checkers.

    Args:
        names: Checker names such as ``spelling`` or ``jsonlint``.
        config: Engine configuration; defaults apply when omitted.

    Returns:
        list[Checker]: Checkers in the order requested.

    Raises:
        ConfigurationError: If a name is unknown or a checker rejects its configuration.
    """

    active = config or EngineConfig()
    checkers: list[Checker] = []
    for name in names:
        factory = CHECKER_FACTORIES.get(name)
        if factory is None:
            known = ", ".join(sorted(CHECKER_FACTORIES))
            raise ConfigurationError(f"unknown checker '{name}' (known: {known})")
        checkers.append(factory(active))
    return checkers


def run_checkers(checkers: Sequence[Checker], path: str, content: str) -> list[LintMessage]:
    """Run every checker over one source and return the combined messages.

    Messages are sorted by position then code; failures from any checker propagate.
    """

    messages: list[LintMessage] = []
    for checker in checkers:
        messages.extend(checker.check(path, content))
    return sorted(messages, key=LintMessage.sort_key)


def check_many(
    checkers: Sequence[Checker],
    sources: Mapping[str, str],
    *,
    jobs: int = 1,
) -> dict[str, list[LintMessage]]:
    """Check several sources, optionally in parallel.

    Checkers share only read-only configuration, so sources are independent.

    Args:
        checkers: Checkers applied to every source.
        sources: Mapping of path to content.
        jobs: Maximum number of worker threads.

    Returns:
        dict[str, list[LintMessage]]: Messages keyed by path, in input order.
    """

    if jobs <= 1 or len(sources) <= 1:
        return {path: run_checkers(checkers, path, content) for path, content in sources.items()}
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = {path: executor.submit(run_checkers, checkers, path, content) for path, content in sources.items()}
        return {path: future.result() for path, future in futures.items()}


def highest_severity(messages: Iterable[LintMessage]) -> Severity | None:
    """Return the most severe class among ``messages``, or ``None`` when empty."""

    return max((message.severity for message in messages), default=None)


__all__ = [
    "CHECKER_FACTORIES",
    "build_checkers",
    "check_many",
    "highest_severity",
    "run_checkers",
]
