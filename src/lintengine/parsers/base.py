# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Final

from ..core.models import ExternalCheckResult, LintMessage

LOGGER = logging.getLogger(__name__)

UNKNOWN_VERSION: Final[str] = "unknown"
VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<version>\d+\.\d+\.\d+)$")

TextTransform = Callable[[Sequence[str], str], Sequence[LintMessage]]


def iter_pattern_matches(
    lines: Sequence[str],
    pattern: re.Pattern[str],
    *,
    skip_blank: bool = True,
) -> Iterator[re.Match[str]]:
    """Yield regex matches from ``lines``, dropping lines the pattern rejects.

    Lines are matched as emitted apart from their line terminator. A line that
    does not match is banner or noise output and is skipped, never an error.

    Args:
        lines: Sequence of raw lines emitted by a tool.
        pattern: Compiled regular expression used to match diagnostic lines.
        skip_blank: When ``True`` blank lines are ignored.

    Yields:
        re.Match[str]: Match objects produced by ``pattern``.
    """

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if skip_blank and not line.strip():
            continue
        match = pattern.match(line)
        if match:
            yield match
        else:
            LOGGER.debug("skipping unrecognised output line: %r", line)


@dataclass(frozen=True, slots=True)
class StderrParser:
    """Parse standard error line by line via a text transformation function."""

    transform: TextTransform

    def parse(self, path: str, result: ExternalCheckResult) -> Sequence[LintMessage]:
        """Return messages produced by ``transform`` for the stderr of ``result``."""

        return self.transform(result.stderr_lines, path)


def parse_version(stdout: str) -> str:
    """Return the ``MAJOR.MINOR.PATCH`` version printed on ``stdout``.

    Args:
        stdout: Standard output of a version probe.

    Returns:
        str: Matched version, or ``"unknown"`` when the output does not match.
    """

    match = VERSION_PATTERN.match(stdout)
    return match.group("version") if match else UNKNOWN_VERSION


__all__ = [
    "StderrParser",
    "TextTransform",
    "UNKNOWN_VERSION",
    "VERSION_PATTERN",
    "iter_pattern_matches",
    "parse_version",
]
