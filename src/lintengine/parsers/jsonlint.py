# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for ``jsonlint --compact`` diagnostics."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Final

from pydantic import ValidationError

from ..core.models import LintMessage
from ..core.severity import Severity
from .base import iter_pattern_matches

LOGGER = logging.getLogger(__name__)

JSONLINT_CODE: Final[str] = "JSON"
JSONLINT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?P<path>.+): )?line (?P<line>\d+), col (?P<column>\d+), (?P<description>.*)$",
)


def parse_jsonlint(
    stderr: Sequence[str],
    path: str,
    *,
    code: str = JSONLINT_CODE,
) -> list[LintMessage]:
    """Parse compact jsonlint diagnostics into lint messages.

    The optional path prefix emitted by jsonlint is ignored in favour of
    ``path``, since content is streamed over stdin.

    Args:
        stderr: Lines of standard error produced by jsonlint.
        path: Identifier of the checked resource.
        code: Code stamped on every message.

    Returns:
        list[LintMessage]: One error per recognised line.
    """

    results: list[LintMessage] = []
    for match in iter_pattern_matches(stderr, JSONLINT_PATTERN):
        try:
            message = LintMessage(
                path=path,
                line=int(match.group("line")),
                column=int(match.group("column")),
                code=code,
                severity=Severity.ERROR,
                description=match.group("description"),
            )
        except ValidationError:
            # line/column 0 cannot be represented; drop the line only
            LOGGER.debug("skipping jsonlint line with invalid position: %r", match.group(0))
            continue
        results.append(message)
    return results


__all__ = [
    "JSONLINT_CODE",
    "JSONLINT_PATTERN",
    "parse_jsonlint",
]
