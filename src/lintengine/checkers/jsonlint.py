# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect syntax errors in JSON files with ``jsonlint``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from ..core.runtime.process import run_command
from ..errors import ConfigurationError
from ..interfaces.checkers import CommandRunner
from ..parsers.base import StderrParser
from ..parsers.jsonlint import JSONLINT_CODE, parse_jsonlint
from .external import ExternalToolAdapter, ExternalToolSpec

if TYPE_CHECKING:
    from ..config.models import JsonLintConfig

JSONLINT_NAME: Final[str] = "jsonlint"
JSONLINT_BINARY: Final[str] = "jsonlint"
JSONLINT_MANDATORY_FLAGS: Final[tuple[str, ...]] = ("--compact",)
JSONLINT_INSTALL_HINT: Final[str] = "Install jsonlint using `npm install -g jsonlint`."


def build_jsonlint_checker(
    config: JsonLintConfig | None = None,
    *,
    runner: CommandRunner = run_command,
) -> ExternalToolAdapter:
    """Return an adapter running ``jsonlint --compact`` over stdin.

    jsonlint reports syntax errors through a non-zero exit status, so failing
    exits are expected whenever diagnostics were parsed.

    Args:
        config: Optional binary, extra flag and timeout overrides.
        runner: Command runner used to launch the process.

    Returns:
        ExternalToolAdapter: Checker emitting ``JSON`` errors.

    Raises:
        ConfigurationError: If the binary, flags or timeout are invalid.
    """

    fields: dict[str, object] = {
        "binary": JSONLINT_BINARY,
        "mandatory_flags": JSONLINT_MANDATORY_FLAGS,
        "read_from_stdin": True,
        "expect_command_errors": True,
        "file_suffix": ".json",
    }
    if config is not None:
        fields.update(binary=config.binary, extra_flags=config.extra_flags, timeout=config.timeout)
    try:
        spec = ExternalToolSpec.model_validate(fields)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid jsonlint configuration: {exc}") from exc
    return ExternalToolAdapter(
        name=JSONLINT_NAME,
        code=JSONLINT_CODE,
        spec=spec,
        parser=StderrParser(parse_jsonlint),
        runner=runner,
    )


__all__ = [
    "JSONLINT_BINARY",
    "JSONLINT_INSTALL_HINT",
    "JSONLINT_MANDATORY_FLAGS",
    "JSONLINT_NAME",
    "build_jsonlint_checker",
]
