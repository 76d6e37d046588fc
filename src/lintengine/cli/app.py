# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the ``check`` and ``version`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer
from rich.text import Text

from ..checkers.jsonlint import JSONLINT_INSTALL_HINT, JSONLINT_NAME, build_jsonlint_checker
from ..checkers.spelling import SPELLING_NAME
from ..config.loaders import load_config
from ..config.models import EngineConfig
from ..core.console import detect_tty, get_console_manager
from ..core.logging import fail, ok, warn
from ..core.models import LintMessage
from ..core.severity import Severity
from ..engine import build_checkers, check_many, highest_severity
from ..errors import ConfigurationError, ToolInvocationFailure
from ..parsers.base import UNKNOWN_VERSION

EXIT_ERRORS_FOUND: Final[int] = 1
EXIT_FAILURE: Final[int] = 2

_SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}

app = typer.Typer(help="Lint rule engine.", no_args_is_help=True, add_completion=False)


def _apply_overrides(config: EngineConfig, threshold: str | None, disabled: list[str]) -> EngineConfig:
    spelling = config.spelling
    updates: dict[str, object] = {}
    if threshold is not None:
        updates["severity_threshold"] = threshold
    if disabled:
        updates["enabled_tiers"] = {**spelling.enabled_tiers, **dict.fromkeys(disabled, False)}
    if not updates:
        return config
    return config.model_copy(update={"spelling": spelling.model_copy(update=updates)})


def format_message(message: LintMessage) -> str:
    """Return the single-line rendering of ``message``."""

    line = (
        f"{message.path}:{message.line}:{message.column}: "
        f"{message.severity.value.upper()} [{message.code}] {message.description}"
    )
    if message.has_autofix:
        line = f"{line} ({message.original_text!r} -> {message.replacement_text!r})"
    return line


@app.command("check")
def check_command(
    paths: Annotated[
        list[Path],
        typer.Argument(exists=True, dir_okay=False, readable=True, help="Files to check."),
    ],
    checker: Annotated[
        list[str] | None,
        typer.Option("--checker", "-c", help="Checker to run; repeat for several."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", exists=True, dir_okay=False, help="TOML or pyproject.toml configuration."),
    ] = None,
    threshold: Annotated[
        str | None,
        typer.Option("--threshold", help="Lowest spelling tier reported."),
    ] = None,
    disable: Annotated[
        list[str] | None,
        typer.Option("--disable", help="Spelling tier to disable; repeat for several."),
    ] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", min=1, help="Parallel workers.")] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
) -> None:
    """Check files and print one line per message.

    Exits 1 when any error-severity message is raised and 2 when a checker
    could not run or the configuration is invalid.
    """

    use_emoji = not no_emoji
    try:
        config = _apply_overrides(load_config(config_path), threshold, disable or [])
        checkers = build_checkers(checker or [SPELLING_NAME], config)
        sources = {str(path): path.read_text(encoding="utf-8", errors="replace") for path in paths}
        results = check_many(checkers, sources, jobs=jobs or config.jobs)
    except ConfigurationError as exc:
        fail(f"configuration error: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    except ToolInvocationFailure as exc:
        fail(f"checker failed: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc

    color = detect_tty()
    console = get_console_manager().get(color=color, emoji=use_emoji)
    messages = [message for found in results.values() for message in found]
    for message in messages:
        text = Text(format_message(message))
        if color:
            text.stylize(_SEVERITY_STYLES[message.severity])
        console.print(text)

    worst = highest_severity(messages)
    if worst is Severity.ERROR:
        raise typer.Exit(code=EXIT_ERRORS_FOUND)
    if not messages:
        ok(f"{len(paths)} file(s) clean", use_emoji=use_emoji)


@app.command("version")
def version_command(
    tool: Annotated[str, typer.Argument(help="External checker to probe.")] = JSONLINT_NAME,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", exists=True, dir_okay=False, help="TOML or pyproject.toml configuration."),
    ] = None,
) -> None:
    """Print the version reported by an external checker."""

    if tool != JSONLINT_NAME:
        raise typer.BadParameter(f"no external checker named '{tool}'", param_hint="TOOL")
    try:
        config = load_config(config_path)
    except ConfigurationError as exc:
        fail(f"configuration error: {exc}", use_emoji=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    version = build_jsonlint_checker(config.jsonlint).probe_version()
    typer.echo(version)
    if version == UNKNOWN_VERSION:
        warn(JSONLINT_INSTALL_HINT, use_emoji=True)


__all__ = ["app", "check_command", "format_message", "version_command"]
