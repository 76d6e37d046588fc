# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the jsonlint and version output parsers."""

from __future__ import annotations

import logging
from subprocess import CompletedProcess

import pytest

from lintengine.core.models import ExternalCheckResult
from lintengine.core.severity import Severity
from lintengine.parsers import (
    JSONLINT_PATTERN,
    StderrParser,
    iter_pattern_matches,
    parse_jsonlint,
    parse_version,
)


def test_parse_jsonlint_single_line() -> None:
    (message,) = parse_jsonlint(["line 3, col 5, unexpected token"], "data.json")

    assert message.path == "data.json"
    assert (message.line, message.column) == (3, 5)
    assert message.description == "Unexpected token"
    assert message.severity is Severity.ERROR
    assert message.code == "JSON"
    assert not message.has_autofix


def test_parse_jsonlint_ignores_tool_path() -> None:
    line = "foo.json: line 1, col 1, bad"
    match = JSONLINT_PATTERN.match(line)
    assert match is not None
    assert match.group("path") == "foo.json"

    (message,) = parse_jsonlint([line], "caller.json")

    assert message.path == "caller.json"
    assert (message.line, message.column) == (1, 1)
    assert message.description == "Bad"


def test_parse_jsonlint_skips_noise() -> None:
    stderr = [
        "Error: Parse error on line 2:",
        "",
        "...\"a\": 1,}",
        "line 2, col 9, found: '}' - expected: 'STRING'.",
        "line 0, col 0, impossible position",
    ]

    messages = parse_jsonlint(stderr, "x.json")

    assert len(messages) == 1
    assert messages[0].line == 2
    assert messages[0].description == "Found: '}' - expected: 'STRING'."


def test_parse_jsonlint_custom_code() -> None:
    (message,) = parse_jsonlint(["line 1, col 2, oops"], "x.json", code="JSONLINT")

    assert message.code == "JSONLINT"


def test_stderr_parser_reads_stderr_only() -> None:
    parser = StderrParser(parse_jsonlint)
    result = ExternalCheckResult(
        exit_status=1,
        stdout="line 9, col 9, from stdout",
        stderr_lines=("line 4, col 2, from stderr",),
    )

    messages = parser.parse("x.json", result)

    assert [m.description for m in messages] == ["From stderr"]


def test_iter_pattern_matches_strips_line_endings() -> None:
    matches = list(iter_pattern_matches(["line 1, col 1, a\r\n", "   "], JSONLINT_PATTERN))

    assert [m.group("description") for m in matches] == ["a"]


@pytest.mark.parametrize(
    ("stdout", "expected"),
    [
        ("1.2.3", "1.2.3"),
        ("1.2.3\n", "1.2.3"),
        ("10.20.30", "10.20.30"),
        ("jsonlint 1.2.3", "unknown"),
        ("1.2", "unknown"),
        ("", "unknown"),
    ],
)
def test_parse_version(stdout: str, expected: str) -> None:
    assert parse_version(stdout) == expected


def test_form_feed_stays_inside_description() -> None:
    completed = CompletedProcess(["jsonlint"], 1, "", "line 1, col 2, found: 'a\x0cb' - expected x\n")

    (message,) = StderrParser(parse_jsonlint).parse("x.json", ExternalCheckResult.from_process(completed))

    assert message.description == "Found: 'a\x0cb' - expected x"


def test_skipped_positions_are_logged_by_jsonlint_parser(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="lintengine.parsers.jsonlint"):
        assert parse_jsonlint(["line 0, col 3, nowhere"], "x.json") == []

    assert any(record.name == "lintengine.parsers.jsonlint" for record in caplog.records)
