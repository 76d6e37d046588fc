# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering the spelling checker, its scan modes and case-preserving fixes."""

from __future__ import annotations

import re

import pytest

from lintengine.checkers.positions import LineIndex
from lintengine.checkers.spelling import (
    RuleKind,
    ScanMode,
    SpellingChecker,
    WordRule,
    default_spelling_registry,
    fix_letter_case,
    iter_rule_matches,
)
from lintengine.checkers.spelling_data import IMPORTANT, PICKY
from lintengine.config.models import CustomWordRule, SpellingConfig
from lintengine.core.severity import Severity, SeverityTier
from lintengine.errors import ConfigurationError

_TEH = WordRule("teh", "the", IMPORTANT, RuleKind.PARTIAL)


def _checker(*rules: WordRule, **kwargs: object) -> SpellingChecker:
    return SpellingChecker(rules, include_defaults=False, **kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("correction", "exemplar", "expected"),
    [
        ("the", "teh", "the"),
        ("the", "TEH", "THE"),
        ("the", "Teh", "The"),
        ("the", "tEh", None),
        ("a lot", "Alot", "A Lot"),
        ("a lot", "alot", "a lot"),
        ("Receive", "recieve", "receive"),
    ],
)
def test_fix_letter_case(correction: str, exemplar: str, expected: str | None) -> None:
    assert fix_letter_case(correction, exemplar) == expected


def test_rule_kind_selects_scan_mode() -> None:
    assert RuleKind.PARTIAL.scan_mode is ScanMode.OVERLAPPING
    assert RuleKind.WHOLE_WORD.scan_mode is ScanMode.NON_OVERLAPPING


def test_overlapping_scan_reports_every_start() -> None:
    pattern = re.compile("aa", re.IGNORECASE)

    overlapping = [match.start() for match in iter_rule_matches(pattern, "aaaa", ScanMode.OVERLAPPING)]
    disjoint = [match.start() for match in iter_rule_matches(pattern, "aaaa", ScanMode.NON_OVERLAPPING)]

    assert overlapping == [0, 1, 2]
    assert disjoint == [0, 2]


def test_partial_rule_matches_inside_words() -> None:
    checker = _checker(_TEH)

    messages = checker.check("notes.txt", "tehnology and teh end")

    assert [(m.line, m.column) for m in messages] == [(1, 1), (1, 15)]
    assert all(m.replacement_text == "the" for m in messages)


def test_partial_rule_overlapping_occurrences() -> None:
    checker = _checker(WordRule("aa", "b", IMPORTANT, RuleKind.PARTIAL))

    messages = checker.check("x", "aaa")

    assert [m.column for m in messages] == [1, 2]


def test_whole_word_rule_respects_boundaries() -> None:
    checker = _checker(WordRule("an", "a", IMPORTANT, RuleKind.WHOLE_WORD))

    messages = checker.check("x", "and an anagram, an")

    assert [m.column for m in messages] == [5, 17]


def test_case_is_preserved_in_replacements() -> None:
    checker = _checker(_TEH)

    lower, upper, title = checker.check("x", "teh TEH Teh")

    assert (lower.original_text, lower.replacement_text) == ("teh", "the")
    assert (upper.original_text, upper.replacement_text) == ("TEH", "THE")
    assert (title.original_text, title.replacement_text) == ("Teh", "The")


def test_ambiguous_case_raises_without_fix() -> None:
    checker = _checker(_TEH)

    (message,) = checker.check("x", "say tEh word")

    assert message.column == 5
    assert message.replacement_text is None
    assert message.original_text is None
    assert not message.has_autofix


def test_message_fields() -> None:
    checker = _checker(_TEH)

    (message,) = checker.check("docs/readme.md", "first line\nsecond teh")

    assert message.path == "docs/readme.md"
    assert (message.line, message.column) == (2, 8)
    assert message.code == "SPELL"
    assert message.severity is Severity.ERROR
    assert message.name == "Possible Spelling Mistake"
    assert message.description == "Possible spelling error. You wrote 'teh', but did you mean 'the'?"


def test_picky_rules_raise_warnings() -> None:
    checker = _checker(WordRule("adn", "and", PICKY, RuleKind.WHOLE_WORD))

    (message,) = checker.check("x", "salt adn pepper")

    assert message.severity is Severity.WARNING


def test_threshold_skips_lower_tiers() -> None:
    picky = WordRule("adn", "and", PICKY, RuleKind.WHOLE_WORD)
    checker = _checker(picky, _TEH, severity_threshold=IMPORTANT)

    messages = checker.check("x", "teh adn")

    assert [m.original_text for m in messages] == ["teh"]


def test_disabled_tier_raises_nothing_on_next_scan() -> None:
    checker = _checker(_TEH)
    assert checker.check("x", "teh")

    checker.registry.disable(IMPORTANT)

    assert checker.check("x", "teh teh teh") == []


def test_custom_tier_in_open_registry() -> None:
    registry = default_spelling_registry()
    registry.register(SeverityTier(key="legacy", rank=5, severity=Severity.WARNING, name="Legacy Spelling"))
    checker = _checker(WordRule("colour", "color", "legacy", RuleKind.WHOLE_WORD), registry=registry)

    (message,) = checker.check("x", "the colour red")

    assert message.name == "Legacy Spelling"
    assert message.severity is Severity.WARNING


def test_scan_is_deterministic() -> None:
    checker = SpellingChecker()
    text = "Teh wierd enviroment recieved alot of seperate comments."

    assert checker.check("x", text) == checker.check("x", text)


def test_default_rules_loaded() -> None:
    checker = SpellingChecker()

    messages = checker.check("x", "We recieve teh data.")

    assert sorted(m.original_text for m in messages) == ["recieve", "teh"]


def test_later_rule_overrides_default() -> None:
    checker = SpellingChecker([WordRule("teh", "tea", IMPORTANT, RuleKind.WHOLE_WORD)])

    (message,) = checker.check("x", "teh")

    assert message.replacement_text == "tea"


@pytest.mark.parametrize(
    "rule",
    [
        WordRule("", "the", IMPORTANT),
        WordRule("teh", "", IMPORTANT),
        WordRule("teh", "the", "bogus"),
    ],
)
def test_invalid_rules_rejected_at_construction(rule: WordRule) -> None:
    with pytest.raises(ConfigurationError):
        _checker(rule)


def test_unknown_threshold_rejected() -> None:
    with pytest.raises(ConfigurationError):
        _checker(_TEH, severity_threshold="bogus")


def test_from_config_applies_tiers_and_custom_rules() -> None:
    config = SpellingConfig(
        enabled_tiers={PICKY: False},
        custom_word_rules=[
            CustomWordRule(incorrect="wrod", correct="word", tier=PICKY, whole_word=True),
            CustomWordRule(incorrect="speling", correct="spelling"),
        ],
        include_defaults=False,
    )

    checker = SpellingChecker.from_config(config)

    assert not checker.registry.is_code_enabled(PICKY)
    assert [m.original_text for m in checker.check("x", "wrod misspeling")] == ["speling"]


def test_from_config_rejects_unknown_tier_flag() -> None:
    with pytest.raises(ConfigurationError):
        SpellingChecker.from_config(SpellingConfig(enabled_tiers={"bogus": False}))


def test_line_index_positions() -> None:
    text = "ab\ncd\n\nef"
    index = LineIndex(text)

    assert index.locate(0) == (1, 1)
    assert index.locate(3) == (2, 1)
    assert index.locate(6) == (3, 1)
    assert index.locate(8) == (4, 2)
    assert index.locate(4) == (2, 2)
    with pytest.raises(ValueError):
        index.locate(len(text) + 1)
