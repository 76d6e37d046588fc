# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-process checker flagging common misspellings with case-preserving fixes.

Spelling inside code is hard to get right without false positives, so the
checker takes a conservative approach: it only reports words from a list of
known misspellings. Two rule kinds are supported:

* partial rules match anywhere, including inside longer words, and are
  scanned in overlap-tolerant mode so overlapping occurrences of the same
  misspelling are all reported;
* whole-word rules match only between word boundaries and are collected in a
  single non-overlapping pass.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from ..core.models import LintMessage
from ..core.severity import Severity, SeverityRegistry, SeverityTier, TierKey
from ..errors import ConfigurationError
from .positions import LineIndex
from .spelling_data import IMPORTANT, PARTIAL_WORD_RULES, PICKY, WHOLE_WORD_RULES

if TYPE_CHECKING:
    from ..config.models import SpellingConfig

LOGGER = logging.getLogger(__name__)

SPELLING_NAME: Final[str] = "spelling"
SPELLING_CODE: Final[str] = "SPELL"
SPELLING_MESSAGE_NAME: Final[str] = "Possible Spelling Mistake"
_UCWORDS_PATTERN: Final[re.Pattern[str]] = re.compile(r"(^|[ \t\r\n\f\v])(\S)")


class ScanMode(str, Enum):
    """How successive matches of one rule are located."""

    OVERLAPPING = "overlapping"
    NON_OVERLAPPING = "non_overlapping"


class RuleKind(str, Enum):
    """Kinds of spelling rule."""

    PARTIAL = "partial"
    WHOLE_WORD = "whole_word"

    @property
    def scan_mode(self) -> ScanMode:
        """Return the scan mode used for rules of this kind."""

        if self is RuleKind.PARTIAL:
            return ScanMode.OVERLAPPING
        return ScanMode.NON_OVERLAPPING


@dataclass(frozen=True, slots=True)
class WordRule:
    """A known misspelling, its correction and the tier it reports in."""

    incorrect: str
    correct: str
    tier: TierKey = IMPORTANT
    kind: RuleKind = RuleKind.PARTIAL

    def compile(self) -> re.Pattern[str]:
        """Return the case-insensitive pattern matching this rule."""

        escaped = re.escape(self.incorrect)
        if self.kind is RuleKind.WHOLE_WORD:
            return re.compile(rf"\b{escaped}\b", re.IGNORECASE)
        return re.compile(escaped, re.IGNORECASE)

    @property
    def description(self) -> str:
        """Return the human-readable message raised for a match."""

        return f"Possible spelling error. You wrote '{self.incorrect}', but did you mean '{self.correct}'?"


@dataclass(frozen=True, slots=True)
class _CompiledRule:
    rule: WordRule
    pattern: re.Pattern[str] = field(compare=False)


def default_spelling_registry() -> SeverityRegistry:
    """Return a registry holding the ``picky`` and ``important`` tiers."""

    return SeverityRegistry(
        {
            PICKY: SeverityTier(key=PICKY, rank=0, severity=Severity.WARNING, name=SPELLING_MESSAGE_NAME),
            IMPORTANT: SeverityTier(key=IMPORTANT, rank=1, severity=Severity.ERROR, name=SPELLING_MESSAGE_NAME),
        },
    )


def default_word_rules() -> list[WordRule]:
    """Return the built-in rules, partial rules first."""

    rules: list[WordRule] = []
    for kind, table in ((RuleKind.PARTIAL, PARTIAL_WORD_RULES), (RuleKind.WHOLE_WORD, WHOLE_WORD_RULES)):
        for tier, words in table.items():
            rules.extend(WordRule(incorrect, correct, tier, kind) for incorrect, correct in words.items())
    return rules


def _ucwords(text: str) -> str:
    """Upper-case the first character of every whitespace-delimited word."""

    return _UCWORDS_PATTERN.sub(lambda match: match.group(1) + match.group(2).upper(), text)


def fix_letter_case(correction: str, exemplar: str) -> str | None:
    """Return ``correction`` re-cased to mirror the casing pattern of ``exemplar``.

    Args:
        correction: Correct spelling to re-case.
        exemplar: Text as it appears in the scanned buffer.

    Returns:
        str | None: The lower-case, upper-case or title-case correction, or
        ``None`` when ``exemplar`` fits none of those patterns (for example
        ``tEh``) and the intended casing is ambiguous.
    """

    if exemplar == exemplar.lower():
        return correction.lower()
    if exemplar == exemplar.upper():
        return correction.upper()
    if exemplar == _ucwords(exemplar.lower()):
        return _ucwords(correction.lower())
    return None


def iter_rule_matches(pattern: re.Pattern[str], text: str, mode: ScanMode) -> Iterator[re.Match[str]]:
    """Yield every match of ``pattern`` in ``text`` according to ``mode``.

    Overlapping scans resume one character after each match start, so
    ``aa`` is found twice in ``aaa``.
    """

    if mode is ScanMode.NON_OVERLAPPING:
        yield from pattern.finditer(text)
        return
    position = 0
    while position < len(text):
        match = pattern.search(text, position)
        if match is None:
            return
        yield match
        position = match.start() + 1


class SpellingChecker:
    """Scan text buffers against configured misspelling rules.

    Rules are fixed at construction. The severity registry is consulted on
    every scan, so tiers disabled after construction are skipped on the next
    call to :meth:`check`.
    """

    def __init__(
        self,
        rules: Iterable[WordRule] = (),
        *,
        registry: SeverityRegistry | None = None,
        severity_threshold: TierKey = PICKY,
        include_defaults: bool = True,
    ) -> None:
        """Validate and compile the rule set.

        Args:
            rules: Rules added after the built-in list; a rule with the same
                kind, tier and misspelling replaces the earlier one.
            registry: Tier registry; defaults to :func:`default_spelling_registry`.
            severity_threshold: Lowest tier reported.
            include_defaults: Whether the built-in word list is loaded.

        Raises:
            ConfigurationError: If a rule has an empty word or references an
                unknown tier, or the threshold tier is unknown.
        """

        self._registry = registry if registry is not None else default_spelling_registry()
        if severity_threshold not in self._registry:
            raise ConfigurationError(f"unknown severity threshold tier '{severity_threshold}'")
        self._threshold = severity_threshold

        merged: dict[tuple[RuleKind, TierKey, str], WordRule] = {}
        candidates = [*default_word_rules(), *rules] if include_defaults else list(rules)
        for rule in candidates:
            self._validate(rule)
            merged[(rule.kind, rule.tier, rule.incorrect)] = rule
        ordered = sorted(merged.values(), key=lambda rule: rule.kind is RuleKind.WHOLE_WORD)
        self._rules: tuple[_CompiledRule, ...] = tuple(_CompiledRule(rule, rule.compile()) for rule in ordered)

    @classmethod
    def from_config(cls, config: SpellingConfig, *, registry: SeverityRegistry | None = None) -> SpellingChecker:
        """Build a checker from a :class:`SpellingConfig`.

        Tier flags in ``config.enabled_tiers`` are applied to the registry
        before the checker is built.
        """

        active = registry if registry is not None else default_spelling_registry()
        for tier, enabled in config.enabled_tiers.items():
            active.set_enabled(tier, enabled)
        custom = (
            WordRule(
                entry.incorrect,
                entry.correct,
                entry.tier,
                RuleKind.WHOLE_WORD if entry.whole_word else RuleKind.PARTIAL,
            )
            for entry in config.custom_word_rules
        )
        return cls(
            custom,
            registry=active,
            severity_threshold=config.severity_threshold,
            include_defaults=config.include_defaults,
        )

    def _validate(self, rule: WordRule) -> None:
        if not rule.incorrect or not rule.correct:
            raise ConfigurationError(f"spelling rule {rule.incorrect!r} -> {rule.correct!r} has an empty word")
        if rule.tier not in self._registry:
            raise ConfigurationError(f"spelling rule '{rule.incorrect}' references unknown tier '{rule.tier}'")

    @property
    def name(self) -> str:
        """Return the configuration name of the checker."""

        return SPELLING_NAME

    @property
    def code(self) -> str:
        """Return the code stamped on every spelling message."""

        return SPELLING_CODE

    @property
    def registry(self) -> SeverityRegistry:
        """Return the tier registry consulted during scans."""

        return self._registry

    @property
    def rules(self) -> tuple[WordRule, ...]:
        """Return the active rules, partial rules first."""

        return tuple(compiled.rule for compiled in self._rules)

    def check(self, path: str, content: str) -> list[LintMessage]:
        """Return every spelling message raised for ``content``.

        Args:
            path: Identifier of the scanned resource.
            content: Full text buffer to scan.

        Returns:
            list[LintMessage]: Messages in rule order then match order.
        """

        floor = self._registry.tier(self._threshold).rank
        index = LineIndex(content)
        messages: list[LintMessage] = []
        for compiled in self._rules:
            tier = self._registry.tier(compiled.rule.tier)
            if tier.rank < floor or not self._registry.is_code_enabled(tier.key):
                continue
            for match in iter_rule_matches(compiled.pattern, content, compiled.rule.kind.scan_mode):
                messages.append(self._build_message(path, index, compiled.rule, tier, match))
        LOGGER.debug("spelling scan of %s raised %d message(s)", path, len(messages))
        return messages

    def _build_message(
        self,
        path: str,
        index: LineIndex,
        rule: WordRule,
        tier: SeverityTier,
        match: re.Match[str],
    ) -> LintMessage:
        original = match.group(0)
        replacement = fix_letter_case(rule.correct, original)
        line, column = index.locate(match.start())
        return LintMessage(
            path=path,
            line=line,
            column=column,
            code=self.code,
            severity=tier.severity,
            name=tier.name,
            description=rule.description,
            original_text=original if replacement is not None else None,
            replacement_text=replacement,
        )


__all__ = [
    "SPELLING_CODE",
    "SPELLING_NAME",
    "RuleKind",
    "ScanMode",
    "SpellingChecker",
    "WordRule",
    "default_spelling_registry",
    "default_word_rules",
    "fix_letter_case",
    "iter_rule_matches",
]
