# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for severity ranking and the tier registry."""

from __future__ import annotations

import pytest

from lintengine.checkers.spelling import default_spelling_registry
from lintengine.checkers.spelling_data import IMPORTANT, PICKY
from lintengine.core.severity import Severity, SeverityRegistry, SeverityTier
from lintengine.errors import ConfigurationError


def test_error_outranks_warning() -> None:
    assert Severity.ERROR.rank > Severity.WARNING.rank
    assert Severity.ERROR > Severity.WARNING
    assert max([Severity.WARNING, Severity.ERROR, Severity.WARNING]) is Severity.ERROR


def test_default_registry_tiers_enabled() -> None:
    registry = default_spelling_registry()

    assert registry.is_code_enabled(PICKY)
    assert registry.is_code_enabled(IMPORTANT)
    assert registry.severity_for(PICKY) is Severity.WARNING
    assert registry.severity_for(IMPORTANT) is Severity.ERROR
    assert registry.name_for(IMPORTANT) == "Possible Spelling Mistake"
    assert [tier.key for tier in registry] == [PICKY, IMPORTANT]


def test_disable_and_enable_tier() -> None:
    registry = default_spelling_registry()

    registry.disable(PICKY)
    assert not registry.is_code_enabled(PICKY)
    assert registry.is_code_enabled(IMPORTANT)

    registry.enable(PICKY)
    assert registry.is_code_enabled(PICKY)


def test_unknown_tier_lookup_is_disabled_but_strict_access_raises() -> None:
    registry = SeverityRegistry()

    assert not registry.is_code_enabled("missing")
    assert "missing" not in registry
    with pytest.raises(ConfigurationError):
        registry.tier("missing")
    with pytest.raises(ConfigurationError):
        registry.disable("missing")


def test_duplicate_registration_rejected() -> None:
    registry = SeverityRegistry()
    tier = SeverityTier(key="custom", rank=3, severity=Severity.WARNING, name="Custom")
    registry.register(tier)

    with pytest.raises(ConfigurationError):
        registry.register(tier)


def test_at_or_above_threshold() -> None:
    registry = default_spelling_registry()
    registry.register(SeverityTier(key="legacy", rank=5, severity=Severity.ERROR, name="Legacy"))

    keys = [tier.key for tier in registry.at_or_above(IMPORTANT)]

    assert keys == [IMPORTANT, "legacy"]
    assert len(registry) == 3
