# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and the tier registry consulted before raising messages."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Final

from ..errors import ConfigurationError


class Severity(str, Enum):
    """Ranked severity classes attached to every lint message."""

    ERROR = "error"
    WARNING = "warning"

    @property
    def rank(self) -> int:
        """Return the gating rank of the severity; higher is more severe."""

        return _SEVERITY_RANKS[self]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank >= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank <= other.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.rank < other.rank


_SEVERITY_RANKS: Final[dict[Severity, int]] = {
    Severity.WARNING: 10,
    Severity.ERROR: 20,
}

TierKey = Hashable


@dataclass(frozen=True, slots=True)
class SeverityTier:
    """Describe one configurable bucket of rules."""

    key: TierKey
    rank: int
    severity: Severity
    name: str
    enabled: bool = True


class SeverityRegistry:
    """Open registry mapping opaque tier keys to rank, severity, label and enabled flag.

    Callers may register additional tiers without touching the checkers. The
    enabled flag is read at scan time, so toggling a tier takes effect on the
    next scan without rebuilding the checker.
    """

    def __init__(self, tiers: Mapping[TierKey, SeverityTier] | None = None) -> None:
        self._tiers: dict[TierKey, SeverityTier] = {}
        for tier in (tiers or {}).values():
            self.register(tier)

    def register(self, tier: SeverityTier) -> SeverityTier:
        """Add ``tier`` to the registry.

        Args:
            tier: Tier definition to add.

        Returns:
            SeverityTier: The registered tier.

        Raises:
            ConfigurationError: If a tier with the same key already exists.
        """

        if tier.key in self._tiers:
            raise ConfigurationError(f"severity tier '{tier.key}' is already registered")
        self._tiers[tier.key] = tier
        return tier

    def tier(self, key: TierKey) -> SeverityTier:
        """Return the tier registered under ``key``.

        Raises:
            ConfigurationError: If ``key`` is unknown.
        """

        try:
            return self._tiers[key]
        except KeyError as exc:
            raise ConfigurationError(f"unknown severity tier '{key}'") from exc

    def __contains__(self, key: object) -> bool:
        return key in self._tiers

    def __iter__(self) -> Iterator[SeverityTier]:
        return iter(sorted(self._tiers.values(), key=lambda tier: tier.rank))

    def __len__(self) -> int:
        return len(self._tiers)

    def is_code_enabled(self, key: TierKey) -> bool:
        """Return ``True`` when the tier exists and is enabled; unknown keys are disabled."""

        tier = self._tiers.get(key)
        return tier is not None and tier.enabled

    def set_enabled(self, key: TierKey, enabled: bool) -> None:
        """Toggle the enabled flag of the tier registered under ``key``."""

        self._tiers[key] = replace(self.tier(key), enabled=enabled)

    def enable(self, key: TierKey) -> None:
        """Enable the tier registered under ``key``."""

        self.set_enabled(key, True)

    def disable(self, key: TierKey) -> None:
        """Disable the tier registered under ``key``."""

        self.set_enabled(key, False)

    def severity_for(self, key: TierKey) -> Severity:
        """Return the severity class raised for rules in tier ``key``."""

        return self.tier(key).severity

    def name_for(self, key: TierKey) -> str:
        """Return the display name of tier ``key``."""

        return self.tier(key).name

    def at_or_above(self, threshold: TierKey) -> tuple[SeverityTier, ...]:
        """Return every tier whose rank is at least that of ``threshold``."""

        floor = self.tier(threshold).rank
        return tuple(tier for tier in self if tier.rank >= floor)


__all__ = ["Severity", "SeverityRegistry", "SeverityTier", "TierKey"]
