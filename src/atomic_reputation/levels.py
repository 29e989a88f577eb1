# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Trust tier definitions and the score-to-tier classifier.

Seven ordered tiers cover the whole number line through a table of half-open
intervals ``[min, max)`` anchored to the configurable score cap. The lowest
interval is ``(-inf, 0)`` and the highest is ``[0.85 * cap, +inf)``, so every
real score maps to exactly one tier.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .config import ReputationConfig, resolve_config
from .constants import TIER_FLOOR_PERCENTAGES
from .errors import ConfigurationError


class AtomicTrustLevel(IntEnum):
    """
    Seven-tier trust scale for wallets.

    Higher values mean more trust. The integer value doubles as the tier's
    position in the threshold table.
    """

    VERY_LOW_TRUST = 0
    LOW_TRUST = 1
    MEDIUM = 2
    ACTIVE = 3
    TRUSTED = 4
    PIONEER_PLUS = 5
    ELITE = 6

    def label(self) -> str:
        """Return the human-facing label for this tier."""
        return TRUST_LEVEL_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> AtomicTrustLevel:
        """
        Look up a tier by its human-facing label.

        Raises:
            ValueError: If *label* is not one of the seven tier labels.
        """
        for level, text in TRUST_LEVEL_LABELS.items():
            if text == label:
                return level
        raise ValueError(f"Unknown trust level label {label!r}.")


TRUST_LEVEL_LABELS: dict[AtomicTrustLevel, str] = {
    AtomicTrustLevel.VERY_LOW_TRUST: "Very Low Trust",
    AtomicTrustLevel.LOW_TRUST: "Low Trust",
    AtomicTrustLevel.MEDIUM: "Medium",
    AtomicTrustLevel.ACTIVE: "Active",
    AtomicTrustLevel.TRUSTED: "Trusted",
    AtomicTrustLevel.PIONEER_PLUS: "Pioneer+",
    AtomicTrustLevel.ELITE: "Elite",
}

#: Tier returned when no interval matches (only reachable for NaN).
FALLBACK_TRUST_LEVEL: AtomicTrustLevel = AtomicTrustLevel.MEDIUM

TRUST_LEVEL_MIN: AtomicTrustLevel = AtomicTrustLevel.VERY_LOW_TRUST
TRUST_LEVEL_MAX: AtomicTrustLevel = AtomicTrustLevel.ELITE
TRUST_LEVEL_COUNT: int = 7


# ---------------------------------------------------------------------------
# Presentation metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TierColors:
    """CSS colour triple used by dashboards to paint a tier badge."""

    bg: str
    text: str
    border: str


TRUST_LEVEL_COLORS: dict[AtomicTrustLevel, TierColors] = {
    AtomicTrustLevel.VERY_LOW_TRUST: TierColors(
        "rgba(239, 68, 68, 0.2)", "#EF4444", "rgba(239, 68, 68, 0.5)"
    ),
    AtomicTrustLevel.LOW_TRUST: TierColors(
        "rgba(249, 115, 22, 0.2)", "#F97316", "rgba(249, 115, 22, 0.5)"
    ),
    AtomicTrustLevel.MEDIUM: TierColors(
        "rgba(234, 179, 8, 0.2)", "#EAB308", "rgba(234, 179, 8, 0.5)"
    ),
    AtomicTrustLevel.ACTIVE: TierColors(
        "rgba(34, 197, 94, 0.2)", "#22C55E", "rgba(34, 197, 94, 0.5)"
    ),
    AtomicTrustLevel.TRUSTED: TierColors(
        "rgba(59, 130, 246, 0.2)", "#3B82F6", "rgba(59, 130, 246, 0.5)"
    ),
    AtomicTrustLevel.PIONEER_PLUS: TierColors(
        "rgba(139, 92, 246, 0.2)", "#8B5CF6", "rgba(139, 92, 246, 0.5)"
    ),
    AtomicTrustLevel.ELITE: TierColors(
        "rgba(0, 217, 255, 0.2)", "#00D9FF", "rgba(0, 217, 255, 0.5)"
    ),
}

_TRUST_LEVEL_ICONS: dict[AtomicTrustLevel, str] = {
    AtomicTrustLevel.VERY_LOW_TRUST: "AlertCircle",
    AtomicTrustLevel.LOW_TRUST: "AlertTriangle",
    AtomicTrustLevel.MEDIUM: "HelpCircle",
    AtomicTrustLevel.ACTIVE: "Activity",
    AtomicTrustLevel.TRUSTED: "CheckCircle",
    AtomicTrustLevel.PIONEER_PLUS: "Star",
    AtomicTrustLevel.ELITE: "Crown",
}


def trust_level_icon(level: object) -> str:
    """Return the icon name for *level*, or ``"Shield"`` if it is not a tier."""
    try:
        return _TRUST_LEVEL_ICONS[AtomicTrustLevel(level)]
    except (ValueError, TypeError):
        return "Shield"


# ---------------------------------------------------------------------------
# Threshold table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TrustThreshold:
    """One half-open ``[min_score, max_score)`` interval of the tier table."""

    level: AtomicTrustLevel
    min_score: float
    max_score: float

    def contains(self, score: float) -> bool:
        """Return True if ``min_score <= score < max_score``."""
        return self.min_score <= score < self.max_score

    @property
    def index(self) -> int:
        """Position of this interval in the table."""
        return int(self.level)


def build_thresholds(score_cap: float) -> tuple[TrustThreshold, ...]:
    """
    Build the seven-interval threshold table for *score_cap*.

    Bounds are 0%, 10%, 25%, 45%, 65% and 85% of the cap. The first interval
    extends to -inf and the last to +inf.

    Raises:
        ConfigurationError: If *score_cap* is not a positive finite number.
    """
    if isinstance(score_cap, bool) or not isinstance(score_cap, (int, float)):
        raise ConfigurationError(f"Score cap must be a number, got {score_cap!r}.")
    if not math.isfinite(score_cap) or score_cap <= 0:
        raise ConfigurationError(
            f"Score cap must be a positive finite number, got {score_cap!r}."
        )

    bounds = [-math.inf]
    bounds.extend(score_cap * pct / 100 for pct in TIER_FLOOR_PERCENTAGES)
    bounds.append(math.inf)

    return tuple(
        TrustThreshold(level=level, min_score=bounds[i], max_score=bounds[i + 1])
        for i, level in enumerate(AtomicTrustLevel)
    )


def find_threshold(
    score: float, thresholds: tuple[TrustThreshold, ...]
) -> TrustThreshold:
    """
    Return the first interval in *thresholds* containing *score*.

    Falls back to the Medium interval when nothing matches, which only
    happens for NaN.
    """
    for threshold in thresholds:
        if threshold.contains(score):
            return threshold
    return thresholds[int(FALLBACK_TRUST_LEVEL)]


def classify_score(
    score: float, config: ReputationConfig | None = None
) -> AtomicTrustLevel:
    """
    Map *score* to its trust tier using the table for the configured cap.

    The score is used as given: callers wanting the capped behaviour go
    through ``get_level_progress``.
    """
    thresholds = build_thresholds(resolve_config(config).score_cap)
    return find_threshold(score, thresholds).level


def get_backend_score_cap(config: ReputationConfig | None = None) -> int:
    """Return the score cap in effect for *config*."""
    return resolve_config(config).score_cap
