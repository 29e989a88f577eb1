# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Fixed scoring constants for the atomic reputation engine.

Point weights, thresholds, the decay schedule and the synthetic timeline
spacing are part of the protocol definition. They are deliberately NOT
configuration; the only tunable value is ``ReputationConfig.score_cap``.
"""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Score cap
# ---------------------------------------------------------------------------

#: Default backend score cap used when no configuration is supplied.
DEFAULT_SCORE_CAP: Final[int] = 10_000

#: Tier lower bounds as integer percentages of the score cap, lowest first.
#: Very Low Trust sits below 0 and is not listed.
TIER_FLOOR_PERCENTAGES: Final[tuple[int, ...]] = (0, 10, 25, 45, 65, 85)

# ---------------------------------------------------------------------------
# Per-action point weights
# ---------------------------------------------------------------------------

ACTION_POINTS: Final[dict[str, int]] = {
    # wallet age
    "active_month": 2,
    "six_month_active": 1,
    "inactivity_penalty": -5,
    # interaction
    "daily_checkin": 3,
    "ad_bonus": 5,
    "report_view": 1,
    "tool_usage": 2,
    # pi network transactions
    "internal_tx": 2,
    "app_interaction": 5,
    "sdk_payment": 6,
    # pi dex
    "normal_trade": 4,
    "token_diversity": 3,
    "regular_activity": 5,
    # staking (one item at most)
    "long_term_stake": 10,
    "medium_term_stake": 6,
    "short_term_stake": 3,
    # external transfer penalties
    "small_transfer": -2,
    "frequent_transfer": -5,
    "sudden_exit": -10,
    "continuous_drain": -15,
    # suspicious behaviour penalties
    "spam_activity": -3,
    "farming_behavior": -8,
    "suspicious_link": -12,
}

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

ACTIVE_MONTH_DAYS: Final[int] = 30
SIX_MONTH_PERIOD_DAYS: Final[int] = 180

#: A wallet idle for strictly more than this many days is penalised once.
INACTIVITY_THRESHOLD_DAYS: Final[int] = 90

#: Minimum number of distinct tokens traded to earn the diversity bonus.
TOKEN_DIVERSITY_MIN_TOKENS: Final[int] = 3

#: Staking strictly longer than this is "long".
STAKING_LONG_AFTER_DAYS: Final[int] = 90

#: Staking of at least this many days (up to the long bound) is "medium".
STAKING_MEDIUM_MIN_DAYS: Final[int] = 30

# ---------------------------------------------------------------------------
# Time decay
# ---------------------------------------------------------------------------

#: (max_age_days inclusive, multiplier) pairs, youngest bracket first.
DECAY_SCHEDULE: Final[tuple[tuple[int, float], ...]] = (
    (30, 1.0),
    (90, 0.9),
    (180, 0.7),
)

#: Multiplier for positive items older than the last bracket.
DECAY_FLOOR_MULTIPLIER: Final[float] = 0.5

SECONDS_PER_DAY: Final[int] = 86_400

# ---------------------------------------------------------------------------
# Synthetic timeline
# ---------------------------------------------------------------------------

#: Days stepped backwards from ``now`` per unit index when no real timestamp
#: exists. Actions absent from this table are stamped at ``now``.
SYNTHETIC_SPACING_DAYS: Final[dict[str, int]] = {
    "active_month": 30,
    "six_month_active": 180,
    "daily_checkin": 1,
    "ad_bonus": 1,
    "report_view": 2,
    "tool_usage": 3,
    "internal_tx": 5,
    "app_interaction": 7,
    "sdk_payment": 14,
    "normal_trade": 3,
    "regular_activity": 7,
}
