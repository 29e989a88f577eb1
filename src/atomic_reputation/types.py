# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Core type definitions for the atomic reputation engine.

All runtime data models are Pydantic v2 models. Result models are frozen;
``ScoreItem`` is the one exception because the decay step records the
multiplier it applied on each positive item.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from .levels import AtomicTrustLevel
from .timeline import ensure_utc

logger = logging.getLogger("atomic_reputation.types")

# ---------------------------------------------------------------------------
# Category and action literals
# ---------------------------------------------------------------------------

ScoreCategory = Literal[
    "wallet_age",
    "interaction",
    "pi_network",
    "pi_dex",
    "staking",
    "external_penalty",
    "suspicious",
]
"""The seven independently scored activity groupings."""

#: Aggregation order of categories. Breakdown displays rely on it.
CATEGORY_ORDER: tuple[ScoreCategory, ...] = (
    "wallet_age",
    "interaction",
    "pi_network",
    "pi_dex",
    "staking",
    "external_penalty",
    "suspicious",
)

ScoreAction = Literal[
    "active_month",
    "six_month_active",
    "inactivity_penalty",
    "daily_checkin",
    "ad_bonus",
    "report_view",
    "tool_usage",
    "internal_tx",
    "app_interaction",
    "sdk_payment",
    "normal_trade",
    "token_diversity",
    "regular_activity",
    "long_term_stake",
    "medium_term_stake",
    "short_term_stake",
    "small_transfer",
    "frequent_transfer",
    "sudden_exit",
    "continuous_drain",
    "spam_activity",
    "farming_behavior",
    "suspicious_link",
]

StakingTier = Literal["none", "short", "medium", "long"]


def clamp_count(value: object) -> int:
    """
    Coerce *value* to a non-negative integer counter.

    Negative, non-finite and non-numeric values become 0; floats are
    truncated. Never raises.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        if value < 0:
            logger.debug("Clamped negative counter %d to 0", value)
            return 0
        return value
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        logger.debug("Clamped non-numeric counter %r to 0", value)
        return 0
    if not math.isfinite(number) or number < 0:
        logger.debug("Clamped counter %r to 0", value)
        return 0
    return int(number)


_DATETIME_ADAPTER: TypeAdapter[datetime] = TypeAdapter(datetime)


def clean_tx_dates(value: object) -> list[datetime | None]:
    """
    Coerce *value* to a list of optional UTC timestamps.

    None or a non-list value becomes an empty list. Entries that cannot be
    read as a datetime become None, so the scorer uses a synthetic timestamp
    for that index. Never raises.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        logger.debug("Ignored tx_dates value %r", value)
        return []

    cleaned: list[datetime | None] = []
    for entry in value:
        if entry is None:
            cleaned.append(None)
            continue
        try:
            cleaned.append(ensure_utc(_DATETIME_ADAPTER.validate_python(entry)))
        except ValidationError:
            logger.debug("Replaced unreadable tx_dates entry %r with None", entry)
            cleaned.append(None)
    return cleaned


# ---------------------------------------------------------------------------
# ScoreItem
# ---------------------------------------------------------------------------


class ScoreItem(BaseModel):
    """
    One discrete, timestamped unit of evidence contributing to a score.

    Items are created in bulk by a category scorer. Only ``decay_factor`` is
    written afterwards, by ``apply_time_decay``, and only for items with
    positive points.
    """

    category: ScoreCategory
    action: ScoreAction
    points: int = Field(..., description="Signed, undecayed point value.")
    timestamp: datetime = Field(..., description="When the activity happened (UTC).")
    explanation: str = Field(..., description="Human-readable reason for the points.")
    decay_factor: float | None = Field(
        default=None,
        description="Age multiplier applied by the decay step. None for items with points <= 0.",
    )

    @field_validator("timestamp")
    @classmethod
    def _normalise_timestamp(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def decayed_points(self) -> float:
        """Points after the recorded decay factor (undecayed if none recorded)."""
        factor = 1.0 if self.decay_factor is None else self.decay_factor
        return self.points * factor


# ---------------------------------------------------------------------------
# Category results
# ---------------------------------------------------------------------------


class CategoryResult(BaseModel, frozen=True):
    """Common shape of the seven category results."""

    items: list[ScoreItem] = Field(default_factory=list)

    @property
    def net_points(self) -> int:
        """Sum of undecayed item points."""
        return sum(item.points for item in self.items)


class WalletAgeScore(CategoryResult, frozen=True):
    active_months: int
    six_month_periods: int
    inactivity_penalty: int = Field(..., le=0)
    total_points: int


class InteractionScore(CategoryResult, frozen=True):
    daily_checkins: int
    ad_bonuses: int
    report_views: int
    tool_usage: int
    total_points: int


class PiNetworkScore(CategoryResult, frozen=True):
    internal_tx_count: int
    app_interactions: int
    sdk_payments: int
    total_points: int


class PiDexScore(CategoryResult, frozen=True):
    normal_trades: int
    token_diversity: int
    regular_activity: int
    total_points: int


class StakingScore(CategoryResult, frozen=True):
    staking_days: int
    tier: StakingTier
    total_points: int


class ExternalTxPenalty(CategoryResult, frozen=True):
    small_transfers: int
    frequent_transfers: int
    sudden_exits: int
    continuous_drain: int
    total_penalty: int = Field(..., le=0)


class SuspiciousBehaviorPenalty(CategoryResult, frozen=True):
    spam_activity: int
    farming_behavior: int
    suspicious_links: int
    total_penalty: int = Field(..., le=0)


# ---------------------------------------------------------------------------
# WalletActivityData (engine input)
# ---------------------------------------------------------------------------

_COUNTER_FIELDS = (
    "account_age_days",
    "daily_checkins",
    "ad_bonuses",
    "report_views",
    "tool_usage",
    "internal_tx_count",
    "app_interactions",
    "sdk_payments",
    "normal_trades",
    "unique_tokens",
    "regular_activity_weeks",
    "staking_days",
    "small_external_transfers",
    "frequent_external_transfers",
    "sudden_exits",
    "continuous_drain",
    "spam_count",
    "farming_instances",
    "suspicious_links",
)


class WalletActivityData(BaseModel, frozen=True):
    """
    Lifetime activity snapshot of one wallet, expressed as plain counters.

    Counters are clamped to non-negative integers on construction, so a bad
    upstream value degrades to "no activity" instead of failing the
    evaluation.
    """

    account_age_days: int = Field(..., ge=0, description="Days since wallet creation.")
    last_activity_date: datetime = Field(..., description="Most recent activity (UTC).")

    daily_checkins: int = Field(default=0, ge=0)
    ad_bonuses: int = Field(default=0, ge=0)
    report_views: int = Field(default=0, ge=0)
    tool_usage: int = Field(default=0, ge=0)

    internal_tx_count: int = Field(default=0, ge=0)
    app_interactions: int = Field(default=0, ge=0)
    sdk_payments: int = Field(default=0, ge=0)

    normal_trades: int = Field(default=0, ge=0)
    unique_tokens: int = Field(default=0, ge=0)
    regular_activity_weeks: int = Field(default=0, ge=0)

    staking_days: int = Field(default=0, ge=0)

    small_external_transfers: int = Field(default=0, ge=0)
    frequent_external_transfers: int = Field(default=0, ge=0)
    sudden_exits: int = Field(default=0, ge=0)
    continuous_drain: int = Field(default=0, ge=0)

    spam_count: int = Field(default=0, ge=0)
    farming_instances: int = Field(default=0, ge=0)
    suspicious_links: int = Field(default=0, ge=0)

    tx_dates: list[datetime | None] = Field(
        default_factory=list,
        description=(
            "Real internal-transaction timestamps, newest first. May be shorter "
            "than internal_tx_count; None entries use a synthetic timestamp."
        ),
    )

    @field_validator(*_COUNTER_FIELDS, mode="before")
    @classmethod
    def _clamp_counters(cls, value: object) -> int:
        return clamp_count(value)

    @field_validator("last_activity_date")
    @classmethod
    def _normalise_last_activity(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @field_validator("tx_dates", mode="before")
    @classmethod
    def _clean_tx_dates(cls, value: object) -> list[datetime | None]:
        return clean_tx_dates(value)


# ---------------------------------------------------------------------------
# Engine outputs
# ---------------------------------------------------------------------------


class AtomicReputationResult(BaseModel, frozen=True):
    """
    Complete outcome of one reputation evaluation.

    ``raw_score`` is the undecayed sum of all item points. ``adjusted_score``
    is the decayed positive sum plus the untouched penalties, rounded; it is
    never greater than ``raw_score``.
    """

    raw_score: int
    adjusted_score: int
    trust_level: AtomicTrustLevel
    wallet_age: WalletAgeScore
    interaction: InteractionScore
    pi_network: PiNetworkScore
    pi_dex: PiDexScore
    staking: StakingScore
    external_penalty: ExternalTxPenalty
    suspicious_penalty: SuspiciousBehaviorPenalty
    all_items: list[ScoreItem]
    last_updated: datetime

    def category_results(self) -> list[tuple[ScoreCategory, CategoryResult]]:
        """Return ``(category, result)`` pairs in aggregation order."""
        return [
            ("wallet_age", self.wallet_age),
            ("interaction", self.interaction),
            ("pi_network", self.pi_network),
            ("pi_dex", self.pi_dex),
            ("staking", self.staking),
            ("external_penalty", self.external_penalty),
            ("suspicious", self.suspicious_penalty),
        ]


class LevelProgress(BaseModel, frozen=True):
    """
    Tier position and progress-bar state for a score.

    ``display_score`` is the uncapped input; ``backend_score`` is the value
    capped at the score cap and drives the tier and the progress bar.
    """

    current_level: AtomicTrustLevel
    level_index: int = Field(..., ge=0, le=6)
    progress_in_level: float = Field(..., ge=0.0, le=100.0)
    points_to_next_level: float = Field(..., ge=0.0)
    next_level: AtomicTrustLevel | None
    display_score: float
    backend_score: float
