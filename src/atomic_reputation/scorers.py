# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Category scorers for the atomic reputation engine.

Each scorer turns one category's counters into a fresh result object holding
one ``ScoreItem`` per counted unit. Scorers never decay their own output and
never mutate their inputs. Counters are clamped to non-negative integers
before use.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .constants import (
    ACTION_POINTS,
    ACTIVE_MONTH_DAYS,
    INACTIVITY_THRESHOLD_DAYS,
    SECONDS_PER_DAY,
    SIX_MONTH_PERIOD_DAYS,
    STAKING_LONG_AFTER_DAYS,
    STAKING_MEDIUM_MIN_DAYS,
    TOKEN_DIVERSITY_MIN_TOKENS,
)
from .timeline import ensure_utc, resolve_now, resolve_timestamps
from .types import (
    ExternalTxPenalty,
    InteractionScore,
    PiDexScore,
    PiNetworkScore,
    ScoreAction,
    ScoreCategory,
    ScoreItem,
    StakingScore,
    StakingTier,
    SuspiciousBehaviorPenalty,
    WalletAgeScore,
    clamp_count,
)


def _repeat_items(
    category: ScoreCategory,
    action: ScoreAction,
    count: int,
    explanation: str,
    now: datetime,
    real_dates: Sequence[datetime | None] | None = None,
) -> list[ScoreItem]:
    """
    Emit *count* items of *action*, one per unit.

    *explanation* may contain ``{n}``, replaced by the 1-based unit number.
    """
    points = ACTION_POINTS[action]
    timestamps = resolve_timestamps(action, count, now, real_dates)
    return [
        ScoreItem(
            category=category,
            action=action,
            points=points,
            timestamp=timestamp,
            explanation=explanation.format(n=index + 1),
        )
        for index, timestamp in enumerate(timestamps)
    ]


def _single_item(
    category: ScoreCategory, action: ScoreAction, explanation: str, now: datetime
) -> ScoreItem:
    return ScoreItem(
        category=category,
        action=action,
        points=ACTION_POINTS[action],
        timestamp=now,
        explanation=explanation,
    )


def _sum_points(items: list[ScoreItem]) -> int:
    return sum(item.points for item in items)


# ---------------------------------------------------------------------------
# Positive categories
# ---------------------------------------------------------------------------


def calculate_wallet_age_score(
    account_age_days: int,
    last_activity_date: datetime,
    now: datetime | None = None,
) -> WalletAgeScore:
    """
    Score the age and liveness of a wallet.

    +2 per elapsed 30-day month, +1 per elapsed 180-day period, and a single
    -5 when the last activity is more than 90 days before *now*.
    """
    now = resolve_now(now)
    age_days = clamp_count(account_age_days)

    active_months = age_days // ACTIVE_MONTH_DAYS
    six_month_periods = age_days // SIX_MONTH_PERIOD_DAYS

    items = _repeat_items(
        "wallet_age", "active_month", active_months, "+2 for month {n} of activity", now
    )
    items += _repeat_items(
        "wallet_age",
        "six_month_active",
        six_month_periods,
        "+1 for six months without dormancy",
        now,
    )

    idle_days = (now - ensure_utc(last_activity_date)).total_seconds() / SECONDS_PER_DAY
    inactivity_penalty = 0
    if idle_days > INACTIVITY_THRESHOLD_DAYS:
        penalty_item = _single_item(
            "wallet_age",
            "inactivity_penalty",
            f"-5 for more than {INACTIVITY_THRESHOLD_DAYS} days of inactivity",
            now,
        )
        inactivity_penalty = penalty_item.points
        items.append(penalty_item)

    return WalletAgeScore(
        active_months=active_months,
        six_month_periods=six_month_periods,
        inactivity_penalty=inactivity_penalty,
        total_points=_sum_points(items),
        items=items,
    )


def calculate_interaction_score(
    daily_checkins: int,
    ad_bonuses: int,
    report_views: int,
    tool_usage: int,
    now: datetime | None = None,
) -> InteractionScore:
    """Score in-app engagement: check-ins, ad bonuses, report views and tool use."""
    now = resolve_now(now)
    daily_checkins = clamp_count(daily_checkins)
    ad_bonuses = clamp_count(ad_bonuses)
    report_views = clamp_count(report_views)
    tool_usage = clamp_count(tool_usage)

    items = _repeat_items(
        "interaction", "daily_checkin", daily_checkins, "+3 for daily check-in", now
    )
    items += _repeat_items(
        "interaction", "ad_bonus", ad_bonuses, "+5 for check-in with an ad view", now
    )
    items += _repeat_items(
        "interaction", "report_view", report_views, "+1 for opening a report", now
    )
    items += _repeat_items(
        "interaction", "tool_usage", tool_usage, "+2 for using an analysis tool", now
    )

    return InteractionScore(
        daily_checkins=daily_checkins,
        ad_bonuses=ad_bonuses,
        report_views=report_views,
        tool_usage=tool_usage,
        total_points=_sum_points(items),
        items=items,
    )


def calculate_pi_network_score(
    internal_tx_count: int,
    app_interactions: int,
    sdk_payments: int,
    tx_dates: Sequence[datetime | None] | None = None,
    now: datetime | None = None,
) -> PiNetworkScore:
    """
    Score on-network transactions.

    Internal transactions take their timestamps from *tx_dates* where
    available and fall back to synthetic spacing past its end.
    """
    now = resolve_now(now)
    internal_tx_count = clamp_count(internal_tx_count)
    app_interactions = clamp_count(app_interactions)
    sdk_payments = clamp_count(sdk_payments)

    items = _repeat_items(
        "pi_network",
        "internal_tx",
        internal_tx_count,
        "+2 for an internal transaction",
        now,
        real_dates=tx_dates,
    )
    items += _repeat_items(
        "pi_network",
        "app_interaction",
        app_interactions,
        "+5 for interacting with a Pi app",
        now,
    )
    items += _repeat_items(
        "pi_network", "sdk_payment", sdk_payments, "+6 for a payment through the Pi SDK", now
    )

    return PiNetworkScore(
        internal_tx_count=internal_tx_count,
        app_interactions=app_interactions,
        sdk_payments=sdk_payments,
        total_points=_sum_points(items),
        items=items,
    )


def calculate_pi_dex_score(
    normal_trades: int,
    unique_tokens: int,
    regular_activity_weeks: int,
    now: datetime | None = None,
) -> PiDexScore:
    """Score DEX trading: +4 per trade, +3 once for 3+ tokens, +5 per regular week."""
    now = resolve_now(now)
    normal_trades = clamp_count(normal_trades)
    unique_tokens = clamp_count(unique_tokens)
    regular_activity_weeks = clamp_count(regular_activity_weeks)

    items = _repeat_items(
        "pi_dex", "normal_trade", normal_trades, "+4 for a normal trade", now
    )
    if unique_tokens >= TOKEN_DIVERSITY_MIN_TOKENS:
        items.append(
            _single_item(
                "pi_dex",
                "token_diversity",
                f"+3 for token diversity ({unique_tokens} tokens)",
                now,
            )
        )
    items += _repeat_items(
        "pi_dex",
        "regular_activity",
        regular_activity_weeks,
        "+5 for regular activity (week {n})",
        now,
    )

    return PiDexScore(
        normal_trades=normal_trades,
        token_diversity=unique_tokens,
        regular_activity=regular_activity_weeks,
        total_points=_sum_points(items),
        items=items,
    )


def staking_tier(staking_days: int) -> StakingTier:
    """Return the staking tier for a staking duration in days."""
    if staking_days > STAKING_LONG_AFTER_DAYS:
        return "long"
    if staking_days >= STAKING_MEDIUM_MIN_DAYS:
        return "medium"
    if staking_days > 0:
        return "short"
    return "none"


_STAKING_ACTIONS: dict[StakingTier, ScoreAction] = {
    "long": "long_term_stake",
    "medium": "medium_term_stake",
    "short": "short_term_stake",
}


def calculate_staking_score(
    staking_days: int, now: datetime | None = None
) -> StakingScore:
    """
    Score staking duration.

    Tiered, not additive: at most one item is emitted whatever the duration.
    """
    now = resolve_now(now)
    staking_days = clamp_count(staking_days)
    tier = staking_tier(staking_days)

    items: list[ScoreItem] = []
    if tier != "none":
        explanations = {
            "long": f"+10 for long-term staking ({staking_days} days)",
            "medium": "+6 for medium-term staking (30-90 days)",
            "short": "+3 for short-term staking (under 30 days)",
        }
        items.append(
            _single_item("staking", _STAKING_ACTIONS[tier], explanations[tier], now)
        )

    return StakingScore(
        staking_days=staking_days,
        tier=tier,
        total_points=_sum_points(items),
        items=items,
    )


# ---------------------------------------------------------------------------
# Penalty categories
# ---------------------------------------------------------------------------


def calculate_external_penalty(
    small_transfers: int,
    frequent_transfers: int,
    sudden_exits: int,
    continuous_drain: int,
    now: datetime | None = None,
) -> ExternalTxPenalty:
    """Penalise value leaving the network. All items are stamped at *now*."""
    now = resolve_now(now)
    small_transfers = clamp_count(small_transfers)
    frequent_transfers = clamp_count(frequent_transfers)
    sudden_exits = clamp_count(sudden_exits)
    continuous_drain = clamp_count(continuous_drain)

    items = _repeat_items(
        "external_penalty",
        "small_transfer",
        small_transfers,
        "-2 for a small external transfer",
        now,
    )
    items += _repeat_items(
        "external_penalty",
        "frequent_transfer",
        frequent_transfers,
        "-5 for a frequent external transfer",
        now,
    )
    items += _repeat_items(
        "external_penalty", "sudden_exit", sudden_exits, "-10 for a sudden large exit", now
    )
    items += _repeat_items(
        "external_penalty",
        "continuous_drain",
        continuous_drain,
        "-15 for continuous draining",
        now,
    )

    return ExternalTxPenalty(
        small_transfers=small_transfers,
        frequent_transfers=frequent_transfers,
        sudden_exits=sudden_exits,
        continuous_drain=continuous_drain,
        total_penalty=_sum_points(items),
        items=items,
    )


def calculate_suspicious_penalty(
    spam_count: int,
    farming_instances: int,
    suspicious_links: int,
    now: datetime | None = None,
) -> SuspiciousBehaviorPenalty:
    """Penalise spam, farming and links to flagged wallets."""
    now = resolve_now(now)
    spam_count = clamp_count(spam_count)
    farming_instances = clamp_count(farming_instances)
    suspicious_links = clamp_count(suspicious_links)

    items = _repeat_items(
        "suspicious", "spam_activity", spam_count, "-3 for spam activity", now
    )
    items += _repeat_items(
        "suspicious",
        "farming_behavior",
        farming_instances,
        "-8 for farming behavior",
        now,
    )
    items += _repeat_items(
        "suspicious", "suspicious_link", suspicious_links, "-12 for a suspicious link", now
    )

    return SuspiciousBehaviorPenalty(
        spam_activity=spam_count,
        farming_behavior=farming_instances,
        suspicious_links=suspicious_links,
        total_penalty=_sum_points(items),
        items=items,
    )
