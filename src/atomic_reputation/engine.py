# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
ReputationEngine: entry point for evaluating a wallet's atomic reputation.

Evaluation is a pure function of (activity data, now, config): no I/O, no
state shared between calls. The engine object only holds its resolved
configuration, so one instance can be passed to any number of callers and
threads. Caching and per-user state belong to the calling service.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from .config import ReputationConfig, resolve_config
from .decay import apply_time_decay
from .levels import AtomicTrustLevel, TrustThreshold, build_thresholds, find_threshold
from .progress import get_level_progress
from .scorers import (
    calculate_external_penalty,
    calculate_interaction_score,
    calculate_pi_dex_score,
    calculate_pi_network_score,
    calculate_staking_score,
    calculate_suspicious_penalty,
    calculate_wallet_age_score,
)
from .timeline import resolve_now
from .types import (
    AtomicReputationResult,
    CategoryResult,
    LevelProgress,
    ScoreItem,
    WalletActivityData,
)

logger = logging.getLogger("atomic_reputation.engine")


def round_score(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AggregateScore:
    """Merged items and totals across all categories."""

    all_items: list[ScoreItem]
    """Items of every category, concatenated in category order."""

    raw_score: int
    """Sum of undecayed item points."""

    adjusted_score: int
    """Rounded decayed total. Never greater than ``raw_score``."""


def aggregate_scores(
    category_results: Sequence[CategoryResult], now: datetime
) -> AggregateScore:
    """
    Concatenate the items of *category_results* and compute both totals.

    Results must be given in aggregation order (wallet age, interaction,
    pi network, pi dex, staking, external penalty, suspicious). Applying
    decay records ``decay_factor`` on the positive items.
    """
    all_items = [item for result in category_results for item in result.items]
    raw_score = sum(item.points for item in all_items)
    adjusted_score = round_score(apply_time_decay(all_items, now))
    return AggregateScore(
        all_items=all_items, raw_score=raw_score, adjusted_score=adjusted_score
    )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class ReputationEngine:
    """
    Stateless evaluator for wallet reputation.

    ## Quick start

    ```python
    from atomic_reputation import ReputationEngine, WalletActivityData

    engine = ReputationEngine()
    result = engine.evaluate(WalletActivityData(
        account_age_days=120, last_activity_date=now, daily_checkins=10
    ), now=now)
    progress = engine.progress(result.adjusted_score)
    ```
    """

    def __init__(self, config: ReputationConfig | None = None) -> None:
        self._config = resolve_config(config)
        self._thresholds = build_thresholds(self._config.score_cap)

    @property
    def config(self) -> ReputationConfig:
        """The configuration this engine was constructed with."""
        return self._config

    @property
    def thresholds(self) -> tuple[TrustThreshold, ...]:
        """The tier threshold table derived from the score cap."""
        return self._thresholds

    def classify(self, score: float) -> AtomicTrustLevel:
        """Map an uncapped score to its trust tier."""
        return find_threshold(score, self._thresholds).level

    def progress(self, raw_score: float) -> LevelProgress:
        """Level progress for *raw_score* under this engine's score cap."""
        return get_level_progress(raw_score, self._config)

    def evaluate(
        self, data: WalletActivityData, now: datetime | None = None
    ) -> AtomicReputationResult:
        """
        Score one wallet snapshot.

        Args:
            data: Activity counters for the wallet.
            now:  Evaluation time. Defaults to the current UTC time; pass it
                  explicitly for reproducible results.

        Returns:
            A fresh AtomicReputationResult. Never raises for data-shape reasons.
        """
        now = resolve_now(now)

        wallet_age = calculate_wallet_age_score(
            data.account_age_days, data.last_activity_date, now
        )
        interaction = calculate_interaction_score(
            data.daily_checkins, data.ad_bonuses, data.report_views, data.tool_usage, now
        )
        pi_network = calculate_pi_network_score(
            data.internal_tx_count,
            data.app_interactions,
            data.sdk_payments,
            data.tx_dates,
            now,
        )
        pi_dex = calculate_pi_dex_score(
            data.normal_trades, data.unique_tokens, data.regular_activity_weeks, now
        )
        staking = calculate_staking_score(data.staking_days, now)
        external_penalty = calculate_external_penalty(
            data.small_external_transfers,
            data.frequent_external_transfers,
            data.sudden_exits,
            data.continuous_drain,
            now,
        )
        suspicious_penalty = calculate_suspicious_penalty(
            data.spam_count, data.farming_instances, data.suspicious_links, now
        )

        aggregate = aggregate_scores(
            [
                wallet_age,
                interaction,
                pi_network,
                pi_dex,
                staking,
                external_penalty,
                suspicious_penalty,
            ],
            now,
        )
        trust_level = self.classify(aggregate.adjusted_score)

        logger.debug(
            "Evaluated wallet: raw_score=%d adjusted_score=%d trust_level=%s items=%d",
            aggregate.raw_score,
            aggregate.adjusted_score,
            trust_level.label(),
            len(aggregate.all_items),
        )

        return AtomicReputationResult(
            raw_score=aggregate.raw_score,
            adjusted_score=aggregate.adjusted_score,
            trust_level=trust_level,
            wallet_age=wallet_age,
            interaction=interaction,
            pi_network=pi_network,
            pi_dex=pi_dex,
            staking=staking,
            external_penalty=external_penalty,
            suspicious_penalty=suspicious_penalty,
            all_items=aggregate.all_items,
            last_updated=now,
        )


def calculate_atomic_reputation(
    data: WalletActivityData,
    now: datetime | None = None,
    config: ReputationConfig | None = None,
) -> AtomicReputationResult:
    """
    Evaluate *data* without keeping a ReputationEngine around.

    Equivalent to ``ReputationEngine(config).evaluate(data, now)``.
    """
    return ReputationEngine(config).evaluate(data, now)
