# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Level-progress calculator.

A score is split into two views:

- ``display_score`` is the uncapped score, shown as the big number so a wallet
  past the cap still sees everything it has earned.
- ``backend_score`` is the score capped at ``score_cap``, used for the tier
  lookup and the progress bar so the top tier saturates at 100%.
"""

from __future__ import annotations

import math

from .config import ReputationConfig, resolve_config
from .levels import TrustThreshold, build_thresholds, find_threshold
from .types import LevelProgress


def _progress_percentage(
    backend_score: float, threshold: TrustThreshold, score_cap: float
) -> float:
    # The bottom tier is unbounded below, so it has no measurable progress.
    if math.isinf(threshold.min_score):
        return 0.0
    if math.isinf(threshold.max_score):
        span = score_cap - threshold.min_score
    else:
        span = threshold.max_score - threshold.min_score
    percentage = (backend_score - threshold.min_score) / span * 100
    return max(0.0, min(100.0, percentage))


def _as_float(score: float) -> float:
    # Integers beyond float range saturate to an infinity of the same sign.
    try:
        return float(score)
    except OverflowError:
        return math.inf if score > 0 else -math.inf


def get_level_progress(
    raw_score: float, config: ReputationConfig | None = None
) -> LevelProgress:
    """
    Report the tier, progress within it, and distance to the next tier.

    Args:
        raw_score: Score to place, typically ``AtomicReputationResult.adjusted_score``.
                   NaN is treated as 0; integers too large for a float
                   saturate to an infinity of the same sign.
        config:    Optional configuration supplying the score cap.

    Returns:
        A LevelProgress with ``progress_in_level`` in [0, 100] and a
        non-negative ``points_to_next_level``. ``next_level`` is None only
        for the top tier.
    """
    score_cap = resolve_config(config).score_cap
    thresholds = build_thresholds(score_cap)

    raw_score = _as_float(raw_score)
    if math.isnan(raw_score):
        raw_score = 0.0

    display_score = raw_score
    backend_score = min(raw_score, score_cap)

    current = find_threshold(backend_score, thresholds)
    next_index = current.index + 1
    following = thresholds[next_index] if next_index < len(thresholds) else None

    points_to_next = (
        max(0.0, following.min_score - backend_score) if following is not None else 0.0
    )

    return LevelProgress(
        current_level=current.level,
        level_index=current.index,
        progress_in_level=_progress_percentage(backend_score, current, score_cap),
        points_to_next_level=points_to_next,
        next_level=following.level if following is not None else None,
        display_score=display_score,
        backend_score=backend_score,
    )
