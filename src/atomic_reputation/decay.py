# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Age-based decay for positive score items.

Decay is strictly one-directional: a multiplier in (0, 1] is applied to
items with positive points, so decay can only lower a score. Penalties
(points <= 0) pass through unchanged and never receive a decay factor.
This module is the only place decay is applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from .constants import DECAY_FLOOR_MULTIPLIER, DECAY_SCHEDULE, SECONDS_PER_DAY
from .timeline import UNIX_EPOCH, ensure_utc
from .types import ScoreItem


def decay_multiplier(age_days: float) -> float:
    """
    Return the decay multiplier for an item *age_days* old.

    1.0 up to 30 days, 0.9 up to 90, 0.7 up to 180 and 0.5 beyond.
    Each upper bound is inclusive.
    """
    for max_age_days, multiplier in DECAY_SCHEDULE:
        if age_days <= max_age_days:
            return multiplier
    return DECAY_FLOOR_MULTIPLIER


def item_age_days(timestamp: datetime, now: datetime) -> float:
    """
    Age of *timestamp* relative to *now*, in days.

    Timestamps before the Unix epoch or after *now* are treated as *now*
    (age 0).
    """
    timestamp = ensure_utc(timestamp)
    now = ensure_utc(now)
    if timestamp < UNIX_EPOCH or timestamp > now:
        return 0.0
    return (now - timestamp).total_seconds() / SECONDS_PER_DAY


def apply_time_decay(items: Iterable[ScoreItem], now: datetime) -> float:
    """
    Return the decayed total of *items*.

    Positive items contribute ``points * multiplier`` and have
    ``decay_factor`` set to the multiplier used. Non-positive items
    contribute their points unchanged and are not touched.
    """
    total = 0.0
    for item in items:
        if item.points <= 0:
            total += item.points
            continue
        multiplier = decay_multiplier(item_age_days(item.timestamp, now))
        item.decay_factor = multiplier
        total += item.points * multiplier
    return total
