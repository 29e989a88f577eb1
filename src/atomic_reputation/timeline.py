# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Synthetic activity timeline for counter-based score items.

Wallet activity arrives as plain counters, but decay needs a timestamp per
item. Item *i* of an action is stamped ``i * spacing`` days before ``now``,
with the spacing taken from ``SYNTHETIC_SPACING_DAYS``. Real timestamps can
replace the synthetic ones per action; the decay step never needs to know
which kind it is looking at.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from .constants import SYNTHETIC_SPACING_DAYS

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ensure_utc(moment: datetime) -> datetime:
    """Return *moment* as an aware UTC datetime. Naive values are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def resolve_now(now: datetime | None = None) -> datetime:
    """Return *now* normalised to UTC, or the current wall-clock time."""
    if now is None:
        return datetime.now(tz=timezone.utc)
    return ensure_utc(now)


def spacing_days(action: str) -> int:
    """Days between consecutive synthetic items of *action* (0 = stamped at now)."""
    return SYNTHETIC_SPACING_DAYS.get(action, 0)


def synthetic_timestamp(action: str, index: int, now: datetime) -> datetime:
    """
    Return the fabricated timestamp for the *index*-th item of *action*.

    The result never goes before the Unix epoch, so very large counters
    bottom out there instead of overflowing ``datetime``.
    """
    now = ensure_utc(now)
    floor = UNIX_EPOCH if now >= UNIX_EPOCH else now
    try:
        stamped = now - timedelta(days=spacing_days(action) * index)
    except OverflowError:
        return floor
    return max(stamped, floor)


def resolve_timestamps(
    action: str,
    count: int,
    now: datetime,
    real_dates: Sequence[datetime | None] | None = None,
) -> list[datetime]:
    """
    Return *count* timestamps for *action*.

    Entries from *real_dates* are used in order; any index beyond the supplied
    list, or holding None, falls back to ``synthetic_timestamp``.
    """
    supplied = list(real_dates or ())
    timestamps: list[datetime] = []
    for index in range(count):
        real = supplied[index] if index < len(supplied) else None
        if real is not None:
            timestamps.append(ensure_utc(real))
        else:
            timestamps.append(synthetic_timestamp(action, index, now))
    return timestamps
