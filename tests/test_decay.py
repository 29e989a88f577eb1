# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the time-decay evaluator."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from atomic_reputation.decay import apply_time_decay, decay_multiplier, item_age_days
from atomic_reputation.engine import round_score
from atomic_reputation.types import ScoreItem


def _checkin(timestamp: datetime, points: int = 3) -> ScoreItem:
    return ScoreItem(
        category="interaction",
        action="daily_checkin",
        points=points,
        timestamp=timestamp,
        explanation="+3 for daily check-in",
    )


class TestDecayMultiplier:
    @pytest.mark.parametrize(
        ("age_days", "expected"),
        [
            (0.0, 1.0),
            (30.0, 1.0),
            (30.01, 0.9),
            (90.0, 0.9),
            (90.01, 0.7),
            (180.0, 0.7),
            (180.01, 0.5),
            (5000.0, 0.5),
        ],
    )
    def test_brackets_have_inclusive_upper_bounds(
        self, age_days: float, expected: float
    ) -> None:
        assert decay_multiplier(age_days) == expected


class TestItemAge:
    def test_age_is_measured_in_days(self, now: datetime) -> None:
        assert item_age_days(now - timedelta(hours=36), now) == pytest.approx(1.5)

    def test_future_timestamp_counts_as_now(self, now: datetime) -> None:
        assert item_age_days(now + timedelta(days=400), now) == 0.0

    def test_pre_epoch_timestamp_counts_as_now(self, now: datetime) -> None:
        assert item_age_days(datetime(1960, 1, 1, tzinfo=timezone.utc), now) == 0.0


class TestApplyTimeDecay:
    def test_check_in_ninety_one_days_old_is_worth_seventy_percent(
        self, now: datetime
    ) -> None:
        item = _checkin(now - timedelta(days=91))
        total = apply_time_decay([item], now)
        assert total == pytest.approx(2.1)
        assert round_score(total) == 2
        assert item.decay_factor == 0.7

    def test_penalties_pass_through_and_keep_no_factor(self, now: datetime) -> None:
        penalty = ScoreItem(
            category="suspicious",
            action="suspicious_link",
            points=-12,
            timestamp=now - timedelta(days=365),
            explanation="-12 for a suspicious link",
        )
        assert apply_time_decay([penalty], now) == -12
        assert penalty.decay_factor is None

    def test_mixed_items_sum_decayed_positives_and_raw_negatives(
        self, now: datetime
    ) -> None:
        items = [
            _checkin(now),
            _checkin(now - timedelta(days=200)),
            ScoreItem(
                category="external_penalty",
                action="small_transfer",
                points=-2,
                timestamp=now,
                explanation="-2 for a small external transfer",
            ),
        ]
        assert apply_time_decay(items, now) == pytest.approx(3 + 1.5 - 2)
        assert [i.decay_factor for i in items] == [1.0, 0.5, None]

    def test_empty_list_decays_to_zero(self, now: datetime) -> None:
        assert apply_time_decay([], now) == 0.0

    def test_decayed_points_property_reflects_factor(self, now: datetime) -> None:
        item = _checkin(now - timedelta(days=45))
        assert item.decayed_points == 3
        apply_time_decay([item], now)
        assert item.decayed_points == pytest.approx(2.7)


class TestRoundScore:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (2.4999, 2), (-2.5, -2), (-2.6, -3), (0.0, 0)],
    )
    def test_halves_round_toward_positive_infinity(
        self, value: float, expected: int
    ) -> None:
        assert round_score(value) == expected
