# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Tests for the seven category scorers and the synthetic timeline."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from atomic_reputation.scorers import (
    calculate_external_penalty,
    calculate_interaction_score,
    calculate_pi_dex_score,
    calculate_pi_network_score,
    calculate_staking_score,
    calculate_suspicious_penalty,
    calculate_wallet_age_score,
    staking_tier,
)
from atomic_reputation.timeline import (
    UNIX_EPOCH,
    resolve_timestamps,
    synthetic_timestamp,
)


# ---------------------------------------------------------------------------
# TestWalletAgeScore
# ---------------------------------------------------------------------------


class TestWalletAgeScore:
    def test_months_and_six_month_periods_are_counted(self, now: datetime) -> None:
        result = calculate_wallet_age_score(365, now, now)
        assert result.active_months == 12
        assert result.six_month_periods == 2
        assert result.total_points == 12 * 2 + 2 * 1
        assert result.inactivity_penalty == 0

    def test_partial_month_earns_nothing(self, now: datetime) -> None:
        result = calculate_wallet_age_score(29, now, now)
        assert result.items == []
        assert result.total_points == 0

    def test_month_items_step_back_thirty_days(self, now: datetime) -> None:
        result = calculate_wallet_age_score(90, now, now)
        months = [i for i in result.items if i.action == "active_month"]
        assert [i.timestamp for i in months] == [
            now,
            now - timedelta(days=30),
            now - timedelta(days=60),
        ]
        assert months[2].explanation == "+2 for month 3 of activity"

    def test_inactivity_over_ninety_days_is_penalised_once(self, now: datetime) -> None:
        result = calculate_wallet_age_score(400, now - timedelta(days=91), now)
        penalties = [i for i in result.items if i.action == "inactivity_penalty"]
        assert len(penalties) == 1
        assert penalties[0].points == -5
        assert penalties[0].timestamp == now
        assert result.inactivity_penalty == -5

    def test_exactly_ninety_idle_days_is_not_penalised(self, now: datetime) -> None:
        result = calculate_wallet_age_score(400, now - timedelta(days=90), now)
        assert result.inactivity_penalty == 0

    def test_negative_age_is_clamped_to_zero(self, now: datetime) -> None:
        result = calculate_wallet_age_score(-300, now, now)
        assert result.active_months == 0
        assert result.items == []


# ---------------------------------------------------------------------------
# TestInteractionScore
# ---------------------------------------------------------------------------


class TestInteractionScore:
    def test_points_per_action(self, now: datetime) -> None:
        result = calculate_interaction_score(2, 3, 4, 5, now)
        assert result.total_points == 2 * 3 + 3 * 5 + 4 * 1 + 5 * 2
        assert len(result.items) == 14

    def test_one_item_per_unit_with_action_spacing(self, now: datetime) -> None:
        result = calculate_interaction_score(0, 0, 3, 3, now)
        reports = [i.timestamp for i in result.items if i.action == "report_view"]
        tools = [i.timestamp for i in result.items if i.action == "tool_usage"]
        assert reports == [now - timedelta(days=d) for d in (0, 2, 4)]
        assert tools == [now - timedelta(days=d) for d in (0, 3, 6)]

    def test_inputs_are_echoed_on_the_result(self, now: datetime) -> None:
        result = calculate_interaction_score(1, 2, 3, 4, now)
        assert (result.daily_checkins, result.ad_bonuses) == (1, 2)
        assert (result.report_views, result.tool_usage) == (3, 4)

    def test_negative_counters_produce_no_items(self, now: datetime) -> None:
        result = calculate_interaction_score(-3, -1, 0, 0, now)
        assert result.items == []
        assert result.daily_checkins == 0


# ---------------------------------------------------------------------------
# TestPiNetworkScore
# ---------------------------------------------------------------------------


class TestPiNetworkScore:
    def test_points_per_action(self, now: datetime) -> None:
        result = calculate_pi_network_score(3, 2, 1, now=now)
        assert result.total_points == 3 * 2 + 2 * 5 + 1 * 6

    def test_real_tx_dates_replace_synthetic_spacing(self, now: datetime) -> None:
        real = [now - timedelta(days=40), now - timedelta(days=100)]
        result = calculate_pi_network_score(4, 0, 0, tx_dates=real, now=now)
        stamps = [i.timestamp for i in result.items]
        assert stamps[:2] == real
        # Indices past the supplied list fall back to 5-day spacing.
        assert stamps[2:] == [now - timedelta(days=10), now - timedelta(days=15)]

    def test_sdk_payments_step_back_two_weeks(self, now: datetime) -> None:
        result = calculate_pi_network_score(0, 0, 2, now=now)
        assert [i.timestamp for i in result.items] == [now, now - timedelta(days=14)]


# ---------------------------------------------------------------------------
# TestPiDexScore
# ---------------------------------------------------------------------------


class TestPiDexScore:
    def test_token_diversity_bonus_requires_three_tokens(self, now: datetime) -> None:
        assert calculate_pi_dex_score(0, 2, 0, now).items == []
        bonus = calculate_pi_dex_score(0, 3, 0, now).items
        assert len(bonus) == 1
        assert bonus[0].action == "token_diversity"
        assert bonus[0].points == 3

    def test_diversity_bonus_is_flat(self, now: datetime) -> None:
        assert calculate_pi_dex_score(0, 50, 0, now).total_points == 3

    def test_regular_activity_weeks_step_back_seven_days(self, now: datetime) -> None:
        result = calculate_pi_dex_score(0, 0, 3, now)
        assert [i.timestamp for i in result.items] == [
            now - timedelta(days=7 * i) for i in range(3)
        ]
        assert result.total_points == 15

    def test_trades_are_worth_four(self, now: datetime) -> None:
        result = calculate_pi_dex_score(5, 0, 0, now)
        assert result.total_points == 20
        assert result.normal_trades == 5


# ---------------------------------------------------------------------------
# TestStakingScore
# ---------------------------------------------------------------------------


class TestStakingScore:
    @pytest.mark.parametrize(
        ("days", "tier", "points"),
        [
            (0, "none", 0),
            (1, "short", 3),
            (29, "short", 3),
            (30, "medium", 6),
            (45, "medium", 6),
            (90, "medium", 6),
            (91, "long", 10),
            (1000, "long", 10),
        ],
    )
    def test_tier_selection(self, now: datetime, days: int, tier: str, points: int) -> None:
        result = calculate_staking_score(days, now)
        assert result.tier == tier
        assert result.total_points == points
        assert staking_tier(days) == tier

    def test_at_most_one_item_is_emitted(self, now: datetime) -> None:
        assert len(calculate_staking_score(45, now).items) == 1
        assert len(calculate_staking_score(5000, now).items) == 1
        assert calculate_staking_score(0, now).items == []


# ---------------------------------------------------------------------------
# TestPenalties
# ---------------------------------------------------------------------------


class TestPenalties:
    def test_external_penalty_weights(self, now: datetime) -> None:
        result = calculate_external_penalty(1, 1, 1, 1, now)
        assert result.total_penalty == -2 - 5 - 10 - 15
        assert all(i.timestamp == now for i in result.items)

    def test_suspicious_penalty_weights(self, now: datetime) -> None:
        result = calculate_suspicious_penalty(2, 1, 1, now)
        assert result.total_penalty == 2 * -3 - 8 - 12
        assert result.spam_activity == 2

    def test_no_penalties_gives_zero(self, now: datetime) -> None:
        assert calculate_external_penalty(0, 0, 0, 0, now).total_penalty == 0
        assert calculate_suspicious_penalty(0, 0, 0, now).total_penalty == 0


# ---------------------------------------------------------------------------
# TestTimeline
# ---------------------------------------------------------------------------


class TestTimeline:
    def test_unknown_actions_are_stamped_at_now(self, now: datetime) -> None:
        assert synthetic_timestamp("sudden_exit", 7, now) == now

    def test_huge_index_bottoms_out_at_epoch(self, now: datetime) -> None:
        assert synthetic_timestamp("internal_tx", 100_000, now) == UNIX_EPOCH
        assert synthetic_timestamp("six_month_active", 10**9, now) == UNIX_EPOCH

    def test_naive_now_is_treated_as_utc(self) -> None:
        naive = datetime(2026, 1, 10)
        stamped = synthetic_timestamp("daily_checkin", 1, naive)
        assert stamped == datetime(2026, 1, 9, tzinfo=timezone.utc)

    def test_none_entries_fall_back_to_synthetic(self, now: datetime) -> None:
        real = now - timedelta(days=3)
        stamps = resolve_timestamps("internal_tx", 2, now, [None, real])  # type: ignore[list-item]
        assert stamps == [now, real]
