# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""Sample wallet activity for previews and examples."""

from __future__ import annotations

from datetime import datetime, timedelta

from .timeline import resolve_now
from .types import WalletActivityData


def generate_demo_activity_data(now: datetime | None = None) -> WalletActivityData:
    """
    Return a typical, moderately active wallet.

    The wallet is 245 days old and was last active two days before *now*.
    """
    now = resolve_now(now)
    return WalletActivityData(
        account_age_days=245,
        last_activity_date=now - timedelta(days=2),
        daily_checkins=15,
        ad_bonuses=8,
        report_views=12,
        tool_usage=6,
        internal_tx_count=28,
        app_interactions=5,
        sdk_payments=2,
        normal_trades=7,
        unique_tokens=4,
        regular_activity_weeks=6,
        staking_days=45,
        small_external_transfers=1,
    )
