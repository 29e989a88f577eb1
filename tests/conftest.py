# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
"""Shared fixtures for atomic-reputation tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from atomic_reputation.demo import generate_demo_activity_data
from atomic_reputation.engine import ReputationEngine
from atomic_reputation.types import WalletActivityData


@pytest.fixture
def now() -> datetime:
    """A fixed evaluation time so results are reproducible."""
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine() -> ReputationEngine:
    """An engine with the default 10 000 score cap."""
    return ReputationEngine()


@pytest.fixture
def zero_activity(now: datetime) -> WalletActivityData:
    """A brand-new wallet with no activity, last seen at *now*."""
    return WalletActivityData(account_age_days=0, last_activity_date=now)


@pytest.fixture
def demo_activity(now: datetime) -> WalletActivityData:
    """The moderately active demo wallet."""
    return generate_demo_activity_data(now)
