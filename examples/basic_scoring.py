# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
basic_scoring.py

Scores the demo wallet, prints the per-category totals and the trust tier,
then exports a Markdown breakdown and a persistence-ready record.

Run with:
    python examples/basic_scoring.py
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from datetime import datetime, timezone

from atomic_reputation import (
    ReputationEngine,
    UserIdentity,
    build_reputation_record,
    export_breakdown_markdown,
    format_score,
    generate_demo_activity_data,
    generate_score_breakdown,
    trust_level_icon,
)

print("=== Atomic Reputation: Basic Scoring ===\n")

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

engine = ReputationEngine()
activity = generate_demo_activity_data(NOW)
result = engine.evaluate(activity, NOW)

# ---------------------------------------------------------------------------
# 1. Category totals
# ---------------------------------------------------------------------------

print("--- Category totals ---\n")

for category, category_result in result.category_results():
    print(f"  {category:<18} {category_result.net_points:+5d}  ({len(category_result.items)} items)")

print(f"\n  Raw score:      {format_score(result.raw_score)}")
print(f"  Adjusted score: {format_score(result.adjusted_score)}")
print(
    f"  Trust level:    {result.trust_level.label()} [{trust_level_icon(result.trust_level)}]"
)

# ---------------------------------------------------------------------------
# 2. A few explanations
# ---------------------------------------------------------------------------

print("\n--- First explanations ---\n")

for item in result.all_items[:6]:
    factor = "" if item.decay_factor is None else f" x{item.decay_factor}"
    print(f"  {item.explanation}{factor}")

# ---------------------------------------------------------------------------
# 3. Markdown breakdown
# ---------------------------------------------------------------------------

print("\n--- Breakdown ---\n")
print(export_breakdown_markdown(generate_score_breakdown(result)))

# ---------------------------------------------------------------------------
# 4. Record
# ---------------------------------------------------------------------------

identity = UserIdentity(
    username="demo_pioneer",
    uid="demo-uid-001",
    wallet_address="GDEMOWALLETADDRESS0001",
    created_at=NOW,
)
record = build_reputation_record(result, identity, previous_score=250, now=NOW)
print(
    f"Record for {record.identity.username}: {record.previous_score} -> {record.score}"
    f" ({record.update_reason})"
)

print("\nDone.")
