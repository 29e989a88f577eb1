# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
level_progress_demo.py

Walks a score across the number line and shows the tier, the progress
through it and the points still needed for the next tier. The last
section shows how a smaller score cap rescales every tier.

Run with:
    python examples/level_progress_demo.py
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from atomic_reputation import (
    ReputationConfig,
    ReputationEngine,
    build_thresholds,
    get_backend_score_cap,
)

print("=== Atomic Reputation: Level Progress Demo ===\n")

# ---------------------------------------------------------------------------
# 1. Threshold table
# ---------------------------------------------------------------------------

cap = get_backend_score_cap()
print(f"--- Tiers (score cap = {cap:,}) ---\n")

for threshold in build_thresholds(cap):
    print(
        f"  {threshold.level.label():<15} [{threshold.min_score}, {threshold.max_score})"
    )

# ---------------------------------------------------------------------------
# 2. Progress across scores
# ---------------------------------------------------------------------------

print("\n--- Progress ---\n")

engine = ReputationEngine()

for score in [-120, 0, 640, 1000, 3900, 8499, 9250, 15_000]:
    progress = engine.progress(score)
    next_str = (
        f", {progress.points_to_next_level:g} to {progress.next_level.label()}"
        if progress.next_level is not None
        else ", top tier"
    )
    print(
        f"  {score:>7} -> {progress.current_level.label():<15}"
        f" {progress.progress_in_level:6.2f}%{next_str}"
    )

# ---------------------------------------------------------------------------
# 3. Smaller cap
# ---------------------------------------------------------------------------

print("\n--- Same scores, score cap = 2,000 ---\n")

small_engine = ReputationEngine(ReputationConfig(score_cap=2000))

for score in [150, 640, 1000, 3900]:
    progress = small_engine.progress(score)
    print(
        f"  {score:>7} -> {progress.current_level.label():<15}"
        f" backend {progress.backend_score:g}, display {progress.display_score:g}"
    )

print("\nDone.")
