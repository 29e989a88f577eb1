# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Configuration model for the atomic reputation engine.

The score cap is the single tunable value. It anchors the trust threshold
table (as fixed percentages of the cap) and the progress-bar denominator.
Per-action point weights are protocol constants and live in ``constants``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .constants import DEFAULT_SCORE_CAP


class ReputationConfig(BaseModel, frozen=True):
    """
    Configuration for a ReputationEngine instance.

    Example::

        engine = ReputationEngine(ReputationConfig(score_cap=20_000))
    """

    score_cap: int = Field(
        default=DEFAULT_SCORE_CAP,
        gt=0,
        description=(
            "Backend score ceiling. Anchors the tier thresholds and caps the "
            "score used for tier lookup and progress-bar math."
        ),
    )


def resolve_config(config: ReputationConfig | None = None) -> ReputationConfig:
    """
    Return *config*, or a default ReputationConfig when None is given.

    Args:
        config: Optional caller-supplied configuration.

    Returns:
        A frozen ReputationConfig ready for use.
    """
    if config is None:
        return ReputationConfig()
    return config
