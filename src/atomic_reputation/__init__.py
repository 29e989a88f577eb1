# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
atomic-reputation: bounded, tiered trust scores for blockchain wallets.

Key invariants:
- Evaluation is pure: same activity data, same ``now``, same config gives an
  identical result. No I/O and no state shared between calls.
- Decay only lowers positive items; penalties are never decayed, so
  ``adjusted_score <= raw_score`` always.
- The tier table is contiguous and exhaustive: every score maps to exactly
  one of seven tiers.
- The score cap is the only tunable; point weights are protocol constants.
"""

from .config import ReputationConfig, resolve_config
from .decay import apply_time_decay, decay_multiplier, item_age_days
from .demo import generate_demo_activity_data
from .engine import (
    AggregateScore,
    ReputationEngine,
    aggregate_scores,
    calculate_atomic_reputation,
    round_score,
)
from .errors import AtomicReputationError, ConfigurationError, InvalidIdentityError
from .levels import (
    TRUST_LEVEL_COLORS,
    TRUST_LEVEL_COUNT,
    TRUST_LEVEL_LABELS,
    TRUST_LEVEL_MAX,
    TRUST_LEVEL_MIN,
    AtomicTrustLevel,
    TierColors,
    TrustThreshold,
    build_thresholds,
    classify_score,
    find_threshold,
    get_backend_score_cap,
    trust_level_icon,
)
from .progress import get_level_progress
from .record import (
    ReputationRecord,
    UserIdentity,
    build_reputation_record,
    format_score,
    validate_user_identity,
)
from .report import (
    CATEGORY_LABELS,
    BreakdownSummary,
    CategoryBreakdown,
    ScoreBreakdownReport,
    category_label,
    export_breakdown_json,
    export_breakdown_markdown,
    generate_score_breakdown,
)
from .scorers import (
    calculate_external_penalty,
    calculate_interaction_score,
    calculate_pi_dex_score,
    calculate_pi_network_score,
    calculate_staking_score,
    calculate_suspicious_penalty,
    calculate_wallet_age_score,
    staking_tier,
)
from .timeline import resolve_timestamps, synthetic_timestamp
from .types import (
    CATEGORY_ORDER,
    AtomicReputationResult,
    CategoryResult,
    ExternalTxPenalty,
    InteractionScore,
    LevelProgress,
    PiDexScore,
    PiNetworkScore,
    ScoreAction,
    ScoreCategory,
    ScoreItem,
    StakingScore,
    StakingTier,
    SuspiciousBehaviorPenalty,
    WalletActivityData,
    WalletAgeScore,
)

__all__ = [
    # Engine
    "ReputationEngine",
    "calculate_atomic_reputation",
    "aggregate_scores",
    "AggregateScore",
    "round_score",
    # Configuration
    "ReputationConfig",
    "resolve_config",
    # Tiers
    "AtomicTrustLevel",
    "TRUST_LEVEL_LABELS",
    "TRUST_LEVEL_COLORS",
    "TRUST_LEVEL_MIN",
    "TRUST_LEVEL_MAX",
    "TRUST_LEVEL_COUNT",
    "TierColors",
    "TrustThreshold",
    "build_thresholds",
    "find_threshold",
    "classify_score",
    "get_backend_score_cap",
    "trust_level_icon",
    # Progress
    "get_level_progress",
    # Scorers
    "calculate_wallet_age_score",
    "calculate_interaction_score",
    "calculate_pi_network_score",
    "calculate_pi_dex_score",
    "calculate_staking_score",
    "calculate_external_penalty",
    "calculate_suspicious_penalty",
    "staking_tier",
    # Decay and timeline
    "apply_time_decay",
    "decay_multiplier",
    "item_age_days",
    "synthetic_timestamp",
    "resolve_timestamps",
    # Types
    "ScoreItem",
    "ScoreCategory",
    "ScoreAction",
    "StakingTier",
    "CATEGORY_ORDER",
    "CategoryResult",
    "WalletAgeScore",
    "InteractionScore",
    "PiNetworkScore",
    "PiDexScore",
    "StakingScore",
    "ExternalTxPenalty",
    "SuspiciousBehaviorPenalty",
    "WalletActivityData",
    "AtomicReputationResult",
    "LevelProgress",
    # Records and reports
    "UserIdentity",
    "ReputationRecord",
    "build_reputation_record",
    "validate_user_identity",
    "format_score",
    "CATEGORY_LABELS",
    "category_label",
    "CategoryBreakdown",
    "BreakdownSummary",
    "ScoreBreakdownReport",
    "generate_score_breakdown",
    "export_breakdown_json",
    "export_breakdown_markdown",
    # Demo
    "generate_demo_activity_data",
    # Errors
    "AtomicReputationError",
    "ConfigurationError",
    "InvalidIdentityError",
]

__version__ = "0.1.0"
