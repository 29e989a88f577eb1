# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Persistence-ready reputation records.

Flattens an AtomicReputationResult into per-category totals bound to a user
identity (username + uid + wallet address). Storing the record is the
caller's job; this module performs no I/O.
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Context, Decimal

from pydantic import BaseModel, Field, field_validator

from .errors import InvalidIdentityError
from .levels import AtomicTrustLevel
from .timeline import ensure_utc, resolve_now
from .types import AtomicReputationResult

DEFAULT_UPDATE_REASON = "Atomic Protocol calculation"


class UserIdentity(BaseModel, frozen=True):
    """The identity a reputation record is bound to."""

    username: str
    uid: str = Field(..., description="Pi user id.")
    wallet_address: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _normalise_created_at(cls, value: datetime) -> datetime:
        return ensure_utc(value)


def _blank_identity_fields(identity: UserIdentity) -> list[str]:
    return [
        name
        for name in ("username", "uid", "wallet_address")
        if not getattr(identity, name).strip()
    ]


def validate_user_identity(identity: UserIdentity) -> bool:
    """Return True if username, uid and wallet address are all non-blank."""
    return not _blank_identity_fields(identity)


class ReputationRecord(BaseModel, frozen=True):
    """Flattened reputation data as stored per user."""

    identity: UserIdentity
    score: int
    trust_level: AtomicTrustLevel
    trust_level_label: str
    raw_score: int
    adjusted_score: int

    wallet_age_score: int
    interaction_score: int
    pi_network_score: int
    pi_dex_score: int
    staking_score: int

    external_tx_penalty: int = Field(..., le=0)
    suspicious_penalty: int = Field(..., le=0)

    last_updated: datetime
    update_reason: str | None = None
    previous_score: int | None = None


def build_reputation_record(
    result: AtomicReputationResult,
    identity: UserIdentity,
    *,
    previous_score: int | None = None,
    update_reason: str | None = DEFAULT_UPDATE_REASON,
    now: datetime | None = None,
) -> ReputationRecord:
    """
    Flatten *result* into a ReputationRecord for *identity*.

    ``score`` is the adjusted (decayed) score.

    Raises:
        InvalidIdentityError: If username, uid or wallet address is blank.
    """
    missing = _blank_identity_fields(identity)
    if missing:
        raise InvalidIdentityError(missing)

    return ReputationRecord(
        identity=identity,
        score=result.adjusted_score,
        trust_level=result.trust_level,
        trust_level_label=result.trust_level.label(),
        raw_score=result.raw_score,
        adjusted_score=result.adjusted_score,
        wallet_age_score=result.wallet_age.total_points,
        interaction_score=result.interaction.total_points,
        pi_network_score=result.pi_network.total_points,
        pi_dex_score=result.pi_dex.total_points,
        staking_score=result.staking.total_points,
        external_tx_penalty=result.external_penalty.total_penalty,
        suspicious_penalty=result.suspicious_penalty.total_penalty,
        last_updated=resolve_now(now),
        update_reason=update_reason,
        previous_score=previous_score,
    )


# Wide enough for every finite float without quantize overflowing.
_FORMAT_CONTEXT = Context(prec=400)


def format_score(score: float) -> str:
    """
    Format *score* with thousands separators and no decimals (halves round up).

    NaN formats as ``"NaN"`` and infinities as ``"∞"`` / ``"-∞"``.
    """
    if isinstance(score, int):
        return f"{score:,}"
    if math.isnan(score):
        return "NaN"
    if math.isinf(score):
        return "∞" if score > 0 else "-∞"
    whole = Decimal(str(score)).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT
    )
    return f"{int(whole):,}"
