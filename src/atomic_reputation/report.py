# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation

"""
Score breakdown report generator.

Produces a structured per-category breakdown of an AtomicReputationResult,
in the fixed category order dashboards render, with JSON and Markdown
exporters. The report is read-only: it never changes the result it reads.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .levels import AtomicTrustLevel
from .types import AtomicReputationResult, ScoreCategory

Language = Literal["en", "ar"]

CATEGORY_LABELS: dict[ScoreCategory, dict[Language, str]] = {
    "wallet_age": {"en": "Wallet Age", "ar": "عمر المحفظة"},
    "interaction": {"en": "Interaction", "ar": "التفاعل"},
    "pi_network": {"en": "Pi Network Transactions", "ar": "معاملات Pi Network"},
    "pi_dex": {"en": "Pi Dex Activity", "ar": "نشاط Pi Dex"},
    "staking": {"en": "Staking", "ar": "Staking"},
    "external_penalty": {"en": "External Transfers", "ar": "التحويلات الخارجية"},
    "suspicious": {"en": "Suspicious Behavior", "ar": "السلوك المشبوه"},
}


def category_label(category: str, language: Language = "en") -> str:
    """Return the display label for *category*, or the category itself if unknown."""
    labels = CATEGORY_LABELS.get(category)  # type: ignore[call-overload]
    if labels is None:
        return category
    return labels.get(language, category)


# ---------------------------------------------------------------------------
# Report models
# ---------------------------------------------------------------------------


class CategoryBreakdown(BaseModel, frozen=True):
    """Totals for one category of a reputation result."""

    category: ScoreCategory
    label: str
    item_count: int = Field(..., ge=0)
    raw_points: int = Field(..., description="Sum of undecayed item points.")
    decayed_points: float = Field(..., description="Sum of points after decay.")
    decayed_item_count: int = Field(
        ..., ge=0, description="Items worth less now than when earned."
    )
    is_penalty: bool = Field(..., description="True if the category total is negative.")


class BreakdownSummary(BaseModel, frozen=True):
    """Headline numbers of a reputation result."""

    raw_score: int
    adjusted_score: int
    trust_level: AtomicTrustLevel
    trust_level_label: str
    positive_points: int = Field(..., ge=0)
    penalty_points: int = Field(..., le=0)
    evaluated_at_iso: str


class ScoreBreakdownReport(BaseModel, frozen=True):
    """Complete breakdown: summary plus one entry per category, in order."""

    summary: BreakdownSummary
    categories: list[CategoryBreakdown]


# ---------------------------------------------------------------------------
# Report generation
# ---------------------------------------------------------------------------


def generate_score_breakdown(
    result: AtomicReputationResult, language: Language = "en"
) -> ScoreBreakdownReport:
    """
    Build a ScoreBreakdownReport from *result*.

    Decayed totals use the ``decay_factor`` recorded on each item by the
    evaluation that produced *result*.
    """
    categories: list[CategoryBreakdown] = []
    for category, category_result in result.category_results():
        items = category_result.items
        raw_points = category_result.net_points
        categories.append(
            CategoryBreakdown(
                category=category,
                label=category_label(category, language),
                item_count=len(items),
                raw_points=raw_points,
                decayed_points=round(sum(item.decayed_points for item in items), 4),
                decayed_item_count=sum(
                    1
                    for item in items
                    if item.decay_factor is not None and item.decay_factor < 1
                ),
                is_penalty=raw_points < 0,
            )
        )

    summary = BreakdownSummary(
        raw_score=result.raw_score,
        adjusted_score=result.adjusted_score,
        trust_level=result.trust_level,
        trust_level_label=result.trust_level.label(),
        positive_points=sum(i.points for i in result.all_items if i.points > 0),
        penalty_points=sum(i.points for i in result.all_items if i.points < 0),
        evaluated_at_iso=result.last_updated.isoformat(),
    )

    return ScoreBreakdownReport(summary=summary, categories=categories)


# ---------------------------------------------------------------------------
# Export helpers
# ---------------------------------------------------------------------------


def export_breakdown_json(report: ScoreBreakdownReport) -> str:
    """Export *report* to a JSON string with 2-space indentation."""
    return report.model_dump_json(indent=2)


def _signed(value: float) -> str:
    return f"+{value:.10g}" if value > 0 else f"{value:.10g}"


def export_breakdown_markdown(report: ScoreBreakdownReport) -> str:
    """Export *report* to a human-readable Markdown string."""
    summary = report.summary
    lines: list[str] = []

    lines.append("# Reputation Score Breakdown")
    lines.append("")
    lines.append(f"**Evaluated:** {summary.evaluated_at_iso}")
    lines.append("")

    lines.append("## Summary")
    lines.append("")
    lines.append(f"- **Trust level:** {summary.trust_level_label}")
    lines.append(f"- **Raw score:** {summary.raw_score}")
    lines.append(f"- **Adjusted score:** {summary.adjusted_score}")
    lines.append(f"- **Positive points:** {_signed(summary.positive_points)}")
    lines.append(f"- **Penalty points:** {_signed(summary.penalty_points)}")
    lines.append("")

    lines.append("## Categories")
    lines.append("")
    lines.append("| Category | Items | Raw | After Decay | Decayed Items |")
    lines.append("|----------|------:|----:|------------:|--------------:|")
    for entry in report.categories:
        lines.append(
            f"| {entry.label} | {entry.item_count} | {_signed(entry.raw_points)} "
            f"| {_signed(entry.decayed_points)} | {entry.decayed_item_count} |"
        )
    lines.append("")

    return "\n".join(lines)
