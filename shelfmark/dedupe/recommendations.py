"""Human-readable advice and score breakdowns for single-target checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .match_contract import DuplicateMatch

NO_DUPLICATES_MESSAGE = "No duplicates found. You can safely add this bookmark."
MERGE_HINT_MESSAGE = (
    "Consider using the merge feature to consolidate similar bookmarks."
)
SIMILAR_COUNT_MERGE_HINT = 2

_DETAIL_LABELS = {
    "exact": "Exact duplicate found",
    "near_duplicate": "Near duplicate found",
    "similar": "Similar content found",
}


@dataclass(frozen=True, slots=True)
class SimilarityBreakdown:
    """Mean per-signal similarity across a match list."""

    average_url_similarity: float
    average_title_similarity: float
    average_content_similarity: float
    total_matches: int


def duplicate_recommendations(matches: Sequence[DuplicateMatch]) -> list[str]:
    """Return advice for adding a bookmark given its duplicate matches."""
    if not matches:
        return [NO_DUPLICATES_MESSAGE]

    exact_count = sum(1 for match in matches if match.is_exact_like)
    similar_count = sum(1 for match in matches if match.match_type == "similar")

    recommendations: list[str] = []
    if exact_count > 0:
        recommendations.append(
            f"Found {exact_count} exact duplicate(s). "
            "Consider not adding this bookmark.",
        )
    if similar_count > 0:
        recommendations.append(
            f"Found {similar_count} similar bookmark(s). "
            "Review for potential duplicates.",
        )
    if exact_count > 0 or similar_count > SIMILAR_COUNT_MERGE_HINT:
        recommendations.append(MERGE_HINT_MESSAGE)
    return recommendations


def detailed_recommendations(matches: Sequence[DuplicateMatch]) -> list[str]:
    """Return one line per match naming the candidate and its score."""
    lines: list[str] = []
    for match in matches:
        label = _DETAIL_LABELS.get(match.match_type)
        if label is None:
            continue
        lines.append(
            f"{label}: '{match.candidate.title}' "
            f"({match.overall_score * 100:.1f}% match)",
        )
    return lines


def similarity_breakdown(matches: Sequence[DuplicateMatch]) -> SimilarityBreakdown:
    """Return mean URL, title and content similarity across matches."""
    count = len(matches)
    if count == 0:
        return SimilarityBreakdown(
            average_url_similarity=0.0,
            average_title_similarity=0.0,
            average_content_similarity=0.0,
            total_matches=0,
        )
    return SimilarityBreakdown(
        average_url_similarity=sum(match.url_similarity for match in matches) / count,
        average_title_similarity=sum(match.title_similarity for match in matches)
        / count,
        average_content_similarity=sum(match.content_similarity for match in matches)
        / count,
        total_matches=count,
    )
