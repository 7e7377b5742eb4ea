"""Duplicate match record, score blending and match-type classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from shelfmark.bookmarks import Bookmark

MATCH_TYPES: tuple[str, str, str, str] = (
    "exact",
    "near_duplicate",
    "similar",
    "related",
)
MatchType = Literal["exact", "near_duplicate", "similar", "related"]

URL_WEIGHT = 0.5
TITLE_WEIGHT = 0.3
CONTENT_WEIGHT = 0.2
URL_WEIGHT_WITHOUT_CONTENT = 0.6
TITLE_WEIGHT_WITHOUT_CONTENT = 0.4

EXACT_URL_THRESHOLD = 0.95
EXACT_TITLE_THRESHOLD = 0.9
NEAR_DUPLICATE_THRESHOLD = 0.85
SIMILAR_THRESHOLD = 0.7

# Coarse label confidence per match type, independent of the blended score.
MATCH_TYPE_CONFIDENCE: dict[MatchType, float] = {
    "exact": 0.95,
    "near_duplicate": 0.8,
    "similar": 0.6,
    "related": 0.3,
}


@dataclass(frozen=True, slots=True)
class DuplicateMatch:
    """One scored comparison between a target bookmark and a candidate."""

    candidate: Bookmark
    url_similarity: float
    title_similarity: float
    content_similarity: float
    overall_score: float
    match_type: MatchType
    confidence: float

    @property
    def is_exact_like(self) -> bool:
        """Return whether the match is an exact or near-duplicate match."""
        return self.match_type in ("exact", "near_duplicate")


def overall_similarity(
    *,
    url_similarity: float,
    title_similarity: float,
    content_similarity: float,
) -> float:
    """Blend per-signal similarities, reweighting when content carries nothing."""
    if content_similarity == 0:
        score = (
            url_similarity * URL_WEIGHT_WITHOUT_CONTENT
            + title_similarity * TITLE_WEIGHT_WITHOUT_CONTENT
        )
    else:
        score = (
            url_similarity * URL_WEIGHT
            + title_similarity * TITLE_WEIGHT
            + content_similarity * CONTENT_WEIGHT
        )
    return min(1.0, score)


def classify_match(
    *,
    url_similarity: float,
    title_similarity: float,
    overall_score: float,
) -> tuple[MatchType, float]:
    """Return match type and its label confidence; first matching tier wins."""
    match_type: MatchType
    if (
        url_similarity >= EXACT_URL_THRESHOLD
        and title_similarity >= EXACT_TITLE_THRESHOLD
    ):
        match_type = "exact"
    elif overall_score >= NEAR_DUPLICATE_THRESHOLD:
        match_type = "near_duplicate"
    elif overall_score >= SIMILAR_THRESHOLD:
        match_type = "similar"
    else:
        match_type = "related"
    return match_type, MATCH_TYPE_CONFIDENCE[match_type]
