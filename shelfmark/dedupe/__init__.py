"""Deduplication module for Shelfmark."""

from .duplicate_groups import (
    DuplicateGroup,
    GroupType,
    determine_group_type,
    find_duplicate_groups,
)
from .match_contract import (
    MATCH_TYPE_CONFIDENCE,
    MATCH_TYPES,
    DuplicateMatch,
    MatchType,
    classify_match,
    overall_similarity,
)
from .match_engine import (
    DUPLICATE_THRESHOLD_DEFAULT,
    compare_bookmarks,
    find_similar_bookmarks,
)
from .recommendations import (
    NO_DUPLICATES_MESSAGE,
    SimilarityBreakdown,
    detailed_recommendations,
    duplicate_recommendations,
    similarity_breakdown,
)
from .statistics import DomainDuplicateInfo, DuplicateStatistics, duplicate_statistics
from .variant_lookup import find_variant_matches

__all__ = [
    "DUPLICATE_THRESHOLD_DEFAULT",
    "MATCH_TYPES",
    "MATCH_TYPE_CONFIDENCE",
    "NO_DUPLICATES_MESSAGE",
    "DomainDuplicateInfo",
    "DuplicateGroup",
    "DuplicateMatch",
    "DuplicateStatistics",
    "GroupType",
    "MatchType",
    "SimilarityBreakdown",
    "classify_match",
    "compare_bookmarks",
    "detailed_recommendations",
    "determine_group_type",
    "duplicate_recommendations",
    "duplicate_statistics",
    "find_duplicate_groups",
    "find_similar_bookmarks",
    "find_variant_matches",
    "overall_similarity",
    "similarity_breakdown",
]
