"""Pre-clustering analysis: how clusterable a collection is, and previews."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from shelfmark.normalize import extract_domain

from .naming import title_case

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

    from .config import ClusteringMethod

SuggestionKind = Literal["domain_cluster", "tag_cluster"]

LARGE_DOMAIN_GROUP = 5
LARGE_TAG_GROUP = 4
DOMAIN_SUGGESTION_CONFIDENCE = 0.9
TAG_SUGGESTION_CONFIDENCE = 0.8
PREVIEW_LIMIT = 3
DOMAIN_SCORE_SATURATION = 10
MIN_ESTIMATED_CLUSTERS = 2
MAX_ESTIMATED_CLUSTERS = 25


@dataclass(frozen=True, slots=True)
class ClusterPotential:
    """Collection statistics and the method they point to."""

    total_bookmarks: int
    unique_domains: int
    unique_tags: int
    domain_diversity: float
    tag_coverage: float
    average_tags_per_bookmark: float
    large_domain_groups: int
    clustering_score: float
    recommended_method: ClusteringMethod
    estimated_clusters: int


@dataclass(frozen=True, slots=True)
class ClusterSuggestion:
    """Preview of a cluster that domain or tag grouping would produce."""

    kind: SuggestionKind
    name: str
    description: str
    bookmark_count: int
    confidence: float
    preview: tuple[Bookmark, ...]


def analyze_cluster_potential(bookmarks: Sequence[Bookmark]) -> ClusterPotential:
    """Score how well a collection would cluster and recommend a method.

    The score averages three parts: domain spread (saturating at ten
    domains), the share of tagged bookmarks, and doubled domain diversity
    capped at one. High tag coverage with real diversity points to semantic
    clustering; a few dominant domains point to domain clustering.
    """
    total = len(bookmarks)
    if total == 0:
        return ClusterPotential(
            total_bookmarks=0,
            unique_domains=0,
            unique_tags=0,
            domain_diversity=0.0,
            tag_coverage=0.0,
            average_tags_per_bookmark=0.0,
            large_domain_groups=0,
            clustering_score=0.0,
            recommended_method="hybrid",
            estimated_clusters=0,
        )

    domain_groups = _domain_groups(bookmarks)
    unique_tags = {tag for bookmark in bookmarks for tag in bookmark.tags}
    tagged = sum(1 for bookmark in bookmarks if bookmark.tags)
    tag_total = sum(len(bookmark.tags) for bookmark in bookmarks)

    domain_diversity = len(domain_groups) / total
    tag_coverage = tagged / total
    clustering_score = (
        min(1.0, len(domain_groups) / DOMAIN_SCORE_SATURATION)
        + tag_coverage
        + min(1.0, domain_diversity * 2)
    ) / 3

    return ClusterPotential(
        total_bookmarks=total,
        unique_domains=len(domain_groups),
        unique_tags=len(unique_tags),
        domain_diversity=domain_diversity,
        tag_coverage=tag_coverage,
        average_tags_per_bookmark=tag_total / total,
        large_domain_groups=sum(
            1
            for members in domain_groups.values()
            if len(members) >= LARGE_DOMAIN_GROUP
        ),
        clustering_score=clustering_score,
        recommended_method=recommend_method(
            tag_coverage=tag_coverage,
            domain_diversity=domain_diversity,
            clustering_score=clustering_score,
        ),
        estimated_clusters=estimate_cluster_count(
            total=total,
            unique_domains=len(domain_groups),
            clustering_score=clustering_score,
        ),
    )


def recommend_method(
    *,
    tag_coverage: float,
    domain_diversity: float,
    clustering_score: float,
) -> ClusteringMethod:
    """Pick semantic, domain or hybrid from collection statistics."""
    if tag_coverage > 0.7 and domain_diversity > 0.3:  # noqa: PLR2004
        return "semantic"
    if domain_diversity < 0.2 and clustering_score > 0.5:  # noqa: PLR2004
        return "domain"
    return "hybrid"


def estimate_cluster_count(
    *,
    total: int,
    unique_domains: int,
    clustering_score: float,
) -> int:
    """Estimate a useful cluster count, clamped to [2, 25]."""
    base = min(total // 8, unique_domains // 2)
    estimate = int(base * clustering_score)
    return max(MIN_ESTIMATED_CLUSTERS, min(MAX_ESTIMATED_CLUSTERS, estimate))


def suggest_clusters(bookmarks: Sequence[Bookmark]) -> list[ClusterSuggestion]:
    """Return domain groups of five or more, then tag groups of four or more."""
    suggestions: list[ClusterSuggestion] = []
    for domain, members in _domain_groups(bookmarks).items():
        if len(members) < LARGE_DOMAIN_GROUP:
            continue
        suggestions.append(
            ClusterSuggestion(
                kind="domain_cluster",
                name=f"{domain} Collection",
                description=f"Group {len(members)} bookmarks from {domain}",
                bookmark_count=len(members),
                confidence=DOMAIN_SUGGESTION_CONFIDENCE,
                preview=tuple(members[:PREVIEW_LIMIT]),
            ),
        )

    tag_groups: dict[str, list[Bookmark]] = {}
    for bookmark in bookmarks:
        for tag in bookmark.sorted_tags:
            tag_groups.setdefault(tag, []).append(bookmark)
    for tag in sorted(tag_groups):
        members = tag_groups[tag]
        if len(members) < LARGE_TAG_GROUP:
            continue
        suggestions.append(
            ClusterSuggestion(
                kind="tag_cluster",
                name=f"{title_case(tag)} Resources",
                description=f"Group {len(members)} bookmarks tagged with '{tag}'",
                bookmark_count=len(members),
                confidence=TAG_SUGGESTION_CONFIDENCE,
                preview=tuple(members[:PREVIEW_LIMIT]),
            ),
        )
    return suggestions


def _domain_groups(bookmarks: Sequence[Bookmark]) -> dict[str, list[Bookmark]]:
    groups: dict[str, list[Bookmark]] = {}
    for bookmark in bookmarks:
        groups.setdefault(extract_domain(bookmark.url), []).append(bookmark)
    return groups
