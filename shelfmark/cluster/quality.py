"""Domain- and tag-based cluster quality proxies.

These are cheap stand-ins for geometric cluster metrics: cohesion and purity
come from domain concentration, separation from tag overlap with the other
clusters of the same run.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from .profiling import domain_share
from .records import ClusterQuality

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

    from .records import BookmarkCluster


def cohesion(members: Sequence[Bookmark]) -> float:
    """Return dominant-domain share, 1.0 for clusters under two members."""
    if len(members) < 2:  # noqa: PLR2004
        return 1.0
    return domain_share(members)


def purity(members: Sequence[Bookmark]) -> float:
    """Return the fraction of members on the most common domain."""
    return domain_share(members)


def separation(index: int, clusters: Sequence[BookmarkCluster]) -> float:
    """Return one minus mean tag-set Jaccard overlap with every other cluster."""
    own_tags = _tag_union(clusters[index].members)
    total_overlap = 0.0
    comparisons = 0
    for other_index, other in enumerate(clusters):
        if other_index == index:
            continue
        other_tags = _tag_union(other.members)
        union = own_tags | other_tags
        if not union:
            continue
        total_overlap += len(own_tags & other_tags) / len(union)
        comparisons += 1
    if comparisons == 0:
        return 1.0
    return 1.0 - total_overlap / comparisons


def score_clusters(
    clusters: Sequence[BookmarkCluster],
) -> list[BookmarkCluster]:
    """Return clusters with quality recomputed against the given set."""
    scored: list[BookmarkCluster] = []
    for index, cluster in enumerate(clusters):
        cohesion_score = cohesion(cluster.members)
        separation_score = separation(index, clusters)
        quality = ClusterQuality(
            cohesion=cohesion_score,
            separation=separation_score,
            silhouette=(cohesion_score + separation_score) / 2,
            purity=purity(cluster.members),
        )
        scored.append(replace(cluster, quality=quality))
    return scored


def overall_quality(clusters: Sequence[BookmarkCluster]) -> float:
    """Return mean silhouette across clusters, 0.0 when there are none."""
    if not clusters:
        return 0.0
    return sum(cluster.quality.silhouette for cluster in clusters) / len(clusters)


def _tag_union(members: Sequence[Bookmark]) -> frozenset[str]:
    tags: set[str] = set()
    for member in members:
        tags.update(member.tags)
    return frozenset(tags)
