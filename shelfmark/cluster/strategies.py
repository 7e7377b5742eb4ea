"""Domain, semantic and hybrid clustering strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import TYPE_CHECKING

from shelfmark.normalize import extract_domain
from shelfmark.vectorize import cosine_similarity

from .kmeans import centroid_count, run_kmeans
from .naming import cluster_description, domain_cluster_name, semantic_cluster_name
from .profiling import cluster_themes, common_tags
from .quality import purity
from .records import BookmarkCluster

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark
    from shelfmark.runtime import Deadline
    from shelfmark.vectorize import FeatureVector, VectorProjector

    from .config import ClusteringConfig

HYBRID_DOMAIN_CONFIDENCE = 0.7
SMALL_CLUSTER_CONFIDENCE = 0.5
PENDING_CLUSTER_ID = ""

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrategyOutcome:
    """Clusters produced by one strategy plus its deadline flag."""

    clusters: tuple[BookmarkCluster, ...]
    timed_out: bool = False


def domain_clusters(
    bookmarks: Sequence[Bookmark],
    config: ClusteringConfig,
) -> StrategyOutcome:
    """Group bookmarks by exact domain, keeping groups of at least min size."""
    groups: dict[str, list[Bookmark]] = {}
    for bookmark in bookmarks:
        groups.setdefault(extract_domain(bookmark.url), []).append(bookmark)

    clusters: list[BookmarkCluster] = []
    for domain, members in groups.items():
        if len(members) < config.min_cluster_size:
            continue
        tags = common_tags(members)
        clusters.append(
            BookmarkCluster(
                id=PENDING_CLUSTER_ID,
                name=domain_cluster_name(domain),
                members=tuple(members),
                description=cluster_description(members, tags),
                common_tags=tags,
                themes=cluster_themes(members),
                confidence=purity(members),
            ),
        )
    logger.debug(
        "Domain strategy finished.",
        extra={"domains": len(groups), "clusters": len(clusters)},
    )
    return StrategyOutcome(clusters=tuple(clusters))


def semantic_clusters(
    bookmarks: Sequence[Bookmark],
    config: ClusteringConfig,
    *,
    projector: VectorProjector,
    deadline: Deadline | None = None,
) -> StrategyOutcome:
    """Cluster projected bookmark vectors with seeded cosine k-means."""
    if not bookmarks:
        return StrategyOutcome(clusters=())

    vectors = [projector.project(bookmark) for bookmark in bookmarks]
    outcome = run_kmeans(
        vectors,
        k=centroid_count(len(vectors), config.max_clusters),
        dimensions=projector.dimensions,
        deadline=deadline,
    )

    clusters: list[BookmarkCluster] = []
    for member_indexes in outcome.assignments:
        if len(member_indexes) < config.min_cluster_size:
            continue
        members = [bookmarks[index] for index in member_indexes]
        tags = common_tags(members)
        clusters.append(
            BookmarkCluster(
                id=PENDING_CLUSTER_ID,
                name=semantic_cluster_name(members, tags),
                members=tuple(members),
                description=cluster_description(members, tags),
                common_tags=tags,
                themes=cluster_themes(members),
                confidence=mean_pairwise_similarity(
                    [vectors[index] for index in member_indexes],
                ),
            ),
        )
    return StrategyOutcome(clusters=tuple(clusters), timed_out=outcome.timed_out)


def hybrid_clusters(
    bookmarks: Sequence[Bookmark],
    config: ClusteringConfig,
    *,
    projector: VectorProjector,
    deadline: Deadline | None = None,
) -> StrategyOutcome:
    """Keep high-purity domain clusters, then k-means over the remainder."""
    kept = [
        cluster
        for cluster in domain_clusters(bookmarks, config).clusters
        if cluster.confidence > HYBRID_DOMAIN_CONFIDENCE
    ]
    clustered_ids: set[int] = set()
    for cluster in kept:
        clustered_ids.update(cluster.member_ids)
    remaining = [
        bookmark for bookmark in bookmarks if bookmark.id not in clustered_ids
    ]

    timed_out = False
    if len(remaining) >= config.min_cluster_size:
        semantic = semantic_clusters(
            remaining,
            config,
            projector=projector,
            deadline=deadline,
        )
        kept.extend(semantic.clusters)
        timed_out = semantic.timed_out
    return StrategyOutcome(clusters=tuple(kept), timed_out=timed_out)


def mean_pairwise_similarity(vectors: Sequence[FeatureVector]) -> float:
    """Return mean cosine over member pairs, 0.5 for fewer than two members."""
    if len(vectors) < 2:  # noqa: PLR2004
        return SMALL_CLUSTER_CONFIDENCE
    similarities = [
        cosine_similarity(left, right) for left, right in combinations(vectors, 2)
    ]
    return min(1.0, sum(similarities) / len(similarities))
