"""Clustering run orchestration: strategy, refinement, scoring and summary."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING

from shelfmark.vectorize import HashingVectorProjector

from .config import ClusteringConfig
from .naming import improved_cluster_name, needs_better_name
from .quality import overall_quality, score_clusters
from .records import ClusteringResult
from .strategies import (
    StrategyOutcome,
    domain_clusters,
    hybrid_clusters,
    semantic_clusters,
)
from .summary import build_summary

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from shelfmark.bookmarks import Bookmark
    from shelfmark.runtime import Deadline
    from shelfmark.vectorize import VectorProjector

    from .records import BookmarkCluster

MIN_SILHOUETTE = 0.3

logger = logging.getLogger(__name__)


def cluster_bookmarks(
    bookmarks: Iterable[Bookmark],
    config: ClusteringConfig | None = None,
    *,
    projector: VectorProjector | None = None,
    deadline: Deadline | None = None,
) -> ClusteringResult:
    """Partition bookmarks into named, quality-scored clusters.

    Every input bookmark ends up either in exactly one cluster or in
    ``unclustered``. On deadline expiry the clusters formed so far are
    returned with ``timed_out`` set.
    """
    started = time.perf_counter()
    resolved_config = config or ClusteringConfig()
    items = list(bookmarks)

    if len(items) < resolved_config.min_cluster_size:
        logger.debug(
            "Too few bookmarks to cluster.",
            extra={
                "bookmarks": len(items),
                "min_cluster_size": resolved_config.min_cluster_size,
            },
        )
        return ClusteringResult(
            clusters=(),
            unclustered=tuple(items),
            quality_score=0.0,
            summary=build_summary(items, ()),
            method=resolved_config.method,
            total_bookmarks=len(items),
            processing_seconds=time.perf_counter() - started,
        )

    outcome = _run_strategy(
        items,
        resolved_config,
        projector=projector or HashingVectorProjector(),
        deadline=deadline,
    )
    candidates = score_clusters(outcome.clusters)
    refined = refine_clusters(
        candidates,
        min_cluster_size=resolved_config.min_cluster_size,
    )
    final = tuple(
        replace(cluster, id=f"cluster_{position}")
        for position, cluster in enumerate(score_clusters(refined), start=1)
    )

    clustered_ids: set[int] = set()
    for cluster in final:
        clustered_ids.update(cluster.member_ids)
    unclustered = tuple(item for item in items if item.id not in clustered_ids)
    quality_score = overall_quality(final)
    elapsed = time.perf_counter() - started

    logger.info(
        "Clustering finished.",
        extra={
            "method": resolved_config.method,
            "bookmarks": len(items),
            "clusters": len(final),
            "unclustered": len(unclustered),
            "timed_out": outcome.timed_out,
        },
    )
    return ClusteringResult(
        clusters=final,
        unclustered=unclustered,
        quality_score=quality_score,
        summary=build_summary(items, final),
        method=resolved_config.method,
        total_bookmarks=len(items),
        processing_seconds=elapsed,
        timed_out=outcome.timed_out,
    )


def refine_clusters(
    clusters: Sequence[BookmarkCluster],
    *,
    min_cluster_size: int,
) -> list[BookmarkCluster]:
    """Drop weak or small clusters and rename mixed-content ones."""
    refined: list[BookmarkCluster] = []
    for cluster in clusters:
        if cluster.quality.silhouette <= MIN_SILHOUETTE:
            continue
        if cluster.size < min_cluster_size:
            continue
        if needs_better_name(cluster.name):
            refined.append(replace(cluster, name=improved_cluster_name(cluster)))
        else:
            refined.append(cluster)
    return refined


def _run_strategy(
    items: Sequence[Bookmark],
    config: ClusteringConfig,
    *,
    projector: VectorProjector,
    deadline: Deadline | None,
) -> StrategyOutcome:
    if config.method == "domain":
        return domain_clusters(items, config)
    if config.method == "semantic":
        return semantic_clusters(
            items,
            config,
            projector=projector,
            deadline=deadline,
        )
    return hybrid_clusters(
        items,
        config,
        projector=projector,
        deadline=deadline,
    )
