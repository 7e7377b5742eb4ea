"""Deterministic cosine k-means over projected bookmark vectors."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfmark.runtime import deadline_expired
from shelfmark.vectorize import cosine_similarity, mean_vector

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.runtime import Deadline
    from shelfmark.vectorize import FeatureVector

MAX_ITERATIONS = 10
CONVERGENCE_SIMILARITY = 0.99
SEED_AMPLITUDE = 0.5

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KMeansOutcome:
    """Final assignment of vector indexes to centroid slots."""

    assignments: tuple[tuple[int, ...], ...]
    iterations: int
    converged: bool
    timed_out: bool


def seed_centroid(index: int, dimensions: int) -> FeatureVector:
    """Return the fixed seed for centroid ``index``: ``sin(index * j) * 0.5``."""
    return tuple(
        math.sin(index * component) * SEED_AMPLITUDE
        for component in range(dimensions)
    )


def centroid_count(vector_count: int, max_clusters: int) -> int:
    """Return k as ``min(max_clusters, max(2, vector_count // 5))``."""
    return min(max_clusters, max(2, vector_count // 5))


def nearest_centroid(vector: FeatureVector, centroids: Sequence[FeatureVector]) -> int:
    """Return index of the most similar centroid; ties go to the lowest index."""
    best_index = 0
    best_similarity = -1.0
    for index, centroid in enumerate(centroids):
        similarity = cosine_similarity(vector, centroid)
        if similarity > best_similarity:
            best_similarity = similarity
            best_index = index
    return best_index


def run_kmeans(
    vectors: Sequence[FeatureVector],
    *,
    k: int,
    dimensions: int,
    deadline: Deadline | None = None,
) -> KMeansOutcome:
    """Cluster vectors into at most ``k`` groups with seeded centroids.

    Iterates at most ten times. A centroid with no assigned vectors keeps its
    previous value. The run converges once every updated centroid has cosine
    above 0.99 to its previous value. The deadline is checked before each
    iteration; on expiry the last completed assignment is returned.
    """
    centroids = [seed_centroid(index, dimensions) for index in range(k)]
    assignments: list[list[int]] = [[] for _ in range(k)]
    iterations = 0
    converged = False
    timed_out = False

    while iterations < MAX_ITERATIONS:
        if deadline_expired(deadline):
            timed_out = True
            logger.warning(
                "K-means stopped at deadline.",
                extra={"iterations": iterations, "centroids": k},
            )
            break

        assignments = [[] for _ in range(k)]
        for vector_index, vector in enumerate(vectors):
            assignments[nearest_centroid(vector, centroids)].append(vector_index)
        iterations += 1

        updated = list(centroids)
        for centroid_index, members in enumerate(assignments):
            if members:
                updated[centroid_index] = mean_vector(
                    [vectors[member] for member in members],
                    dimensions,
                )

        converged = all(
            _centroid_settled(previous, current)
            for previous, current, members in zip(
                centroids,
                updated,
                assignments,
                strict=True,
            )
            if members
        )
        if converged:
            break
        centroids = updated

    logger.debug(
        "K-means finished.",
        extra={"iterations": iterations, "centroids": k, "converged": converged},
    )
    return KMeansOutcome(
        assignments=tuple(tuple(members) for members in assignments),
        iterations=iterations,
        converged=converged,
        timed_out=timed_out,
    )


def _centroid_settled(previous: FeatureVector, current: FeatureVector) -> bool:
    if previous == current:
        return True
    return cosine_similarity(previous, current) > CONVERGENCE_SIMILARITY
