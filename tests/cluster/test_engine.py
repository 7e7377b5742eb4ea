"""Tests for clustering runs across domain, semantic and hybrid strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shelfmark.cluster import ClusteringConfig, cluster_bookmarks
from shelfmark.runtime import Deadline

if TYPE_CHECKING:
    from collections.abc import Callable

    from shelfmark.bookmarks import Bookmark
    from shelfmark.cluster import ClusteringResult


class _FixedProjector:
    """Projector returning preassigned vectors keyed by bookmark id."""

    def __init__(self, vectors: dict[int, tuple[float, ...]]) -> None:
        self._vectors = vectors

    @property
    def dimensions(self) -> int:
        return 3

    def project(self, bookmark: Bookmark) -> tuple[float, ...]:
        return self._vectors[bookmark.id]


@pytest.fixture
def two_topic_collection(make_bookmark: Callable[..., Bookmark]) -> list[Bookmark]:
    """Three Python repositories and three design shots on separate hosts."""
    return [
        make_bookmark(1, "https://github.com/a/one", "One", tags=("python",)),
        make_bookmark(2, "https://dribbble.com/shots/1", "Shot 1", tags=("design",)),
        make_bookmark(3, "https://github.com/a/two", "Two", tags=("python",)),
        make_bookmark(4, "https://dribbble.com/shots/2", "Shot 2", tags=("design",)),
        make_bookmark(5, "https://github.com/a/three", "Three", tags=("python",)),
        make_bookmark(6, "https://dribbble.com/shots/3", "Shot 3", tags=("design",)),
    ]


@pytest.fixture
def two_topic_projector() -> _FixedProjector:
    """Python bookmarks on one axis, design bookmarks on another."""
    python_axis = (0.0, 1.0, 0.0)
    design_axis = (1.0, 0.0, 0.0)
    return _FixedProjector(
        {
            1: python_axis,
            2: design_axis,
            3: python_axis,
            4: design_axis,
            5: python_axis,
            6: design_axis,
        },
    )


def test_domain_clustering_groups_single_host(
    github_collection: list[Bookmark],
) -> None:
    """Four GitHub bookmarks form one pure cluster; the stray page is left out."""
    result = cluster_bookmarks(github_collection, ClusteringConfig(method="domain"))

    if result.cluster_count != 1:
        raise AssertionError
    cluster = result.clusters[0]
    if cluster.id != "cluster_1":
        raise AssertionError
    if cluster.name != "Github.Com Bookmarks":
        raise AssertionError
    if sorted(cluster.member_ids) != [1, 2, 3, 4]:
        raise AssertionError
    if cluster.quality.purity != 1.0 or cluster.confidence != 1.0:
        raise AssertionError
    if cluster.description != "All bookmarks from github.com":
        raise AssertionError
    if [bookmark.id for bookmark in result.unclustered] != [5]:
        raise AssertionError
    _assert_partition(github_collection, result)


def test_too_small_collection_is_left_unclustered(
    github_collection: list[Bookmark],
) -> None:
    """Fewer bookmarks than the minimum size produce no clusters."""
    result = cluster_bookmarks(github_collection[:2])

    if result.clusters != ():
        raise AssertionError
    if len(result.unclustered) != 2:  # noqa: PLR2004
        raise AssertionError
    if result.summary.top_domains != {"github.com": 2}:
        raise AssertionError
    if result.quality_score != 0.0:
        raise AssertionError


def test_semantic_clustering_separates_vector_groups(
    two_topic_collection: list[Bookmark],
    two_topic_projector: _FixedProjector,
) -> None:
    """Seeded k-means splits orthogonal vector groups into named clusters."""
    result = cluster_bookmarks(
        two_topic_collection,
        ClusteringConfig(method="semantic"),
        projector=two_topic_projector,
    )

    names = [cluster.name for cluster in result.clusters]
    if names != ["Design Resources", "Python Resources"]:
        raise AssertionError
    if [sorted(cluster.member_ids) for cluster in result.clusters] != [
        [2, 4, 6],
        [1, 3, 5],
    ]:
        raise AssertionError
    for cluster in result.clusters:
        if cluster.confidence != 1.0 or cluster.quality.separation != 1.0:
            raise AssertionError
    if result.unclustered != () or result.timed_out:
        raise AssertionError
    if result.quality_score != 1.0:
        raise AssertionError


def test_hybrid_keeps_pure_domains_then_clusters_remainder(
    github_collection: list[Bookmark],
) -> None:
    """Hybrid keeps the GitHub domain cluster; one leftover is too few."""
    result = cluster_bookmarks(github_collection)

    if result.method != "hybrid":
        raise AssertionError
    if [cluster.name for cluster in result.clusters] != ["Github.Com Bookmarks"]:
        raise AssertionError
    _assert_partition(github_collection, result)


def test_partition_holds_for_every_method(mixed_collection: list[Bookmark]) -> None:
    """Members plus unclustered cover the input exactly once."""
    for method in ("domain", "semantic", "hybrid"):
        config = ClusteringConfig(method=method)  # type: ignore[arg-type]
        result = cluster_bookmarks(mixed_collection, config)
        _assert_partition(mixed_collection, result)
        for cluster in result.clusters:
            if cluster.size < config.min_cluster_size:
                raise AssertionError


def test_clustering_is_deterministic(mixed_collection: list[Bookmark]) -> None:
    """Repeated runs over the same input give identical clusters."""
    first = cluster_bookmarks(mixed_collection, ClusteringConfig(method="semantic"))
    second = cluster_bookmarks(mixed_collection, ClusteringConfig(method="semantic"))

    if _fingerprint(first) != _fingerprint(second):
        raise AssertionError


def test_expired_deadline_flags_partial_result(
    two_topic_collection: list[Bookmark],
    two_topic_projector: _FixedProjector,
) -> None:
    """A cancelled deadline stops k-means and marks the result timed out."""
    deadline = Deadline()
    deadline.cancel()

    result = cluster_bookmarks(
        two_topic_collection,
        ClusteringConfig(method="semantic"),
        projector=two_topic_projector,
        deadline=deadline,
    )

    if not result.timed_out:
        raise AssertionError
    _assert_partition(two_topic_collection, result)


def test_summary_counts_whole_input(mixed_collection: list[Bookmark]) -> None:
    """Summary histograms and insights cover every input bookmark."""
    result = cluster_bookmarks(mixed_collection, ClusteringConfig(method="domain"))

    summary = result.summary
    if next(iter(summary.top_domains)) != "github.com":
        raise AssertionError
    if summary.time_distribution != {"2024-03": 3, "2024-04": 2, "2024-05": 2}:
        raise AssertionError
    expected_insights = (
        "Found 1 distinct bookmark clusters",
        "42.9% of bookmarks are from github.com",
        "Most used tag is 'python' (4 bookmarks)",
    )
    if summary.insights != expected_insights:
        raise AssertionError


def _assert_partition(bookmarks: list[Bookmark], result: ClusteringResult) -> None:
    placed = [member.id for cluster in result.clusters for member in cluster.members]
    placed.extend(bookmark.id for bookmark in result.unclustered)
    if sorted(placed) != sorted(bookmark.id for bookmark in bookmarks):
        raise AssertionError
    if result.total_bookmarks != len(bookmarks):
        raise AssertionError


def _fingerprint(result: ClusteringResult) -> list[tuple[str, str, list[int]]]:
    return [
        (cluster.id, cluster.name, [member.id for member in cluster.members])
        for cluster in result.clusters
    ]
