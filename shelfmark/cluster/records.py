"""Cluster and clustering-run result records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shelfmark.bookmarks import Bookmark

    from .config import ClusteringMethod


@dataclass(frozen=True, slots=True)
class ClusterTheme:
    """Named keyword group observed inside one cluster."""

    name: str
    keywords: tuple[str, ...]
    strength: float
    coverage: float


@dataclass(frozen=True, slots=True)
class ClusterQuality:
    """Domain- and tag-based quality proxies for one cluster."""

    cohesion: float
    separation: float
    silhouette: float
    purity: float


UNSCORED_QUALITY = ClusterQuality(
    cohesion=0.0,
    separation=0.0,
    silhouette=0.0,
    purity=0.0,
)


@dataclass(frozen=True, slots=True)
class BookmarkCluster:
    """Named group of bookmarks borrowed from the input collection."""

    id: str
    name: str
    members: tuple[Bookmark, ...]
    description: str = ""
    common_tags: tuple[str, ...] = ()
    themes: tuple[ClusterTheme, ...] = ()
    confidence: float = 0.0
    quality: ClusterQuality = UNSCORED_QUALITY

    @property
    def member_ids(self) -> frozenset[int]:
        """Return ids of every member bookmark."""
        return frozenset(member.id for member in self.members)

    @property
    def size(self) -> int:
        """Return member count."""
        return len(self.members)


@dataclass(frozen=True, slots=True)
class ClusteringSummary:
    """Histograms and insight strings over the whole input collection."""

    top_domains: dict[str, int] = field(default_factory=dict)
    top_tags: dict[str, int] = field(default_factory=dict)
    time_distribution: dict[str, int] = field(default_factory=dict)
    insights: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ClusteringResult:
    """Outcome of one clustering run.

    Cluster members and ``unclustered`` partition the input: every bookmark
    appears exactly once across them.
    """

    clusters: tuple[BookmarkCluster, ...]
    unclustered: tuple[Bookmark, ...]
    quality_score: float
    summary: ClusteringSummary
    method: ClusteringMethod
    total_bookmarks: int
    processing_seconds: float = 0.0
    timed_out: bool = False

    @property
    def cluster_count(self) -> int:
        """Return the number of clusters returned."""
        return len(self.clusters)
