"""Bookmark clustering module for Shelfmark."""

from .config import (
    CLUSTERING_METHODS,
    ClusteringConfig,
    ClusteringConfigError,
    ClusteringMethod,
    resolve_method,
)
from .engine import cluster_bookmarks, refine_clusters
from .kmeans import KMeansOutcome, centroid_count, run_kmeans, seed_centroid
from .naming import title_case
from .potential import (
    ClusterPotential,
    ClusterSuggestion,
    analyze_cluster_potential,
    suggest_clusters,
)
from .profiling import cluster_themes, common_tags
from .quality import overall_quality, score_clusters
from .records import (
    BookmarkCluster,
    ClusteringResult,
    ClusteringSummary,
    ClusterQuality,
    ClusterTheme,
)
from .strategies import domain_clusters, hybrid_clusters, semantic_clusters
from .summary import build_summary

__all__ = [
    "CLUSTERING_METHODS",
    "BookmarkCluster",
    "ClusterPotential",
    "ClusterQuality",
    "ClusterSuggestion",
    "ClusterTheme",
    "ClusteringConfig",
    "ClusteringConfigError",
    "ClusteringMethod",
    "ClusteringResult",
    "ClusteringSummary",
    "KMeansOutcome",
    "analyze_cluster_potential",
    "build_summary",
    "centroid_count",
    "cluster_bookmarks",
    "cluster_themes",
    "common_tags",
    "domain_clusters",
    "hybrid_clusters",
    "overall_quality",
    "refine_clusters",
    "resolve_method",
    "run_kmeans",
    "score_clusters",
    "seed_centroid",
    "semantic_clusters",
    "suggest_clusters",
    "title_case",
]
