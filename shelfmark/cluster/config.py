"""Immutable per-call clustering configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, cast

ClusteringMethod = Literal["domain", "semantic", "hybrid"]
CLUSTERING_METHODS: tuple[str, str, str] = ("domain", "semantic", "hybrid")

DEFAULT_METHOD: ClusteringMethod = "hybrid"
DEFAULT_MIN_CLUSTER_SIZE = 3
DEFAULT_MAX_CLUSTERS = 20
DEFAULT_SIMILARITY_THRESHOLD = 0.4


class ClusteringConfigError(ValueError):
    """Raised when clustering configuration values are out of range."""

    @classmethod
    def for_non_positive(cls, field_name: str, value: int) -> ClusteringConfigError:
        """Build error for size-like fields that must be at least one."""
        message = f"Invalid {field_name}: {value!r}. Value must be >= 1."
        return cls(message)

    @classmethod
    def for_out_of_range(cls, field_name: str, value: float) -> ClusteringConfigError:
        """Build error for ratio-like fields that must lie in [0, 1]."""
        message = f"Invalid {field_name}: {value!r}. Value must be within [0, 1]."
        return cls(message)


@dataclass(frozen=True, slots=True)
class ClusteringConfig:
    """Clustering knobs passed per call; never mutated by the engine."""

    method: ClusteringMethod = DEFAULT_METHOD
    min_cluster_size: int = DEFAULT_MIN_CLUSTER_SIZE
    max_clusters: int = DEFAULT_MAX_CLUSTERS
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD

    def __post_init__(self) -> None:
        """Validate ranges so strategies can rely on them."""
        if self.min_cluster_size < 1:
            raise ClusteringConfigError.for_non_positive(
                "min_cluster_size",
                self.min_cluster_size,
            )
        if self.max_clusters < 1:
            raise ClusteringConfigError.for_non_positive(
                "max_clusters",
                self.max_clusters,
            )
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ClusteringConfigError.for_out_of_range(
                "similarity_threshold",
                self.similarity_threshold,
            )


def resolve_method(value: str | None) -> ClusteringMethod:
    """Map a caller-supplied method name to a known method, defaulting to hybrid."""
    if value is None:
        return DEFAULT_METHOD
    normalized = value.strip().lower()
    if normalized in CLUSTERING_METHODS:
        return cast("ClusteringMethod", normalized)
    return DEFAULT_METHOD
