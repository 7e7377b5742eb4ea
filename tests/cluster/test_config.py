"""Tests for clustering configuration validation."""

from __future__ import annotations

import pytest

from shelfmark.cluster import ClusteringConfig, ClusteringConfigError, resolve_method


def test_defaults_are_hybrid_with_standard_sizes() -> None:
    """Default configuration uses hybrid clustering with 3..20 bounds."""
    config = ClusteringConfig()

    if config.method != "hybrid":
        raise AssertionError
    if (config.min_cluster_size, config.max_clusters) != (3, 20):
        raise AssertionError


@pytest.mark.parametrize(
    ("overrides", "field_name"),
    [
        ({"min_cluster_size": 0}, "min_cluster_size"),
        ({"max_clusters": -1}, "max_clusters"),
        ({"similarity_threshold": 1.5}, "similarity_threshold"),
    ],
)
def test_out_of_range_values_are_rejected(
    overrides: dict[str, float],
    field_name: str,
) -> None:
    """Invalid sizes and thresholds should raise a descriptive error."""
    with pytest.raises(ClusteringConfigError, match=field_name):
        ClusteringConfig(**overrides)  # type: ignore[arg-type]


def test_resolve_method_defaults_unknown_names_to_hybrid() -> None:
    """Known names resolve case-insensitively; anything else becomes hybrid."""
    if resolve_method(" Semantic ") != "semantic":
        raise AssertionError
    if resolve_method("domain") != "domain":
        raise AssertionError
    if resolve_method("bogus") != "hybrid":
        raise AssertionError
    if resolve_method(None) != "hybrid":
        raise AssertionError
