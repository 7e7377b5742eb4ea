"""Small dense-vector helpers shared by projection and clustering."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

FeatureVector = tuple[float, ...]


def l2_normalize(vector: Sequence[float]) -> FeatureVector:
    """Scale to unit length; an all-zero vector is returned unchanged."""
    norm = math.sqrt(sum(component * component for component in vector))
    if norm == 0:
        return tuple(vector)
    return tuple(component / norm for component in vector)


def cosine_similarity(left: Sequence[float], right: Sequence[float]) -> float:
    """Return cosine similarity, 0.0 for mismatched lengths or zero vectors."""
    if len(left) != len(right):
        return 0.0

    dot_product = 0.0
    left_norm = 0.0
    right_norm = 0.0
    for left_value, right_value in zip(left, right, strict=True):
        dot_product += left_value * right_value
        left_norm += left_value * left_value
        right_norm += right_value * right_value

    if left_norm == 0 or right_norm == 0:
        return 0.0
    return dot_product / (math.sqrt(left_norm) * math.sqrt(right_norm))


def mean_vector(vectors: Sequence[Sequence[float]], dimensions: int) -> FeatureVector:
    """Return the component-wise mean, or a zero vector when empty."""
    if not vectors:
        return (0.0,) * dimensions
    totals = [0.0] * dimensions
    for vector in vectors:
        for index in range(dimensions):
            totals[index] += vector[index]
    count = len(vectors)
    return tuple(total / count for total in totals)
