"""Tests for hashed feature projection and vector helpers."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import pytest

from shelfmark.vectorize import (
    VECTOR_DIMENSIONS_DEFAULT,
    HashingVectorProjector,
    KeywordSignal,
    VectorProjector,
    cosine_similarity,
    mean_vector,
    stable_hash,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from shelfmark.bookmarks import Bookmark


def test_projector_satisfies_protocol() -> None:
    """The default projector is a drop-in VectorProjector."""
    projector = HashingVectorProjector()

    if not isinstance(projector, VectorProjector):
        raise AssertionError
    if projector.dimensions != VECTOR_DIMENSIONS_DEFAULT:
        raise AssertionError


def test_projection_is_unit_length_and_deterministic(
    make_bookmark: Callable[..., Bookmark],
) -> None:
    """Vectors are L2-normalized and identical across projector instances."""
    bookmark = make_bookmark(
        1,
        "https://github.com/python/cpython",
        "How to build CPython",
        tags=("python", "compiler"),
    )

    first = HashingVectorProjector().project(bookmark)
    second = HashingVectorProjector().project(bookmark)

    if first != second:
        raise AssertionError
    if len(first) != VECTOR_DIMENSIONS_DEFAULT:
        raise AssertionError
    if not math.isclose(sum(value * value for value in first), 1.0):
        raise AssertionError


def test_featureless_bookmark_projects_to_zero_vector(
    make_bookmark: Callable[..., Bookmark],
) -> None:
    """No tags and no signals leave every bucket at zero."""
    vector = HashingVectorProjector().project(make_bookmark(1, "https://x.invalid/"))

    if any(vector):
        raise AssertionError


def test_tags_land_in_stable_hash_bucket(
    make_bookmark: Callable[..., Bookmark],
) -> None:
    """A single tag fills exactly its hash bucket."""
    projector = HashingVectorProjector(dimensions=16)
    vector = projector.project(
        make_bookmark(1, "https://x.invalid/", tags=("python",)),
    )

    bucket = stable_hash("python") % 16
    if vector[bucket] != 1.0:
        raise AssertionError
    if sum(vector) != 1.0:
        raise AssertionError


def test_signals_below_floor_are_ignored(
    make_bookmark: Callable[..., Bookmark],
) -> None:
    """Keyword signals under the confidence floor add nothing."""

    def weak_signals(
        _title: str,
        _description: str | None,
        _url: str,
    ) -> list[KeywordSignal]:
        return [KeywordSignal(keyword="weak", confidence=0.4, source="topic")]

    projector = HashingVectorProjector(signal_extractor=weak_signals)

    if any(projector.project(make_bookmark(1, "https://x.invalid/"))):
        raise AssertionError


def test_invalid_dimensions_are_rejected() -> None:
    """Projection needs at least one bucket."""
    with pytest.raises(ValueError, match="dimensions must be positive"):
        _ = HashingVectorProjector(dimensions=0)


def test_stable_hash_is_polynomial() -> None:
    """The hash is the base-31 polynomial of code points."""
    if (stable_hash(""), stable_hash("a"), stable_hash("ab")) != (0, 97, 3105):
        raise AssertionError


def test_cosine_similarity_edge_cases() -> None:
    """Mismatched lengths and zero vectors score zero."""
    if cosine_similarity((1.0, 0.0), (1.0, 0.0, 0.0)) != 0.0:
        raise AssertionError
    if cosine_similarity((0.0, 0.0), (1.0, 0.0)) != 0.0:
        raise AssertionError
    if not math.isclose(cosine_similarity((1.0, 2.0), (2.0, 4.0)), 1.0):
        raise AssertionError


def test_mean_vector_of_nothing_is_zero() -> None:
    """Averaging no vectors yields the zero vector."""
    if mean_vector([], 3) != (0.0, 0.0, 0.0):
        raise AssertionError
    if mean_vector([(1.0, 3.0), (3.0, 1.0)], 2) != (2.0, 2.0):
        raise AssertionError
