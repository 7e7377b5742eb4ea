"""Swappable bookmark-to-vector projection used by semantic clustering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .keyword_signals import extract_keyword_signals
from .vector_math import FeatureVector, l2_normalize

if TYPE_CHECKING:
    from collections.abc import Callable

    from shelfmark.bookmarks import Bookmark

    from .keyword_signals import KeywordSignal

VECTOR_DIMENSIONS_DEFAULT = 50
KEYWORD_CONFIDENCE_FLOOR_DEFAULT = 0.5
TAG_WEIGHT = 1.0

_HASH_MULTIPLIER = 31
_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN_BIT = 1 << 63


@runtime_checkable
class VectorProjector(Protocol):
    """Contract for mapping a bookmark to a fixed-length feature vector."""

    @property
    def dimensions(self) -> int:
        """Return the length of every projected vector."""
        ...

    def project(self, bookmark: Bookmark) -> FeatureVector:
        """Return the feature vector for one bookmark."""
        ...


class HashingVectorProjector:
    """Bag-of-hashed-features projection over tags and keyword signals.

    Each tag adds 1.0 and each keyword signal adds its confidence to the
    bucket ``stable_hash(name) % dimensions``; the result is L2-normalized.
    Nearness only reflects shared names or bucket collisions, not meaning.
    """

    _dimensions: int
    _keyword_confidence_floor: float
    _signal_extractor: Callable[[str, str | None, str], list[KeywordSignal]]

    def __init__(
        self,
        *,
        dimensions: int = VECTOR_DIMENSIONS_DEFAULT,
        keyword_confidence_floor: float = KEYWORD_CONFIDENCE_FLOOR_DEFAULT,
        signal_extractor: Callable[[str, str | None, str], list[KeywordSignal]]
        | None = None,
    ) -> None:
        """Create projector with bucket count and keyword confidence floor."""
        if dimensions <= 0:
            message = f"Vector dimensions must be positive, got {dimensions}."
            raise ValueError(message)
        self._dimensions = dimensions
        self._keyword_confidence_floor = keyword_confidence_floor
        self._signal_extractor = signal_extractor or extract_keyword_signals

    @property
    def dimensions(self) -> int:
        """Return the number of hash buckets."""
        return self._dimensions

    def project(self, bookmark: Bookmark) -> FeatureVector:
        """Return the normalized hashed-feature vector for one bookmark."""
        buckets = [0.0] * self._dimensions
        for tag in bookmark.sorted_tags:
            buckets[stable_hash(tag) % self._dimensions] += TAG_WEIGHT

        signals = self._signal_extractor(
            bookmark.title,
            bookmark.description,
            bookmark.url,
        )
        for signal in signals:
            if signal.confidence < self._keyword_confidence_floor:
                continue
            buckets[stable_hash(signal.keyword) % self._dimensions] += (
                signal.confidence
            )
        return l2_normalize(buckets)


def stable_hash(value: str) -> int:
    """Return a process-independent non-negative polynomial string hash.

    Uses ``h = h * 31 + code_point`` with 64-bit two's-complement wraparound,
    then the absolute value.
    """
    hashed = 0
    for char in value:
        hashed = (hashed * _HASH_MULTIPLIER + ord(char)) & _UINT64_MASK
    if hashed & _INT64_SIGN_BIT:
        hashed -= 1 << 64
    return abs(hashed)
