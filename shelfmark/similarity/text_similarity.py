"""Normalized text similarity blending token, edit-distance and n-gram overlap."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from shelfmark.normalize import normalize_similarity_text

JACCARD_WEIGHT = 0.4
LEVENSHTEIN_WEIGHT = 0.3
NGRAM_WEIGHT = 0.3
NGRAM_SIZE_DEFAULT = 3


def text_similarity(left: str | None, right: str | None) -> float:
    """Return similarity of two free-text strings in ``[0, 1]``.

    Two empty strings are a vacuous match (1.0), exactly one empty string
    never matches (0.0) and case-insensitive equality short-circuits to 1.0.
    """
    left_text = left or ""
    right_text = right or ""
    if not left_text and not right_text:
        return 1.0
    if not left_text or not right_text:
        return 0.0
    if left_text.casefold() == right_text.casefold():
        return 1.0

    left_normalized = normalize_similarity_text(left_text)
    right_normalized = normalize_similarity_text(right_text)

    score = (
        jaccard_similarity(left_normalized, right_normalized) * JACCARD_WEIGHT
        + levenshtein_similarity(left_normalized, right_normalized)
        * LEVENSHTEIN_WEIGHT
        + ngram_similarity(left_normalized, right_normalized) * NGRAM_WEIGHT
    )
    return min(1.0, score)


def jaccard_similarity(left: str, right: str) -> float:
    """Return Jaccard overlap of the whitespace token sets of two strings."""
    left_tokens = set(left.split())
    right_tokens = set(right.split())
    return set_jaccard(left_tokens, right_tokens, empty=1.0)


def levenshtein_similarity(left: str, right: str) -> float:
    """Return ``1 - distance / max(len)`` with two empty strings scoring 1.0."""
    max_length = max(len(left), len(right))
    if max_length == 0:
        return 1.0
    return 1.0 - Levenshtein.distance(left, right) / max_length


def ngram_similarity(left: str, right: str, size: int = NGRAM_SIZE_DEFAULT) -> float:
    """Return Jaccard overlap of character n-gram sets."""
    left_grams = character_ngrams(left, size)
    right_grams = character_ngrams(right, size)
    return set_jaccard(left_grams, right_grams, empty=1.0)


def character_ngrams(value: str, size: int = NGRAM_SIZE_DEFAULT) -> set[str]:
    """Return distinct n-grams, degenerating to the whole string when short."""
    if len(value) < size:
        return {value}
    return {value[index : index + size] for index in range(len(value) - size + 1)}


def set_jaccard(left: set[str], right: set[str], *, empty: float) -> float:
    """Return ``|left & right| / |left | right|`` or ``empty`` for two empty sets."""
    union = len(left | right)
    if union == 0:
        return empty
    return len(left & right) / union
