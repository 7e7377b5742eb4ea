"""Text normalization helpers for token and edit-distance comparisons."""

from __future__ import annotations

import re
import unicodedata

_NON_ALPHANUMERIC_PATTERN = re.compile(r"[^\w\s]|_", re.UNICODE)
_WHITESPACE_PATTERN = re.compile(r"\s+")


def normalize_similarity_text(value: str | None) -> str:
    """Lowercase text and collapse punctuation into single spaces."""
    if value is None:
        return ""
    if value == "":
        return ""

    normalized = unicodedata.normalize("NFKC", value).lower()
    normalized = _NON_ALPHANUMERIC_PATTERN.sub(" ", normalized)
    return _collapse_repeated_whitespace(normalized)


def tokenize_similarity_text(value: str | None) -> list[str]:
    """Return whitespace-separated tokens of normalized text."""
    normalized = normalize_similarity_text(value)
    if not normalized:
        return []
    return normalized.split(" ")


def _collapse_repeated_whitespace(value: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", value).strip()
