"""Normalization module for Shelfmark."""

from .text_normalization import normalize_similarity_text, tokenize_similarity_text
from .url_canonicalization import (
    canonicalize_url,
    extract_domain,
    is_short_url,
    is_tracking_query_param,
    url_variations,
)

__all__ = [
    "canonicalize_url",
    "extract_domain",
    "is_short_url",
    "is_tracking_query_param",
    "normalize_similarity_text",
    "tokenize_similarity_text",
    "url_variations",
]
