"""Similarity scoring module for Shelfmark."""

from .text_similarity import (
    NGRAM_SIZE_DEFAULT,
    character_ngrams,
    jaccard_similarity,
    levenshtein_similarity,
    ngram_similarity,
    set_jaccard,
    text_similarity,
)
from .url_similarity import (
    CANONICAL_URL_SCORE,
    EXACT_URL_SCORE,
    domain_similarity,
    query_similarity,
    url_similarity,
)

__all__ = [
    "CANONICAL_URL_SCORE",
    "EXACT_URL_SCORE",
    "NGRAM_SIZE_DEFAULT",
    "character_ngrams",
    "domain_similarity",
    "jaccard_similarity",
    "levenshtein_similarity",
    "ngram_similarity",
    "query_similarity",
    "set_jaccard",
    "text_similarity",
    "url_similarity",
]
