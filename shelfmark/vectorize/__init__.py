"""Feature vectorization module for Shelfmark."""

from .keyword_signals import KeywordSignal, extract_keyword_signals, extract_words
from .projector import (
    VECTOR_DIMENSIONS_DEFAULT,
    HashingVectorProjector,
    VectorProjector,
    stable_hash,
)
from .vector_math import FeatureVector, cosine_similarity, l2_normalize, mean_vector

__all__ = [
    "VECTOR_DIMENSIONS_DEFAULT",
    "FeatureVector",
    "HashingVectorProjector",
    "KeywordSignal",
    "VectorProjector",
    "cosine_similarity",
    "extract_keyword_signals",
    "extract_words",
    "l2_normalize",
    "mean_vector",
    "stable_hash",
]
