"""Tests for similarity text normalization and tokenization."""

from __future__ import annotations

from shelfmark.normalize import normalize_similarity_text, tokenize_similarity_text


def test_punctuation_and_underscores_collapse_to_single_spaces() -> None:
    """Non-alphanumeric runs should collapse into single spaces."""
    result = normalize_similarity_text("Alpha---beta___gamma!!!   delta\t\nepsilon")

    if result != "alpha beta gamma delta epsilon":
        raise AssertionError


def test_fullwidth_characters_are_folded() -> None:
    """NFKC folding should map fullwidth letters to ASCII."""
    if normalize_similarity_text("\uff26\uff4f\uff4f BAR") != "foo bar":
        raise AssertionError


def test_missing_text_normalizes_to_empty() -> None:
    """None and empty inputs should both normalize to an empty string."""
    if normalize_similarity_text(None) != "":
        raise AssertionError
    if normalize_similarity_text("") != "":
        raise AssertionError


def test_tokenization_uses_normalized_words() -> None:
    """Tokens should be lowercase words without punctuation."""
    if tokenize_similarity_text("  Hello, World!  ") != ["hello", "world"]:
        raise AssertionError
    if tokenize_similarity_text("...") != []:
        raise AssertionError
