"""Tests for keyword signal extraction."""

from __future__ import annotations

import math

from shelfmark.vectorize import extract_keyword_signals, extract_words


def test_url_context_adds_contextual_keywords() -> None:
    """Known hosts contribute fixed keywords at contextual confidence."""
    signals = extract_keyword_signals("", None, "https://github.com/python/cpython")

    contextual = {
        signal.keyword: signal.confidence
        for signal in signals
        if signal.source == "contextual"
    }
    if contextual != {
        "programming": 0.7,
        "open-source": 0.7,
        "code": 0.7,
        "repository": 0.7,
    }:
        raise AssertionError


def test_phrase_confidence_grows_with_repeats_and_caps() -> None:
    """Each repeat of a phrase adds 0.1 up to 0.85."""
    once = _confidence_of("howto", "How to cook", "https://x.invalid/")
    twice = _confidence_of("howto", "How to cook, how to bake", "https://x.invalid/")
    many = _confidence_of(
        "howto",
        "how to a, how to b, how to c, how to d",
        "https://x.invalid/",
    )

    for actual, expected in ((once, 0.7), (twice, 0.8), (many, 0.85)):
        if actual is None or not math.isclose(actual, expected):
            raise AssertionError((actual, expected))


def test_phrases_match_on_word_boundaries() -> None:
    """Short phrases must not fire inside longer words."""
    signals = extract_keyword_signals("Notes for devs", None, "https://x.invalid/")

    if any(signal.keyword == "comparison" for signal in signals):
        raise AssertionError


def test_signals_are_unique_and_sorted() -> None:
    """Each keyword appears once, highest confidence first then by name."""
    signals = extract_keyword_signals(
        "How to write a tutorial",
        "A step by step guide",
        "https://stackoverflow.com/q/1",
    )

    keywords = [signal.keyword for signal in signals]
    if len(keywords) != len(set(keywords)):
        raise AssertionError
    ordering = [(-signal.confidence, signal.keyword) for signal in signals]
    if ordering != sorted(ordering):
        raise AssertionError


def test_topic_signals_require_coverage() -> None:
    """A topic fires when more than 20% of content words relate to it."""
    signals = extract_keyword_signals(
        "Database query tuning",
        None,
        "https://x.invalid/",
    )

    topics = {signal.keyword for signal in signals if signal.source == "topic"}
    if "database" not in topics:
        raise AssertionError


def test_extract_words_drops_stop_words_and_short_tokens() -> None:
    """Stop words and words under three characters are removed."""
    if extract_words("The quick, brown fox is ok!") != ["quick", "brown", "fox"]:
        raise AssertionError


def _confidence_of(keyword: str, title: str, url: str) -> float | None:
    for signal in extract_keyword_signals(title, None, url):
        if signal.keyword == keyword:
            return signal.confidence
    return None
