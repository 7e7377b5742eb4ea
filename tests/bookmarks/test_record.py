"""Tests for the immutable bookmark record."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from shelfmark.bookmarks import Bookmark, month_key


def test_bookmark_is_frozen() -> None:
    """Engines must not be able to mutate caller bookmarks."""
    bookmark = Bookmark(id=1, url="https://example.com")

    with pytest.raises(dataclasses.FrozenInstanceError):
        bookmark.title = "changed"  # type: ignore[misc]


def test_description_text_folds_missing_description() -> None:
    """A missing description reads as an empty string."""
    if Bookmark(id=1, url="https://example.com").description_text != "":
        raise AssertionError
    with_description = Bookmark(id=2, url="https://example.com", description="Docs")
    if with_description.description_text != "Docs":
        raise AssertionError


def test_sorted_tags_are_deterministic() -> None:
    """Tags iterate in sorted order regardless of set ordering."""
    bookmark = Bookmark(
        id=1,
        url="https://example.com",
        tags=frozenset({"web", "css", "reference"}),
    )

    if bookmark.sorted_tags != ("css", "reference", "web"):
        raise AssertionError


def test_month_key_formats_year_and_month() -> None:
    """Creation-time buckets use YYYY-MM."""
    if month_key(datetime(2024, 3, 9, tzinfo=UTC)) != "2024-03":
        raise AssertionError
