"""Exact URL-variant lookup independent of scored similarity."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shelfmark.normalize import url_variations

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shelfmark.bookmarks import Bookmark


def find_variant_matches(
    target_url: str,
    candidates: Iterable[Bookmark],
) -> list[Bookmark]:
    """Return candidates whose URL shares any spelling variant with the target."""
    target_variations = set(url_variations(target_url))
    return [
        candidate
        for candidate in candidates
        if not target_variations.isdisjoint(url_variations(candidate.url))
    ]
