"""Domain and tag profiles of a bookmark group."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from shelfmark.normalize import extract_domain

from .records import ClusterTheme

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

COMMON_TAG_MIN_SHARE = 0.3
COMMON_TAG_LIMIT = 10
DOMAIN_THEME_MIN_SHARE = 0.5
TAG_THEME_MIN_COUNT = 2
TAG_THEME_KEYWORD_LIMIT = 5


def domain_counts(bookmarks: Sequence[Bookmark]) -> Counter[str]:
    """Count bookmarks per domain, preserving first-seen order."""
    return Counter(extract_domain(bookmark.url) for bookmark in bookmarks)


def tag_counts(bookmarks: Sequence[Bookmark]) -> Counter[str]:
    """Count bookmarks per tag name."""
    counts: Counter[str] = Counter()
    for bookmark in bookmarks:
        counts.update(bookmark.sorted_tags)
    return counts


def ranked(counts: Counter[str]) -> list[tuple[str, int]]:
    """Return counter items by count descending, then name ascending."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def dominant_domain(bookmarks: Sequence[Bookmark]) -> tuple[str, int] | None:
    """Return the most common domain and its count, or None when empty."""
    ranked_domains = ranked(domain_counts(bookmarks))
    if not ranked_domains:
        return None
    return ranked_domains[0]


def domain_share(bookmarks: Sequence[Bookmark]) -> float:
    """Return the fraction of bookmarks on the most common domain."""
    dominant = dominant_domain(bookmarks)
    if dominant is None:
        return 0.0
    return dominant[1] / len(bookmarks)


def common_tags(bookmarks: Sequence[Bookmark]) -> tuple[str, ...]:
    """Return up to ten tags carried by at least 30% of the bookmarks."""
    if not bookmarks:
        return ()
    min_count = max(1, int(len(bookmarks) * COMMON_TAG_MIN_SHARE))
    return tuple(
        tag
        for tag, count in ranked(tag_counts(bookmarks))
        if count >= min_count
    )[:COMMON_TAG_LIMIT]


def cluster_themes(bookmarks: Sequence[Bookmark]) -> tuple[ClusterTheme, ...]:
    """Return majority-domain themes followed by the leading tag theme."""
    if not bookmarks:
        return ()
    total = len(bookmarks)
    themes: list[ClusterTheme] = []

    for domain, count in ranked(domain_counts(bookmarks)):
        share = count / total
        if share > DOMAIN_THEME_MIN_SHARE:
            themes.append(
                ClusterTheme(
                    name=f"{domain} resources",
                    keywords=(domain,),
                    strength=share,
                    coverage=share,
                ),
            )

    tag_ranking = ranked(tag_counts(bookmarks))
    top_tags = [tag for tag, count in tag_ranking if count >= TAG_THEME_MIN_COUNT]
    if top_tags:
        lead_tag = top_tags[0]
        share = tag_ranking[0][1] / total
        themes.append(
            ClusterTheme(
                name=f"{lead_tag} content",
                keywords=tuple(top_tags[:TAG_THEME_KEYWORD_LIMIT]),
                strength=share,
                coverage=share,
            ),
        )
    return tuple(themes)
