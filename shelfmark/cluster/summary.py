"""Collection-wide histograms and insight strings."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from shelfmark.bookmarks import month_key

from .profiling import domain_counts, ranked, tag_counts
from .records import ClusteringSummary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

    from .records import BookmarkCluster


def build_summary(
    bookmarks: Sequence[Bookmark],
    clusters: Sequence[BookmarkCluster],
) -> ClusteringSummary:
    """Summarize the whole input, independent of which bookmarks clustered."""
    domains = dict(ranked(domain_counts(bookmarks)))
    tags = dict(ranked(tag_counts(bookmarks)))
    month_counts = Counter(month_key(bookmark.created_at) for bookmark in bookmarks)
    months = dict(sorted(month_counts.items()))

    insights: list[str] = []
    if clusters:
        insights.append(f"Found {len(clusters)} distinct bookmark clusters")
    if domains:
        top_domain, domain_count = next(iter(domains.items()))
        share = domain_count / len(bookmarks) * 100
        insights.append(f"{share:.1f}% of bookmarks are from {top_domain}")
    if tags:
        top_tag, tag_count = next(iter(tags.items()))
        insights.append(f"Most used tag is '{top_tag}' ({tag_count} bookmarks)")

    return ClusteringSummary(
        top_domains=domains,
        top_tags=tags,
        time_distribution=months,
        insights=tuple(insights),
    )
