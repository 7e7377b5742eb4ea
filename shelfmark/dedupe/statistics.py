"""Aggregate statistics over batch duplicate groups."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfmark.normalize import extract_domain

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

    from .duplicate_groups import DuplicateGroup

TOP_DOMAINS_LIMIT = 10


@dataclass(frozen=True, slots=True)
class DomainDuplicateInfo:
    """Duplicate count for one domain relative to the whole collection."""

    domain: str
    count: int
    duplicate_rate: float


@dataclass(frozen=True, slots=True)
class DuplicateStatistics:
    """Collection-wide duplicate totals."""

    total_bookmarks: int
    duplicate_count: int
    duplicate_rate: float
    exact_duplicates: int
    similar_duplicates: int
    top_domains: tuple[DomainDuplicateInfo, ...]


def duplicate_statistics(
    bookmarks: Sequence[Bookmark],
    groups: Sequence[DuplicateGroup],
) -> DuplicateStatistics:
    """Summarize duplicate groups against the collection they came from."""
    total = len(bookmarks)
    duplicate_count = 0
    exact_duplicates = 0
    similar_duplicates = 0
    domain_counts: Counter[str] = Counter()

    for group in groups:
        duplicate_count += len(group.duplicates)
        for match in group.duplicates:
            if match.is_exact_like:
                exact_duplicates += 1
            elif match.match_type == "similar":
                similar_duplicates += 1
            domain = extract_domain(match.candidate.url)
            if domain:
                domain_counts[domain] += 1

    top_domains = tuple(
        DomainDuplicateInfo(
            domain=domain,
            count=count,
            duplicate_rate=count / total if total else 0.0,
        )
        for domain, count in sorted(
            domain_counts.items(),
            key=lambda item: (-item[1], item[0]),
        )[:TOP_DOMAINS_LIMIT]
    )

    return DuplicateStatistics(
        total_bookmarks=total,
        duplicate_count=duplicate_count,
        duplicate_rate=duplicate_count / total if total else 0.0,
        exact_duplicates=exact_duplicates,
        similar_duplicates=similar_duplicates,
        top_domains=top_domains,
    )
