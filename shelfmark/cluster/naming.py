"""Human-readable names and descriptions for clusters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .profiling import domain_counts, dominant_domain, ranked

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark

    from .records import BookmarkCluster

MIXED_CONTENT_NAME = "Mixed Content Collection"
GENERIC_CLUSTER_NAME = "Bookmark Collection"
DESCRIPTION_TAG_LIMIT = 3
DESCRIPTION_SOURCE_LIMIT = 3


def title_case(value: str) -> str:
    """Uppercase the first letter after every non-alphanumeric separator."""
    characters: list[str] = []
    at_word_start = True
    for char in value:
        if at_word_start and char.isalpha():
            characters.append(char.upper())
        else:
            characters.append(char)
        at_word_start = not (char.isalnum() or char == "_")
    return "".join(characters)


def domain_cluster_name(domain: str) -> str:
    """Return the name of a single-domain cluster."""
    return f"{title_case(domain)} Bookmarks"


def semantic_cluster_name(
    members: Sequence[Bookmark],
    common_tags: Sequence[str],
) -> str:
    """Name a vector cluster from its lead tag, else a majority domain."""
    if common_tags:
        return f"{title_case(common_tags[0])} Resources"
    dominant = dominant_domain(members)
    if dominant is not None and dominant[1] > len(members) / 2:
        return f"{title_case(dominant[0])} Collection"
    return MIXED_CONTENT_NAME


def needs_better_name(name: str) -> bool:
    """Return whether a cluster name is empty or the mixed-content fallback."""
    return not name or "Mixed Content" in name


def improved_cluster_name(cluster: BookmarkCluster) -> str:
    """Derive a name from themes, then tags, then domain, then a fallback."""
    if cluster.themes:
        return cluster.themes[0].name
    if cluster.common_tags:
        return f"{title_case(cluster.common_tags[0])} Collection"
    dominant = dominant_domain(cluster.members)
    if dominant is not None:
        return f"{title_case(dominant[0])} Resources"
    return GENERIC_CLUSTER_NAME


def cluster_description(
    members: Sequence[Bookmark],
    common_tags: Sequence[str],
) -> str:
    """Describe a cluster by its common topics and source domains."""
    parts: list[str] = []
    if common_tags:
        topics = ", ".join(common_tags[:DESCRIPTION_TAG_LIMIT])
        parts.append(f"Common topics: {topics}")

    domains = [domain for domain, _ in ranked(domain_counts(members))]
    if len(domains) == 1:
        parts.append(f"All bookmarks from {domains[0]}")
    elif 1 < len(domains) <= DESCRIPTION_SOURCE_LIMIT:
        parts.append(f"Sources: {', '.join(domains)}")
    return ". ".join(parts)
