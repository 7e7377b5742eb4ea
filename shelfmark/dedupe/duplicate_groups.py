"""Greedy batch grouping of a whole collection into duplicate groups."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from shelfmark.runtime import deadline_expired

from .match_engine import DUPLICATE_THRESHOLD_DEFAULT, find_similar_bookmarks

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shelfmark.bookmarks import Bookmark
    from shelfmark.runtime import Deadline

    from .match_contract import DuplicateMatch

GroupType = Literal["exact_duplicates", "mixed_duplicates", "similar_content"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DuplicateGroup:
    """One primary bookmark plus the unassigned bookmarks matching it."""

    id: int
    primary: Bookmark
    duplicates: tuple[DuplicateMatch, ...]
    group_score: float
    group_type: GroupType
    confidence: float


def find_duplicate_groups(
    bookmarks: Sequence[Bookmark],
    *,
    threshold: float = DUPLICATE_THRESHOLD_DEFAULT,
    deadline: Deadline | None = None,
) -> list[DuplicateGroup]:
    """Group bookmarks greedily in input order.

    Each unassigned bookmark claims every still-unassigned match scoring at
    least ``threshold``. Assignments are never revisited, so bookmarks that are
    only transitively similar can end up in different groups.
    """
    groups: list[DuplicateGroup] = []
    assigned: set[int] = set()

    for bookmark in bookmarks:
        if deadline_expired(deadline):
            logger.warning(
                "Duplicate grouping stopped at deadline",
                extra={"groups": len(groups), "assigned": len(assigned)},
            )
            break
        if bookmark.id in assigned:
            continue

        duplicates: list[DuplicateMatch] = []
        for match in find_similar_bookmarks(bookmark, bookmarks, threshold=threshold):
            if match.candidate.id in assigned:
                continue
            duplicates.append(match)
            assigned.add(match.candidate.id)

        if not duplicates:
            continue

        assigned.add(bookmark.id)
        groups.append(
            DuplicateGroup(
                id=len(groups) + 1,
                primary=bookmark,
                duplicates=tuple(duplicates),
                group_score=sum(match.overall_score for match in duplicates)
                / len(duplicates),
                group_type=determine_group_type(duplicates),
                confidence=sum(match.confidence for match in duplicates)
                / len(duplicates),
            ),
        )

    logger.info(
        "Found %d duplicate groups across %d bookmarks",
        len(groups),
        len(bookmarks),
    )
    return groups


def determine_group_type(duplicates: Sequence[DuplicateMatch]) -> GroupType:
    """Classify a group by how many members are exact or near duplicates."""
    exact_count = sum(1 for match in duplicates if match.is_exact_like)
    if exact_count == len(duplicates):
        return "exact_duplicates"
    if exact_count > 0:
        return "mixed_duplicates"
    return "similar_content"
