"""Score a target bookmark against candidates and rank likely duplicates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shelfmark.runtime import deadline_expired
from shelfmark.similarity import text_similarity, url_similarity

from .match_contract import DuplicateMatch, classify_match, overall_similarity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shelfmark.bookmarks import Bookmark
    from shelfmark.runtime import Deadline

DUPLICATE_THRESHOLD_DEFAULT = 0.7

logger = logging.getLogger(__name__)


def compare_bookmarks(target: Bookmark, candidate: Bookmark) -> DuplicateMatch:
    """Score one candidate against the target across URL, title and description."""
    url_score = url_similarity(target.url, candidate.url)
    title_score = text_similarity(target.title, candidate.title)
    content_score = _content_similarity(target, candidate)
    overall = overall_similarity(
        url_similarity=url_score,
        title_similarity=title_score,
        content_similarity=content_score,
    )
    match_type, confidence = classify_match(
        url_similarity=url_score,
        title_similarity=title_score,
        overall_score=overall,
    )
    return DuplicateMatch(
        candidate=candidate,
        url_similarity=url_score,
        title_similarity=title_score,
        content_similarity=content_score,
        overall_score=overall,
        match_type=match_type,
        confidence=confidence,
    )


def find_similar_bookmarks(
    target: Bookmark,
    candidates: Iterable[Bookmark],
    *,
    threshold: float = DUPLICATE_THRESHOLD_DEFAULT,
    deadline: Deadline | None = None,
) -> list[DuplicateMatch]:
    """Return matches scoring at least ``threshold``, best first.

    Candidates sharing the target's id are skipped. When the deadline
    expires the matches scored so far are returned.
    """
    matches: list[DuplicateMatch] = []
    compared = 0
    for candidate in candidates:
        if deadline_expired(deadline):
            logger.warning(
                "Duplicate scan for bookmark %s stopped at deadline",
                target.id,
                extra={"compared": compared},
            )
            break
        if candidate.id == target.id:
            continue
        compared += 1
        match = compare_bookmarks(target, candidate)
        if match.overall_score >= threshold:
            matches.append(match)

    matches.sort(key=lambda match: match.overall_score, reverse=True)
    logger.debug(
        "Scored %d candidates for bookmark %s, %d above %.2f",
        compared,
        target.id,
        len(matches),
        threshold,
    )
    return matches


def _content_similarity(target: Bookmark, candidate: Bookmark) -> float:
    target_description = target.description_text
    candidate_description = candidate.description_text
    if not target_description and not candidate_description:
        return 0.0
    return text_similarity(target_description, candidate_description)
