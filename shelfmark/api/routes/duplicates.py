"""Duplicate detection routes for single targets and whole collections."""

from __future__ import annotations

from typing import Annotated, Self

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, model_validator

from shelfmark.api.dependencies import get_settings, request_deadline
from shelfmark.api.payloads import (
    BookmarkPayload,
    BookmarkReference,
    ensure_unique_ids,
    to_bookmarks,
)
from shelfmark.config import AppSettings
from shelfmark.dedupe import (
    DomainDuplicateInfo,
    DuplicateGroup,
    DuplicateMatch,
    DuplicateStatistics,
    GroupType,
    MatchType,
    SimilarityBreakdown,
    detailed_recommendations,
    duplicate_recommendations,
    duplicate_statistics,
    find_duplicate_groups,
    find_similar_bookmarks,
    find_variant_matches,
    similarity_breakdown,
)
from shelfmark.runtime import deadline_expired

router = APIRouter(prefix="/duplicates", tags=["duplicates"])


class DuplicateCheckRequest(BaseModel):
    """Request payload for checking one bookmark against candidates."""

    target: BookmarkPayload
    candidates: list[BookmarkPayload] = Field(default_factory=list)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _reject_repeated_candidate_ids(self) -> Self:
        ensure_unique_ids(self.candidates, "candidates")
        return self


class DuplicateGroupsRequest(BaseModel):
    """Request payload for grouping a whole collection."""

    bookmarks: list[BookmarkPayload] = Field(default_factory=list)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _reject_repeated_ids(self) -> Self:
        ensure_unique_ids(self.bookmarks, "bookmarks")
        return self


class DuplicateMatchResponse(BaseModel):
    """One scored candidate in duplicate responses."""

    bookmark: BookmarkReference
    url_similarity: float
    title_similarity: float
    content_similarity: float
    overall_score: float
    match_type: MatchType
    confidence: float

    @classmethod
    def from_match(cls, match: DuplicateMatch) -> DuplicateMatchResponse:
        """Build response model from an engine match."""
        return cls(
            bookmark=BookmarkReference.from_bookmark(match.candidate),
            url_similarity=match.url_similarity,
            title_similarity=match.title_similarity,
            content_similarity=match.content_similarity,
            overall_score=match.overall_score,
            match_type=match.match_type,
            confidence=match.confidence,
        )


class SimilarityBreakdownResponse(BaseModel):
    """Mean per-signal similarities across returned matches."""

    average_url_similarity: float
    average_title_similarity: float
    average_content_similarity: float
    total_matches: int

    @classmethod
    def from_breakdown(
        cls,
        breakdown: SimilarityBreakdown,
    ) -> SimilarityBreakdownResponse:
        """Build response model from an engine breakdown."""
        return cls(
            average_url_similarity=breakdown.average_url_similarity,
            average_title_similarity=breakdown.average_title_similarity,
            average_content_similarity=breakdown.average_content_similarity,
            total_matches=breakdown.total_matches,
        )


class DuplicateCheckResponse(BaseModel):
    """Response payload for single-target duplicate checks."""

    matches: list[DuplicateMatchResponse]
    total_matches: int
    exact_matches: int
    recommendations: list[str]
    detailed_recommendations: list[str]
    similarity_breakdown: SimilarityBreakdownResponse
    variant_matches: list[BookmarkReference]
    timed_out: bool


class DuplicateGroupResponse(BaseModel):
    """One primary bookmark with the duplicates grouped under it."""

    id: int
    primary: BookmarkReference
    duplicates: list[DuplicateMatchResponse]
    group_score: float
    group_type: GroupType
    confidence: float

    @classmethod
    def from_group(cls, group: DuplicateGroup) -> DuplicateGroupResponse:
        """Build response model from an engine group."""
        return cls(
            id=group.id,
            primary=BookmarkReference.from_bookmark(group.primary),
            duplicates=[
                DuplicateMatchResponse.from_match(match) for match in group.duplicates
            ],
            group_score=group.group_score,
            group_type=group.group_type,
            confidence=group.confidence,
        )


class DomainDuplicateResponse(BaseModel):
    """Duplicate concentration for one domain."""

    domain: str
    count: int
    duplicate_rate: float

    @classmethod
    def from_info(cls, info: DomainDuplicateInfo) -> DomainDuplicateResponse:
        """Build response model from engine domain info."""
        return cls(
            domain=info.domain,
            count=info.count,
            duplicate_rate=info.duplicate_rate,
        )


class DuplicateStatisticsResponse(BaseModel):
    """Collection-wide duplicate counts."""

    total_bookmarks: int
    duplicate_count: int
    duplicate_rate: float
    exact_duplicates: int
    similar_duplicates: int
    top_domains: list[DomainDuplicateResponse]

    @classmethod
    def from_statistics(
        cls,
        statistics: DuplicateStatistics,
    ) -> DuplicateStatisticsResponse:
        """Build response model from engine statistics."""
        return cls(
            total_bookmarks=statistics.total_bookmarks,
            duplicate_count=statistics.duplicate_count,
            duplicate_rate=statistics.duplicate_rate,
            exact_duplicates=statistics.exact_duplicates,
            similar_duplicates=statistics.similar_duplicates,
            top_domains=[
                DomainDuplicateResponse.from_info(info)
                for info in statistics.top_domains
            ],
        )


class DuplicateGroupsResponse(BaseModel):
    """Response payload for collection-wide grouping."""

    groups: list[DuplicateGroupResponse]
    statistics: DuplicateStatisticsResponse
    timed_out: bool


@router.post("/check", response_model=DuplicateCheckResponse)
def check_duplicates(
    payload: DuplicateCheckRequest,
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> DuplicateCheckResponse:
    """Score candidates against the target and return matches above threshold."""
    deadline = request_deadline(settings)
    target = payload.target.to_bookmark()
    candidates = to_bookmarks(payload.candidates)
    threshold = (
        settings.duplicate_threshold if payload.threshold is None else payload.threshold
    )

    matches = find_similar_bookmarks(
        target,
        candidates,
        threshold=threshold,
        deadline=deadline,
    )
    timed_out = deadline_expired(deadline)
    return DuplicateCheckResponse(
        matches=[DuplicateMatchResponse.from_match(match) for match in matches],
        total_matches=len(matches),
        exact_matches=sum(1 for match in matches if match.match_type == "exact"),
        recommendations=duplicate_recommendations(matches),
        detailed_recommendations=detailed_recommendations(matches),
        similarity_breakdown=SimilarityBreakdownResponse.from_breakdown(
            similarity_breakdown(matches),
        ),
        variant_matches=[
            BookmarkReference.from_bookmark(bookmark)
            for bookmark in find_variant_matches(target.url, candidates)
            if bookmark.id != target.id
        ],
        timed_out=timed_out,
    )


@router.post("/groups", response_model=DuplicateGroupsResponse)
def group_duplicates(
    payload: DuplicateGroupsRequest,
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> DuplicateGroupsResponse:
    """Greedily group a collection into primary bookmarks and their duplicates."""
    deadline = request_deadline(settings)
    bookmarks = to_bookmarks(payload.bookmarks)
    threshold = (
        settings.duplicate_threshold if payload.threshold is None else payload.threshold
    )

    groups = find_duplicate_groups(bookmarks, threshold=threshold, deadline=deadline)
    timed_out = deadline_expired(deadline)
    return DuplicateGroupsResponse(
        groups=[DuplicateGroupResponse.from_group(group) for group in groups],
        statistics=DuplicateStatisticsResponse.from_statistics(
            duplicate_statistics(bookmarks, groups),
        ),
        timed_out=timed_out,
    )
