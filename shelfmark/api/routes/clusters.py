"""Clustering and cluster-potential routes."""

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
from shelfmark.cluster import (
    BookmarkCluster,
    ClusteringConfig,
    ClusteringMethod,
    ClusteringResult,
    ClusterPotential,
    ClusterSuggestion,
    analyze_cluster_potential,
    cluster_bookmarks,
    resolve_method,
    suggest_clusters,
)
from shelfmark.cluster.config import DEFAULT_SIMILARITY_THRESHOLD
from shelfmark.cluster.potential import SuggestionKind
from shelfmark.config import AppSettings

router = APIRouter(prefix="/clusters", tags=["clusters"])


class ClusterRequest(BaseModel):
    """Request payload for clustering; unset knobs fall back to settings."""

    bookmarks: list[BookmarkPayload] = Field(default_factory=list)
    method: str | None = None
    min_cluster_size: int | None = Field(default=None, ge=1)
    max_clusters: int | None = Field(default=None, ge=1)
    similarity_threshold: float | None = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _reject_repeated_ids(self) -> Self:
        ensure_unique_ids(self.bookmarks, "bookmarks")
        return self

    def to_config(self, settings: AppSettings) -> ClusteringConfig:
        """Merge request overrides onto settings defaults."""
        method = (
            settings.cluster_method
            if self.method is None
            else resolve_method(self.method)
        )
        threshold = (
            DEFAULT_SIMILARITY_THRESHOLD
            if self.similarity_threshold is None
            else self.similarity_threshold
        )
        return ClusteringConfig(
            method=method,
            min_cluster_size=self.min_cluster_size or settings.min_cluster_size,
            max_clusters=self.max_clusters or settings.max_clusters,
            similarity_threshold=threshold,
        )


class ClusterAnalyzeRequest(BaseModel):
    """Request payload for cluster-potential analysis."""

    bookmarks: list[BookmarkPayload] = Field(default_factory=list)

    @model_validator(mode="after")
    def _reject_repeated_ids(self) -> Self:
        ensure_unique_ids(self.bookmarks, "bookmarks")
        return self


class ClusterThemeResponse(BaseModel):
    """Keyword theme inside a cluster."""

    name: str
    keywords: list[str]
    strength: float
    coverage: float


class ClusterQualityResponse(BaseModel):
    """Quality proxies for one cluster."""

    cohesion: float
    separation: float
    silhouette: float
    purity: float


class ClusterResponse(BaseModel):
    """One named cluster with its members."""

    id: str
    name: str
    description: str
    bookmarks: list[BookmarkReference]
    bookmark_count: int
    common_tags: list[str]
    themes: list[ClusterThemeResponse]
    confidence: float
    quality: ClusterQualityResponse

    @classmethod
    def from_cluster(cls, cluster: BookmarkCluster) -> ClusterResponse:
        """Build response model from an engine cluster."""
        return cls(
            id=cluster.id,
            name=cluster.name,
            description=cluster.description,
            bookmarks=[
                BookmarkReference.from_bookmark(member) for member in cluster.members
            ],
            bookmark_count=cluster.size,
            common_tags=list(cluster.common_tags),
            themes=[
                ClusterThemeResponse(
                    name=theme.name,
                    keywords=list(theme.keywords),
                    strength=theme.strength,
                    coverage=theme.coverage,
                )
                for theme in cluster.themes
            ],
            confidence=cluster.confidence,
            quality=ClusterQualityResponse(
                cohesion=cluster.quality.cohesion,
                separation=cluster.quality.separation,
                silhouette=cluster.quality.silhouette,
                purity=cluster.quality.purity,
            ),
        )


class ClusteringSummaryResponse(BaseModel):
    """Collection-wide histograms and insights."""

    top_domains: dict[str, int]
    top_tags: dict[str, int]
    time_distribution: dict[str, int]
    insights: list[str]


class ClusteringResponse(BaseModel):
    """Response payload for one clustering run."""

    clusters: list[ClusterResponse]
    unclustered: list[BookmarkReference]
    quality_score: float
    summary: ClusteringSummaryResponse
    method: ClusteringMethod
    total_bookmarks: int
    cluster_count: int
    processing_seconds: float
    timed_out: bool

    @classmethod
    def from_result(cls, result: ClusteringResult) -> ClusteringResponse:
        """Build response model from an engine result."""
        return cls(
            clusters=[ClusterResponse.from_cluster(item) for item in result.clusters],
            unclustered=[
                BookmarkReference.from_bookmark(item) for item in result.unclustered
            ],
            quality_score=result.quality_score,
            summary=ClusteringSummaryResponse(
                top_domains=result.summary.top_domains,
                top_tags=result.summary.top_tags,
                time_distribution=result.summary.time_distribution,
                insights=list(result.summary.insights),
            ),
            method=result.method,
            total_bookmarks=result.total_bookmarks,
            cluster_count=result.cluster_count,
            processing_seconds=result.processing_seconds,
            timed_out=result.timed_out,
        )


class ClusterPotentialResponse(BaseModel):
    """Clusterability statistics and recommended method."""

    total_bookmarks: int
    unique_domains: int
    unique_tags: int
    domain_diversity: float
    tag_coverage: float
    average_tags_per_bookmark: float
    large_domain_groups: int
    clustering_score: float
    recommended_method: ClusteringMethod
    estimated_clusters: int

    @classmethod
    def from_potential(cls, potential: ClusterPotential) -> ClusterPotentialResponse:
        """Build response model from engine potential analysis."""
        return cls(
            total_bookmarks=potential.total_bookmarks,
            unique_domains=potential.unique_domains,
            unique_tags=potential.unique_tags,
            domain_diversity=potential.domain_diversity,
            tag_coverage=potential.tag_coverage,
            average_tags_per_bookmark=potential.average_tags_per_bookmark,
            large_domain_groups=potential.large_domain_groups,
            clustering_score=potential.clustering_score,
            recommended_method=potential.recommended_method,
            estimated_clusters=potential.estimated_clusters,
        )


class ClusterSuggestionResponse(BaseModel):
    """Preview of a cluster that simple grouping would produce."""

    kind: SuggestionKind
    name: str
    description: str
    bookmark_count: int
    confidence: float
    preview: list[BookmarkReference]

    @classmethod
    def from_suggestion(
        cls,
        suggestion: ClusterSuggestion,
    ) -> ClusterSuggestionResponse:
        """Build response model from an engine suggestion."""
        return cls(
            kind=suggestion.kind,
            name=suggestion.name,
            description=suggestion.description,
            bookmark_count=suggestion.bookmark_count,
            confidence=suggestion.confidence,
            preview=[
                BookmarkReference.from_bookmark(item) for item in suggestion.preview
            ],
        )


class ClusterAnalysisResponse(BaseModel):
    """Response payload for cluster-potential analysis."""

    analysis: ClusterPotentialResponse
    suggestions: list[ClusterSuggestionResponse]


@router.post("", response_model=ClusteringResponse)
def create_clusters(
    payload: ClusterRequest,
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> ClusteringResponse:
    """Cluster the supplied collection with request or settings configuration."""
    result = cluster_bookmarks(
        to_bookmarks(payload.bookmarks),
        payload.to_config(settings),
        deadline=request_deadline(settings),
    )
    return ClusteringResponse.from_result(result)


@router.post("/analyze", response_model=ClusterAnalysisResponse)
def analyze_clusters(payload: ClusterAnalyzeRequest) -> ClusterAnalysisResponse:
    """Report how clusterable the collection is and preview simple groupings."""
    bookmarks = to_bookmarks(payload.bookmarks)
    return ClusterAnalysisResponse(
        analysis=ClusterPotentialResponse.from_potential(
            analyze_cluster_potential(bookmarks),
        ),
        suggestions=[
            ClusterSuggestionResponse.from_suggestion(suggestion)
            for suggestion in suggest_clusters(bookmarks)
        ],
    )
