"""URL normalization route."""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, Field

from shelfmark.normalize import (
    canonicalize_url,
    extract_domain,
    is_short_url,
    url_variations,
)

router = APIRouter(prefix="/urls", tags=["urls"])


class UrlNormalizeRequest(BaseModel):
    """Request payload for URL normalization."""

    url: str = Field(min_length=1)


class UrlNormalizeResponse(BaseModel):
    """Canonical form, lookup variations and shortener flag for one URL."""

    url: str
    canonical_url: str
    domain: str
    variations: list[str]
    is_short_url: bool


@router.post("/normalize", response_model=UrlNormalizeResponse)
async def normalize_url(payload: UrlNormalizeRequest) -> UrlNormalizeResponse:
    """Return canonical URL details; unparsable input falls back to lowercase."""
    return UrlNormalizeResponse(
        url=payload.url,
        canonical_url=canonicalize_url(payload.url),
        domain=extract_domain(payload.url),
        variations=url_variations(payload.url),
        is_short_url=is_short_url(payload.url),
    )
