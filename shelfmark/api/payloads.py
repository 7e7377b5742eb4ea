"""Bookmark request and response models shared by the API routes."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from shelfmark.bookmarks import Bookmark


class BookmarkPayload(BaseModel):
    """Caller-supplied bookmark; naive timestamps are read as UTC."""

    id: int
    url: str = Field(min_length=1)
    title: str = ""
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None

    def to_bookmark(self) -> Bookmark:
        """Convert payload into the immutable engine record."""
        created_at = self.created_at or datetime.fromtimestamp(0, tz=UTC)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)
        return Bookmark(
            id=self.id,
            url=self.url,
            title=self.title,
            description=self.description,
            tags=frozenset(tag.strip() for tag in self.tags if tag.strip()),
            created_at=created_at,
        )


class BookmarkReference(BaseModel):
    """Compact bookmark identity echoed back in responses."""

    id: int
    url: str
    title: str

    @classmethod
    def from_bookmark(cls, bookmark: Bookmark) -> BookmarkReference:
        """Build reference from an engine record."""
        return cls(id=bookmark.id, url=bookmark.url, title=bookmark.title)


def to_bookmarks(payloads: list[BookmarkPayload]) -> list[Bookmark]:
    """Convert a payload list preserving order."""
    return [payload.to_bookmark() for payload in payloads]


def ensure_unique_ids(payloads: list[BookmarkPayload], field_name: str) -> None:
    """Raise ValueError naming the first id repeated within ``payloads``."""
    seen: set[int] = set()
    for payload in payloads:
        if payload.id in seen:
            message = f"Duplicate bookmark id {payload.id} in {field_name}."
            raise ValueError(message)
        seen.add(payload.id)
