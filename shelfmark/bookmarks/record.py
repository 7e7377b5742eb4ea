"""Immutable bookmark record consumed by similarity and clustering."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class Bookmark:
    """Read-only bookmark fields supplied in full by the caller."""

    id: int
    url: str
    title: str = ""
    description: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    created_at: datetime = field(
        default_factory=lambda: datetime.fromtimestamp(0, tz=UTC),
    )

    @property
    def description_text(self) -> str:
        """Return description with ``None`` folded to an empty string."""
        return self.description or ""

    @property
    def sorted_tags(self) -> tuple[str, ...]:
        """Return tag names in deterministic order."""
        return tuple(sorted(self.tags))


def month_key(value: datetime) -> str:
    """Return the ``YYYY-MM`` bucket used for creation-time histograms."""
    return value.strftime("%Y-%m")
