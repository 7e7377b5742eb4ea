"""Shared pytest fixtures for bookmark collections and API settings."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

from shelfmark.bookmarks import Bookmark
from shelfmark.config import AppSettings

if TYPE_CHECKING:
    from collections.abc import Callable

FIXED_CREATED_AT = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


def _make_bookmark(
    bookmark_id: int,
    url: str,
    title: str = "",
    *,
    description: str | None = None,
    tags: tuple[str, ...] = (),
    created_at: datetime = FIXED_CREATED_AT,
) -> Bookmark:
    """Build a bookmark with deterministic defaults for tests."""
    return Bookmark(
        id=bookmark_id,
        url=url,
        title=title,
        description=description,
        tags=frozenset(tags),
        created_at=created_at,
    )


@pytest.fixture
def make_bookmark() -> Callable[..., Bookmark]:
    """Provide the deterministic bookmark builder."""
    return _make_bookmark


@pytest.fixture
def github_collection() -> list[Bookmark]:
    """Four GitHub repositories plus one unrelated page."""
    return [
        _make_bookmark(1, "https://github.com/python/cpython", "CPython"),
        _make_bookmark(2, "https://github.com/pallets/flask", "Flask"),
        _make_bookmark(3, "https://github.com/django/django", "Django"),
        _make_bookmark(4, "https://github.com/psf/requests", "Requests"),
        _make_bookmark(5, "https://example.org/about", "About Example"),
    ]


@pytest.fixture
def mixed_collection() -> list[Bookmark]:
    """Tagged bookmarks across several domains and months."""
    return [
        _make_bookmark(
            10,
            "https://github.com/tiangolo/fastapi",
            "FastAPI framework",
            tags=("python", "web"),
        ),
        _make_bookmark(
            11,
            "https://github.com/encode/starlette",
            "Starlette toolkit",
            tags=("python", "web"),
        ),
        _make_bookmark(
            12,
            "https://github.com/pydantic/pydantic",
            "Pydantic validation",
            tags=("python",),
        ),
        _make_bookmark(
            13,
            "https://docs.python.org/3/library/asyncio.html",
            "asyncio docs",
            tags=("python", "reference"),
            created_at=datetime(2024, 4, 2, tzinfo=UTC),
        ),
        _make_bookmark(
            14,
            "https://developer.mozilla.org/en-US/docs/Web/CSS",
            "CSS reference",
            tags=("css", "reference", "web"),
            created_at=datetime(2024, 4, 20, tzinfo=UTC),
        ),
        _make_bookmark(
            15,
            "https://developer.mozilla.org/en-US/docs/Web/HTML",
            "HTML reference",
            tags=("html", "reference", "web"),
            created_at=datetime(2024, 5, 1, tzinfo=UTC),
        ),
        _make_bookmark(
            16,
            "https://news.ycombinator.com/item?id=1",
            "Show HN",
            tags=("news",),
            created_at=datetime(2024, 5, 9, tzinfo=UTC),
        ),
    ]


@pytest.fixture
def api_settings() -> AppSettings:
    """Static settings for API tests without timeouts or CORS."""
    return AppSettings(
        log_level="INFO",
        bind="127.0.0.1",
        port=8080,
        duplicate_threshold=0.7,
        cluster_method="hybrid",
        min_cluster_size=3,
        max_clusters=20,
        request_timeout_seconds=None,
        cors_allow_origins=(),
    )
