"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, override

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import PlainTextResponse, Response

from shelfmark.api.routes.clusters import router as clusters_router
from shelfmark.api.routes.duplicates import router as duplicates_router
from shelfmark.api.routes.health import router as health_router
from shelfmark.api.routes.urls import router as urls_router
from shelfmark.config import load_settings
from shelfmark.config.logging import correlation_scope, init_logging

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from starlette.datastructures import Headers

    from shelfmark.config import AppSettings

CORRELATION_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


class AllowlistCORSMiddleware(CORSMiddleware):
    """CORS middleware that emits no CORS headers for blocked preflight origins."""

    @override
    def preflight_response(self, request_headers: Headers) -> Response:
        """Reject non-allowlisted preflight requests without CORS headers."""
        origin = request_headers.get("origin")
        if origin is not None and not self.is_allowed_origin(origin=origin):
            return PlainTextResponse("Disallowed CORS origin", status_code=400)
        return super().preflight_response(request_headers)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure a new FastAPI application instance."""
    resolved_settings = settings or load_settings()
    init_logging(resolved_settings.log_level)

    app = FastAPI(
        title="Shelfmark",
        description="Bookmark duplicate detection and clustering",
        version="0.1.0",
    )
    app.state.settings = resolved_settings

    _configure_cors(app=app, allow_origins=resolved_settings.cors_allow_origins)
    app.middleware("http")(_bind_correlation_id)
    app.include_router(health_router)
    app.include_router(duplicates_router)
    app.include_router(urls_router)
    app.include_router(clusters_router)

    logger.info(
        "Shelfmark app created",
        extra={
            "cluster_method": resolved_settings.cluster_method,
            "request_timeout_seconds": resolved_settings.request_timeout_seconds,
        },
    )
    return app


async def _bind_correlation_id(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag log lines for one request with the caller's or a generated id."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as value:
        response = await call_next(request)
    response.headers[CORRELATION_HEADER] = value
    return response


def _configure_cors(*, app: FastAPI, allow_origins: tuple[str, ...]) -> None:
    """Attach default-deny CORS policy with explicit allowlisted origins."""
    if not allow_origins:
        return

    app.add_middleware(
        AllowlistCORSMiddleware,
        allow_origins=list(allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=False,
    )
