"""Tests for the /health endpoint."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, cast

from fastapi.testclient import TestClient

from shelfmark.api.app import create_app

if TYPE_CHECKING:
    from shelfmark.config import AppSettings


def test_get_health_returns_ok(api_settings: AppSettings) -> None:
    """Ensure GET /health returns 200 and deterministic schema."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        response = client.get("/health")

    if response.status_code != HTTPStatus.OK:
        raise AssertionError
    data = cast("dict[str, object]", response.json())
    if data["status"] != "ok" or data["service"] != "shelfmark":
        raise AssertionError
    if "timestamp" not in data:
        raise AssertionError


def test_request_id_header_is_echoed(api_settings: AppSettings) -> None:
    """Ensure a caller-supplied X-Request-ID comes back on the response."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        response = client.get("/health", headers={"X-Request-ID": "trace-42"})

    if response.headers.get("X-Request-ID") != "trace-42":
        raise AssertionError


def test_request_id_is_generated_when_absent(api_settings: AppSettings) -> None:
    """Ensure responses always carry a correlation id."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        response = client.get("/health")

    generated = response.headers.get("X-Request-ID")
    if generated is None or len(generated) != 32:  # noqa: PLR2004
        raise AssertionError


def test_health_openapi_schema_is_explicit(api_settings: AppSettings) -> None:
    """Ensure /health response schema is explicit in OpenAPI components."""
    app = create_app(api_settings)
    with TestClient(app) as client:
        response = client.get("/openapi.json")

    if response.status_code != HTTPStatus.OK:
        raise AssertionError
    schema = cast("dict[str, dict[str, object]]", response.json())
    schemas = cast("dict[str, object]", schema["components"]["schemas"])
    if "HealthResponse" not in schemas:
        raise AssertionError
