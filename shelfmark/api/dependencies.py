"""Request-scoped dependencies resolved from application state."""

from __future__ import annotations

from typing import cast

from fastapi import Request

from shelfmark.config import AppSettings
from shelfmark.runtime import Deadline


def get_settings(request: Request) -> AppSettings:
    """Load app settings from FastAPI state with explicit failure mode."""
    state_obj = cast("object", request.app.state)
    settings_obj = getattr(state_obj, "settings", None)
    if not isinstance(settings_obj, AppSettings):
        message = "Missing app settings: app.state.settings."
        raise TypeError(message)
    return settings_obj


def request_deadline(settings: AppSettings) -> Deadline | None:
    """Start the per-request time budget, or None when no timeout is set."""
    return Deadline.from_timeout(settings.request_timeout_seconds)
