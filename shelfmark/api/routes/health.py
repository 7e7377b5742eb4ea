"""Liveness endpoint for process supervisors."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

SERVICE_NAME = "shelfmark"


class HealthResponse(BaseModel):
    """Stable response model for the health endpoint."""

    status: Literal["ok"]
    service: str
    timestamp: datetime


@router.get("/health", tags=["monitoring"], response_model=HealthResponse)
async def get_health() -> HealthResponse:
    """Return liveness status and current timestamp."""
    return HealthResponse(
        status="ok",
        service=SERVICE_NAME,
        timestamp=datetime.now(tz=UTC),
    )
