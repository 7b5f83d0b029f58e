"""
Health check endpoints.

Provides the welcome and health endpoints used for monitoring.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class WelcomeResponse(BaseModel):
    """Root endpoint response model."""

    message: str
    status: str
    timestamp: datetime


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    uptime: float
    timestamp: datetime


@router.get("/", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    return WelcomeResponse(
        message=f"Welcome to {get_settings().app_name}",
        status="success",
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running, with seconds since startup.
    """
    started_at = getattr(request.app.state, "started_at", None) or time.monotonic()
    return HealthResponse(
        status="healthy",
        uptime=round(time.monotonic() - started_at, 3),
        timestamp=datetime.now(timezone.utc),
    )
