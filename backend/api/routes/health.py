"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import get_settings

from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    document_store: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Pings both stores; returns 503 when either is unreachable.
    """
    database = "connected"
    try:
        container.db.table("users").select("id").limit(1).execute()
    except Exception:
        logger.warning("Relational store not reachable", exc_info=True)
        database = "unavailable"

    document_store = "connected"
    try:
        container.documents.command("ping")
    except Exception:
        logger.warning("Document store not reachable", exc_info=True)
        document_store = "unavailable"

    ready = database == "connected" and document_store == "connected"
    if not ready:
        response.status_code = 503
    return ReadinessResponse(
        status="ready" if ready else "degraded",
        database=database,
        document_store=document_store,
    )
