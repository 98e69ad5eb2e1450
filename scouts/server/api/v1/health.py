"""
Health Check Endpoints.

This module provides the operational endpoints (health, readiness, version,
metrics) used for monitoring and deployment verification.
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scouts.core.database.session import get_session
from scouts.core.logging_config import get_logger
from scouts.core.monitoring import render_metrics

from ...core import constant
from ...core.config import settings

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
    operation_id="health",
)
async def health_check():
    """
    Health check endpoint.

    Returns a simple status indicator to confirm the server is running and reachable.
    """
    return {"status": "ok"}


@router.get(
    "/ready",
    summary="Readiness Check",
    description="Check whether the server can serve requests, including database connectivity.",
    response_description="Readiness object with per-dependency checks.",
    responses={503: {"description": "A dependency is unavailable"}},
    operation_id="ready",
)
async def readiness_check(session: AsyncSession = Depends(get_session)):
    """
    Readiness check endpoint.

    Runs ``SELECT 1`` against the database. Answers 503 with status
    ``degraded`` when the database cannot be reached.
    """
    try:
        await session.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "checks": {"database": "unavailable"}},
        )
    return {"status": "ready", "checks": {"database": "ok"}}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
    operation_id="version",
)
async def version():
    """
    Get API version.

    Returns the current semantic version of the API and supported schema version.
    """
    return {"version": constant.VERSION, "schema_version": constant.SCHEMA_VERSION}


@router.get(
    "/metrics",
    summary="Prometheus Metrics",
    description="Expose application metrics in the Prometheus text exposition format.",
    response_description="Metrics in Prometheus text format.",
    responses={404: {"description": "Metrics are disabled"}},
    operation_id="metrics",
)
async def metrics() -> Response:
    """
    Prometheus scrape endpoint.

    Disabled (404) when ``SCOUTS_METRICS_ENABLED`` is false.
    """
    if not settings.metrics_enabled:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)
