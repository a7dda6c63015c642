"""
Health and readiness endpoints for operational visibility.

This module provides:
- /health: Liveness check (is the app running?)
- /ready: Readiness check (does the database answer?)
- /: API root with links

No authentication; intended for container health checks.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from core.dependencies import get_database
from repositories import Database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

API_VERSION = "1.0.0"


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class HealthResponse(BaseModel):
    """Response model for /health endpoint."""
    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class DependencyStatus(BaseModel):
    """Status of a single dependency."""
    name: str
    status: str  # "ok" or "unavailable"
    latency_ms: float | None = None
    message: str | None = None


class ReadyResponse(BaseModel):
    """Response model for /ready endpoint."""
    status: str  # "ready" or "not_ready"
    dependencies: List[DependencyStatus]
    timestamp: str


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness check",
    description="Returns immediately without checking dependencies."
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=API_VERSION, timestamp=_utc_timestamp())


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness check",
    description="Runs a trivial query against the database. Returns 503 if it fails."
)
async def readiness_check(response: Response, db: Database = Depends(get_database)) -> ReadyResponse:
    start = time.perf_counter()
    healthy = db.ping()
    latency_ms = round((time.perf_counter() - start) * 1000, 2)

    if healthy:
        db_status = DependencyStatus(
            name="database", status="ok", latency_ms=latency_ms, message="SQLite connection healthy"
        )
    else:
        logger.error("Database readiness check failed", extra={"db_path": db.db_path})
        db_status = DependencyStatus(
            name="database", status="unavailable", latency_ms=latency_ms, message="Query failed"
        )
        response.status_code = 503

    return ReadyResponse(
        status="ready" if healthy else "not_ready",
        dependencies=[db_status],
        timestamp=_utc_timestamp(),
    )


@router.get("/", summary="API root")
async def root() -> Dict[str, Any]:
    return {
        "service": "EMR Service API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
    }
