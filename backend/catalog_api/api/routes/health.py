"""Health & Readiness Probes: plain-text root check plus liveness/readiness JSON.

Invariants:
    - GET / always returns a plain string if the process is up
    - GET {prefix}/health/ always returns 200 if the process is up (liveness)
    - GET {prefix}/health/ready returns 503 if the database is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from catalog_api.infrastructure import database

logger = logging.getLogger(__name__)
root_router = APIRouter(tags=["health"])
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/", response_class=PlainTextResponse)
async def root():
    return "Catalog API is running"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "catalog-api"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe, includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
