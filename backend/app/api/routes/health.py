"""Health Probes — liveness (process up) and readiness (database reachable).

Invariants:
    - GET /api/v1/health/ answers 200 without touching the database
    - GET /api/v1/health/ready answers 503 until init_db has run and SELECT 1 succeeds
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.infrastructure import database

SERVICE_NAME = "certstudy-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    # db_manager is assigned during lifespan startup, so look it up per call
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
