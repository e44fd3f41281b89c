"""
Dinosaur Facts Backend — Health Check Route
============================================

What:  Health check endpoint for monitoring and container probes.
How:   Runs `SELECT 1` through the shared record store.
Who:   Docker health checks, load balancers, uptime monitors.

Status levels:
    - healthy:   Record store reachable (HTTP 200)
    - unhealthy: Record store unreachable or not configured (HTTP 503)
"""

import time
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dinofacts import __version__
from dinofacts.dependencies import get_record_store
from dinofacts.schemas.fact import HealthResponse
from dinofacts.services.store_base import RecordStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Record store unavailable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    store: Optional[RecordStore] = Depends(get_record_store),
) -> JSONResponse:
    if store is None:
        db_status = "not_configured"
    elif await store.health_check():
        db_status = "connected"
    else:
        db_status = "disconnected"

    overall = "healthy" if db_status == "connected" else "unhealthy"
    body = HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
