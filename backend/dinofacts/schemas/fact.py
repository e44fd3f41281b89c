"""
Dinosaur Facts Backend — Pydantic Response Schemas
===================================================

What:  Pydantic models describing the API contract.
Why:   OpenAPI documentation for the two fact endpoints and the health check.
How:   Routes return JSONResponse directly (records are passed through
       untouched), so these models document responses rather than
       re-validating them.

Design Decision:
    DinosaurFact declares only `name`. Every other column of the hosted
    table is opaque to this service and is allowed through as an extra
    field, so adding a column upstream never breaks the API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DinosaurFact(BaseModel):
    """
    What:  One stored fact. Only `name` is interpreted (for searching).
    Who:   Items of the arrays returned by GET /api/dinosaurs[/{name}].
    """
    model_config = ConfigDict(extra="allow")

    # NULL names are listed but never matched by a search
    name: Optional[str] = Field(
        default=None,
        description="Dinosaur name; the only field used for filtering",
    )


class StoreErrorResponse(BaseModel):
    """Body of a 500 caused by a record store failure. Never contains driver detail."""
    error: str = Field(description="Generic error description")


class NotFoundMessage(BaseModel):
    """Body of a 404 when a name search matches nothing."""
    message: str = Field(description="Human-readable explanation")


class ErrorResponse(BaseModel):
    """
    What:  Error body produced by the global exception handlers.
    Why:   Consistent structure for failures outside the fact routes.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and record store status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(
        description="Record store connectivity: connected, disconnected, not_configured"
    )
    uptime_seconds: float = Field(description="Seconds since service started")
