"""
Dinosaur Facts Backend — FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes logging setup, middleware, routes, static files and the
       record store lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn dinofacts.main:app`) or `python -m dinofacts`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → GZip           │
    │                                                     │
    │  Routes:                                            │
    │   GET /                     static index.html       │
    │   GET /api/dinosaurs        FactService.list_all    │
    │   GET /api/dinosaurs/{name} FactService.search      │
    │   GET /health               store probe             │
    │   /*                        StaticFiles fallthrough │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → settings check → engine/store/service on app.state
    Shutdown: dispose engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from dinofacts import __version__
from dinofacts.config import settings
from dinofacts.database import create_store_engine, dispose_engine
from dinofacts.exceptions import NotFoundError, StoreError
from dinofacts.middleware.logging import RequestLoggingMiddleware
from dinofacts.middleware.request_id import RequestIDMiddleware, request_id_var
from dinofacts.routes import dinosaurs, health, pages
from dinofacts.schemas.fact import ErrorResponse, StoreErrorResponse
from dinofacts.services.fact_service import FactService
from dinofacts.services.sql_store import SqlRecordStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build the record store on startup and release it on shutdown.

    The store and service are attached to `app.state` exactly once and never
    replaced. A missing DATABASE_URL is logged but does not stop the server:
    the static client and /health keep working and the API answers 500.
    """
    setup_logging()
    logger.info("Dinosaur Facts backend starting up...")

    engine = None
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")
    else:
        engine = create_store_engine(settings)
        store = SqlRecordStore(engine)
        app.state.record_store = store
        app.state.fact_service = FactService(store, collection=settings.facts_table)
        logger.info("Record store ready (table: %s)", settings.facts_table)

    logger.info("Server is running on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Dinosaur Facts backend shutting down...")
    await dispose_engine(engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    The fact routes map store failures themselves; these handlers cover
    errors raised elsewhere (missing store, missing index page, bugs).
    Responses never include driver messages or stack traces.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error="not_found", message=exc.message, request_id=rid
            ).model_dump(),
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Record store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=StoreErrorResponse(error="Record store unavailable").model_dump(),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500, full traceback logged server-side only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_server_error",
                message="An unexpected error occurred.",
                request_id=rid,
            ).model_dump(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance. The record store is NOT
    built here; the lifespan builds it when the server starts.
    """
    app = FastAPI(
        title="Dinosaur Facts API",
        description="Read-only access to a hosted table of dinosaur facts.",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → routes
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(pages.router)
    app.include_router(dinosaurs.router)
    app.include_router(health.router)

    # Registered last: only paths no route claimed reach the static directory
    app.mount(
        "/",
        StaticFiles(directory=settings.static_dir, check_dir=False),
        name="static",
    )

    return app


def run() -> None:
    """Start uvicorn on HOST:PORT (console script `dinofacts`)."""
    import uvicorn

    uvicorn.run(
        "dinofacts.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


app = create_app()
