"""
Dinosaur Facts Backend — Database Engine Construction
======================================================

What:  Builds and disposes the async SQLAlchemy engine for the hosted database.
Why:   Keeps connection pool configuration in one place.
How:   create_store_engine() is called once by the application lifespan; the
       resulting engine is wrapped in a SqlRecordStore and injected into
       handlers. There is no module-level engine.
Who:   main.py (startup/shutdown) and tests that need a real engine.

Connection Pooling Strategy:
    pool_size=5:       Persistent connections for normal load
    max_overflow=5:    Temporary connections for spikes
    pool_pre_ping:     Validates connections before use (hosted databases
                       drop idle connections)
    pool_recycle=1800: Recycles connections before provider idle timeouts
"""

from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from dinofacts.config import Settings, settings as default_settings


def create_store_engine(config: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine for the facts database.

    Args:
        config: Settings to read from (defaults to the process settings).

    Raises:
        ValueError: When DATABASE_URL is empty.
        sqlalchemy.exc.ArgumentError: When the URL cannot be parsed.
    """
    config = config or default_settings
    if not config.store_configured:
        raise ValueError("DATABASE_URL is not set")

    connect_args: Dict[str, Any] = {}
    if config.db_disable_statement_cache:
        # asyncpg keyword; PgBouncer transaction mode rejects prepared statements
        connect_args["statement_cache_size"] = 0

    return create_async_engine(
        config.database_url,
        pool_size=config.db_pool_size,
        max_overflow=config.db_max_overflow,
        pool_pre_ping=config.db_pool_pre_ping,
        pool_recycle=1800,
        connect_args=connect_args,
        # Echo SQL only when debugging
        echo=config.log_level == "DEBUG",
    )


async def dispose_engine(engine: Optional[AsyncEngine]) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    if engine is not None:
        await engine.dispose()
