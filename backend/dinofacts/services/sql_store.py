"""
Dinosaur Facts Backend — SQL Record Store
==========================================

What:  RecordStore implementation over an async SQLAlchemy engine.
Why:   The facts live in a hosted PostgreSQL database; SQLAlchemy Core
       gives us parameterized queries without mapping the table, whose
       columns we do not own.
How:   Builds `SELECT * FROM <table> [WHERE lower(field) LIKE lower(:value)]`
       with lightweight table()/column() constructs and returns row mappings
       as dicts. Driver and network errors are wrapped in StoreError.
Who:   Constructed once in the application lifespan; shared by all requests.

Why no ORM model:
    The table schema belongs to the database service. Selecting `*` passes
    every column through, so upstream schema changes need no code change.
"""

import logging
from typing import List

from sqlalchemy import Select, column, literal_column, select, table, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from dinofacts.exceptions import StoreError
from dinofacts.services.store_base import Record, RecordStore

logger = logging.getLogger(__name__)


def _table(collection: str):
    """Accepts `table` or `schema.table`."""
    if "." in collection:
        schema, name = collection.rsplit(".", 1)
        return table(name, schema=schema)
    return table(collection)


class SqlRecordStore(RecordStore):
    """
    Read-only record store backed by an AsyncEngine.

    The engine (and its pool) is the only state held, and it is never
    mutated after construction. Each query borrows a pooled connection for
    its duration; nothing is cached between calls.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def fetch_all(self, collection: str) -> List[Record]:
        stmt = select(literal_column("*")).select_from(_table(collection))
        return await self._fetch(stmt, collection)

    async def fetch_matching(self, collection: str, field: str, value: str) -> List[Record]:
        # autoescape: '%' and '_' in user input are literal characters
        stmt = (
            select(literal_column("*"))
            .select_from(_table(collection))
            .where(column(field).icontains(value, autoescape=True))
        )
        return await self._fetch(stmt, collection)

    async def health_check(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("Record store health check failed: %s", str(e))
            return False

    async def _fetch(self, stmt: Select, collection: str) -> List[Record]:
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(stmt)
                rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as e:
            # OSError covers refused connections and DNS failures raised
            # by the driver before SQLAlchemy can wrap them
            raise StoreError(
                message=str(e),
                context={"collection": collection, "error_type": type(e).__name__},
            ) from e

        logger.debug("Fetched %d records from %s", len(rows), collection)
        return [dict(row) for row in rows]
