"""
Dinosaur Facts Backend — Fact Service (Query Handler)
======================================================

What:  Turns a route invocation into one of two queries against the record
       store and reports the outcome as an explicit FactQueryResult.
Why:   Keeps the router free of store details and the store free of HTTP
       details. The router only maps a result to a status code.
How:   Each operation awaits the store once. A StoreError is logged and
       captured into the result instead of propagating.
Who:   Called by routes/dinosaurs.py through the get_fact_service dependency.

Outcome Mapping (performed by the router):
    list_all()          records        → 200
                        error          → 500
    search_by_name(n)   records (≥1)   → 200
                        no records     → 404  (normal outcome, not an error)
                        error          → 500

Design Decision:
    FactService is stateless apart from its injected store. No retries,
    caching or timeouts: every store failure is terminal for its request.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dinofacts.exceptions import StoreError
from dinofacts.services.store_base import Record, RecordStore

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "dinosaur_facts"
NAME_FIELD = "name"


@dataclass(frozen=True)
class FactQueryResult:
    """
    Outcome of a fact query: either records or a store error, never both.

    An empty `records` list with no error is a successful query that
    matched nothing.
    """
    records: List[Record] = field(default_factory=list)
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        return self.ok and not self.records


class FactService:
    """
    Read-only query handler for dinosaur facts.

    Responsibilities:
        - list_all(): every record, unfiltered, store order
        - search_by_name(): case-insensitive substring match on `name`
    """

    def __init__(self, store: RecordStore, collection: str = DEFAULT_COLLECTION):
        self.store = store
        self.collection = collection

    async def list_all(self) -> FactQueryResult:
        """Fetch every fact. No pagination or limit."""
        try:
            records = await self.store.fetch_all(self.collection)
        except StoreError as e:
            logger.error("Error fetching dinosaurs: %s", e.message)
            return FactQueryResult(error=e)

        logger.debug("Listed %d dinosaur facts", len(records))
        return FactQueryResult(records=records)

    async def search_by_name(self, name: str) -> FactQueryResult:
        """
        Fetch facts whose name contains `name`, ignoring case.

        Edge cases:
            - "" matches every record
            - "TRI" and "tri" match the same records
            - all matches are returned in one result
        """
        try:
            records = await self.store.fetch_matching(self.collection, NAME_FIELD, name)
        except StoreError as e:
            logger.error("Error fetching dinosaur: %s", e.message)
            return FactQueryResult(error=e)

        logger.debug("Search %r matched %d dinosaur facts", name, len(records))
        return FactQueryResult(records=records)
