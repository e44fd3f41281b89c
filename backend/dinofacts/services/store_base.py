"""
Dinosaur Facts Backend — Abstract Record Store Interface
=========================================================

What:  Abstract base class for the external record store.
Why:   The query handler only needs two query shapes and a probe. Keeping
       them behind an interface lets tests use an in-memory store and keeps
       the database client library out of the service layer.
How:   Concrete implementations inherit from RecordStore. SqlRecordStore
       (async SQLAlchemy) is the production implementation.
Who:   Called by FactService and the health route.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]


class RecordStore(ABC):
    """
    Read-only access to collections (tables) of records.

    Contract:
        - Records are returned as plain dicts, every field included
        - Order is whatever the store returns; nothing is sorted here
        - Every backend-specific failure is raised as StoreError
        - Implementations keep no per-request state and may be shared
          by concurrent requests
    """

    @abstractmethod
    async def fetch_all(self, collection: str) -> List[Record]:
        """
        Return every record of `collection`, unfiltered.

        Raises:
            StoreError: When the store cannot answer the query.
        """
        ...

    @abstractmethod
    async def fetch_matching(self, collection: str, field: str, value: str) -> List[Record]:
        """
        Return records of `collection` whose `field` contains `value`.

        Matching is case-insensitive and literal: `value` is a substring,
        not a pattern, so an empty `value` matches every record.

        Raises:
            StoreError: When the store cannot answer the query.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Lightweight connectivity probe for the health endpoint.

        Returns: True if the store answered, False otherwise. Never raises.
        """
        ...
