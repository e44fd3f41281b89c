"""
Dinosaur Facts Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (fake stores, SQLite engine,
       API client factory) so no test needs the hosted database.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── sample_facts:    Plain fact dicts as the store would return them
    ├── memory_store:    InMemoryRecordStore over sample_facts
    ├── failing_store:   AsyncMock store raising StoreError on every query
    ├── sqlite_engine:   AsyncEngine over an on-disk SQLite facts table
    └── make_client:     Factory for HTTPX AsyncClients bound to a fresh app
"""

import os

# Override settings for testing BEFORE any application import
os.environ["DATABASE_URL"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from dinofacts.exceptions import StoreError
from dinofacts.services.store_base import RecordStore


SAMPLE_FACTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Tyrannosaurus", "period": "Cretaceous", "diet": "carnivore"},
    {"id": 2, "name": "Triceratops", "period": "Cretaceous", "diet": "herbivore"},
    {"id": 3, "name": "Stegosaurus", "period": "Jurassic", "diet": "herbivore"},
    {"id": 4, "name": "Velociraptor", "period": "Cretaceous", "diet": "carnivore"},
    {"id": 5, "name": "Species_X", "period": "Unknown", "diet": "unknown"},
]


class InMemoryRecordStore(RecordStore):
    """
    RecordStore over a dict of lists, matching like the hosted database does.

    Matching is a plain case-insensitive `in`, so it doubles as the
    reference behavior the SQL store is checked against.
    """

    def __init__(self, collections: Dict[str, List[Dict[str, Any]]], healthy: bool = True):
        self.collections = collections
        self.healthy = healthy

    async def fetch_all(self, collection: str):
        return [dict(r) for r in self._rows(collection)]

    async def fetch_matching(self, collection: str, field: str, value: str):
        needle = value.lower()
        return [
            dict(r) for r in self._rows(collection)
            if r.get(field) is not None and needle in str(r[field]).lower()
        ]

    async def health_check(self) -> bool:
        return self.healthy

    def _rows(self, collection: str):
        if collection not in self.collections:
            raise StoreError(message=f'relation "{collection}" does not exist')
        return self.collections[collection]


@pytest.fixture
def sample_facts():
    return [dict(f) for f in SAMPLE_FACTS]


@pytest.fixture
def store_factory():
    """Builds InMemoryRecordStores over custom collections."""
    return InMemoryRecordStore


@pytest.fixture
def memory_store(sample_facts):
    return InMemoryRecordStore({"dinosaur_facts": sample_facts})


@pytest.fixture
def failing_store():
    """
    A store whose every query fails with a message that must stay server-side.
    """
    error = StoreError(message="password authentication failed for user \"postgres\"")
    store = AsyncMock(spec=RecordStore)
    store.fetch_all = AsyncMock(side_effect=error)
    store.fetch_matching = AsyncMock(side_effect=error)
    store.health_check = AsyncMock(return_value=False)
    return store


@pytest_asyncio.fixture
async def sqlite_engine(tmp_path):
    """
    AsyncEngine over a file-backed SQLite database seeded with SAMPLE_FACTS.

    What:    Stands in for the hosted PostgreSQL database.
    Why:     Exercises the SQL SqlRecordStore actually emits (LIKE escaping,
             SELECT * passthrough) without a network service.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'facts.db'}")
    async with engine.begin() as conn:
        await conn.execute(text(
            "CREATE TABLE dinosaur_facts ("
            "id INTEGER PRIMARY KEY, name TEXT, period TEXT, diet TEXT)"
        ))
        await conn.execute(
            text(
                "INSERT INTO dinosaur_facts (id, name, period, diet) "
                "VALUES (:id, :name, :period, :diet)"
            ),
            SAMPLE_FACTS,
        )
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def make_client():
    """
    Factory for HTTPX AsyncClients talking to a fresh FastAPI app.

    The lifespan does not run under ASGITransport, so no engine is built;
    the store and service are injected through dependency overrides.

    Usage:
        async def test_list(make_client, memory_store):
            client = await make_client(store=memory_store)
            response = await client.get("/api/dinosaurs")
    """
    from dinofacts.dependencies import get_fact_service, get_record_store
    from dinofacts.main import create_app
    from dinofacts.services.fact_service import FactService

    clients = []

    async def _make(store=None, configure=True):
        app = create_app()
        if configure:
            service = FactService(store) if store is not None else None
            app.dependency_overrides[get_record_store] = lambda: store
            if service is not None:
                app.dependency_overrides[get_fact_service] = lambda: service
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
