"""
Dinosaur Facts Backend — SQL Record Store Tests
================================================

What:  Tests for SqlRecordStore against a real SQL engine (SQLite/aiosqlite).
Why:   The substring filter is generated SQL; only executing it shows that
       LIKE wildcards in user input are escaped and case is ignored.

What we test:
    ✅ fetch_all passes every column of every row through
    ✅ fetch_matching is case-insensitive and literal
    ✅ Missing tables and unreachable databases raise StoreError
    ✅ health_check reports connectivity without raising
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from dinofacts.exceptions import StoreError
from dinofacts.services.sql_store import SqlRecordStore


def _names(records):
    return sorted(r["name"] for r in records)


class TestSqlRecordStoreFetchAll:

    @pytest.mark.asyncio
    async def test_returns_every_row_with_all_columns(self, sqlite_engine, sample_facts):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_all("dinosaur_facts")

        assert sorted(records, key=lambda r: r["id"]) == sample_facts

    @pytest.mark.asyncio
    async def test_missing_table_raises_store_error(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        with pytest.raises(StoreError) as exc_info:
            await store.fetch_all("fossils")

        assert exc_info.value.context["collection"] == "fossils"
        assert "fossils" in exc_info.value.message


class TestSqlRecordStoreFetchMatching:

    @pytest.mark.asyncio
    async def test_case_insensitive_substring(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_matching("dinosaur_facts", "name", "TRI")

        assert _names(records) == ["Triceratops"]

    @pytest.mark.asyncio
    async def test_multiple_matches(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_matching("dinosaur_facts", "name", "saurus")

        assert _names(records) == ["Stegosaurus", "Tyrannosaurus"]

    @pytest.mark.asyncio
    async def test_empty_value_matches_every_row(self, sqlite_engine, sample_facts):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_matching("dinosaur_facts", "name", "")

        assert _names(records) == _names(sample_facts)

    @pytest.mark.asyncio
    async def test_underscore_is_literal(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_matching("dinosaur_facts", "name", "_")

        assert _names(records) == ["Species_X"]

    @pytest.mark.asyncio
    async def test_percent_is_literal(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        records = await store.fetch_matching("dinosaur_facts", "name", "%")

        assert records == []

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        assert await store.fetch_matching("dinosaur_facts", "name", "zzz") == []


class TestSqlRecordStoreUnreachable:

    @pytest.mark.asyncio
    async def test_unreachable_database(self, tmp_path):
        engine = create_async_engine(
            f"sqlite+aiosqlite:///{tmp_path / 'missing-dir' / 'facts.db'}"
        )
        store = SqlRecordStore(engine)
        try:
            with pytest.raises(StoreError):
                await store.fetch_all("dinosaur_facts")
            with pytest.raises(StoreError):
                await store.fetch_matching("dinosaur_facts", "name", "rex")
            assert await store.health_check() is False
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_health_check_connected(self, sqlite_engine):
        store = SqlRecordStore(sqlite_engine)

        assert await store.health_check() is True
