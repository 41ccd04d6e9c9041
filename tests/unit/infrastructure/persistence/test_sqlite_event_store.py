"""Unit tests for SQLiteEventStore against a real database file."""

from datetime import datetime, timedelta, timezone

import aiosqlite
import pytest
import pytest_asyncio

from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from daycounter.infrastructure.persistence.sqlite.event_store import SQLiteEventStore
from tests.helpers import NOW, make_event


@pytest_asyncio.fixture
async def sqlite_store(tmp_path):
    store = SQLiteEventStore(tmp_path / "events.db")
    await store.initialize()
    yield store
    await store.close()


class TestInitialize:
    @pytest.mark.asyncio
    async def test_creates_schema_version_and_indexes(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "events.db"
        store = SQLiteEventStore(path)
        await store.initialize()
        await store.close()

        async with aiosqlite.connect(path) as db:
            async with db.execute("PRAGMA user_version") as cursor:
                assert (await cursor.fetchone())[0] == 1
            async with db.execute(
                "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = 'events'"
            ) as cursor:
                names = {row[0] for row in await cursor.fetchall()}

        assert {"idx_events_name", "idx_events_date"} <= names

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, sqlite_store):
        await sqlite_store.insert(make_event())
        await sqlite_store.initialize()

        assert len(await sqlite_store.load_all()) == 1

    @pytest.mark.asyncio
    async def test_unopenable_path_is_unavailable(self, tmp_path):
        with pytest.raises(StoreUnavailableError):
            await SQLiteEventStore(tmp_path).initialize()

    @pytest.mark.asyncio
    async def test_unsupported_schema_version(self, tmp_path):
        path = tmp_path / "events.db"
        async with aiosqlite.connect(path) as db:
            await db.execute("PRAGMA user_version = 7")
            await db.commit()

        with pytest.raises(StoreUnavailableError, match="version 7"):
            await SQLiteEventStore(path).initialize()

    @pytest.mark.asyncio
    async def test_operations_before_initialize_fail(self, tmp_path):
        with pytest.raises(StoreUnavailableError):
            await SQLiteEventStore(tmp_path / "events.db").load_all()


class TestOperations:
    @pytest.mark.asyncio
    async def test_insert_and_get_round_trip(self, sqlite_store):
        created = datetime(2026, 10, 19, 9, 30, tzinfo=timezone(timedelta(hours=2)))
        event = make_event(created_at=created)

        await sqlite_store.insert(event)

        loaded = await sqlite_store.get(event.id)
        assert loaded == event
        assert loaded.created_at.utcoffset() == timedelta(hours=2)

    @pytest.mark.asyncio
    async def test_duplicate_insert(self, sqlite_store):
        await sqlite_store.insert(make_event())

        with pytest.raises(DuplicateKeyError):
            await sqlite_store.insert(make_event(name="Other"))

        assert (await sqlite_store.get("evt-1")).name == "Vacaciones"

    @pytest.mark.asyncio
    async def test_update_is_upsert(self, sqlite_store):
        event = make_event()

        await sqlite_store.update(event)
        await sqlite_store.update(event.with_changes("Renamed", "2027-01-01"))

        events = await sqlite_store.load_all()
        assert [(e.name, e.date) for e in events] == [("Renamed", "2027-01-01")]

    @pytest.mark.asyncio
    async def test_remove_is_idempotent(self, sqlite_store):
        await sqlite_store.insert(make_event())

        await sqlite_store.remove("evt-1")
        await sqlite_store.remove("evt-1")

        with pytest.raises(RecordNotFoundError):
            await sqlite_store.get("evt-1")

    @pytest.mark.asyncio
    async def test_secondary_lookups(self, sqlite_store):
        await sqlite_store.insert(make_event("Boda", "2027-05-01", "e1"))
        await sqlite_store.insert(make_event("Boda", "2027-06-01", "e2"))
        await sqlite_store.insert(make_event("Viaje", "2027-05-01", "e3"))

        assert {e.id for e in await sqlite_store.find_by_name("Boda")} == {"e1", "e2"}
        assert {e.id for e in await sqlite_store.find_by_date("2027-05-01")} == {"e1", "e3"}

    @pytest.mark.asyncio
    async def test_data_survives_reopen(self, tmp_path):
        path = tmp_path / "events.db"
        store = SQLiteEventStore(path)
        await store.initialize()
        await store.insert(make_event(created_at=NOW))
        await store.close()

        reopened = SQLiteEventStore(path)
        await reopened.initialize()
        try:
            assert await reopened.load_all() == [make_event(created_at=NOW)]
        finally:
            await reopened.close()

    @pytest.mark.asyncio
    async def test_corrupt_rows_are_skipped(self, sqlite_store, caplog):
        await sqlite_store.insert(make_event())
        await sqlite_store.db.execute(
            "INSERT INTO events (id, name, date, created_at) VALUES (?, ?, ?, ?)",
            ("bad", "   ", "not-a-date", NOW.isoformat()),
        )
        await sqlite_store.db.commit()

        events = await sqlite_store.load_all()

        assert [e.id for e in events] == ["evt-1"]
        assert "Skipping corrupt stored event" in caplog.text
