"""Unit tests for MongoEventStore with a mocked motor client."""

from typing import Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import ServerSelectionTimeoutError, WriteError

from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
    WriteFailedError,
)
from daycounter.infrastructure.persistence.mongodb.event_store import MongoEventStore
from tests.helpers import NOW, make_event


def _collection() -> MagicMock:
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def collections() -> Dict[str, MagicMock]:
    return {"events": _collection(), "schema_versions": _collection()}


@pytest.fixture
def client(collections):
    client = MagicMock()
    client.admin.command = AsyncMock(return_value={"ok": 1})
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections[name]
    client.__getitem__.return_value = db
    return client


@pytest.fixture
def mongo_store(client):
    return MongoEventStore(client=client, database_name="daycounter_test")


def _with_documents(collection: MagicMock, documents) -> None:
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=documents)
    collection.find.return_value = cursor


class TestInitialize:
    @pytest.mark.asyncio
    async def test_creates_indexes_and_schema_marker(self, mongo_store, collections, client):
        await mongo_store.initialize()

        client.__getitem__.assert_called_with("daycounter_test")
        index_names = {
            call.kwargs["name"] for call in collections["events"].create_index.call_args_list
        }
        assert index_names == {"idx_name", "idx_date"}
        collections["schema_versions"].replace_one.assert_awaited_once_with(
            {"_id": "events"}, {"_id": "events", "version": 1}, upsert=True
        )

    @pytest.mark.asyncio
    async def test_existing_marker_is_kept(self, mongo_store, collections):
        collections["schema_versions"].find_one.return_value = {"_id": "events", "version": 1}

        await mongo_store.initialize()

        collections["schema_versions"].replace_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unsupported_version(self, mongo_store, collections):
        collections["schema_versions"].find_one.return_value = {"_id": "events", "version": 2}

        with pytest.raises(StoreUnavailableError):
            await mongo_store.initialize()

    @pytest.mark.asyncio
    async def test_unreachable_server(self, mongo_store, client):
        client.admin.command.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(StoreUnavailableError):
            await mongo_store.initialize()

    @pytest.mark.asyncio
    async def test_operations_require_initialize(self, mongo_store):
        with pytest.raises(StoreUnavailableError):
            await mongo_store.load_all()


class TestOperations:
    @pytest.mark.asyncio
    async def test_insert_maps_id(self, mongo_store, collections):
        await mongo_store.initialize()

        await mongo_store.insert(make_event())

        document = collections["events"].insert_one.await_args.args[0]
        assert document["_id"] == "evt-1"
        assert "id" not in document
        assert document["created_at"] == NOW.isoformat()

    @pytest.mark.asyncio
    async def test_duplicate_insert(self, mongo_store, collections):
        await mongo_store.initialize()
        collections["events"].insert_one.side_effect = MongoDuplicateKeyError("dup")

        with pytest.raises(DuplicateKeyError):
            await mongo_store.insert(make_event())

    @pytest.mark.asyncio
    async def test_write_error_becomes_write_failed(self, mongo_store, collections):
        await mongo_store.initialize()
        collections["events"].replace_one.side_effect = WriteError("disk full")

        with pytest.raises(WriteFailedError):
            await mongo_store.update(make_event())

    @pytest.mark.asyncio
    async def test_update_upserts(self, mongo_store, collections):
        await mongo_store.initialize()

        await mongo_store.update(make_event())

        args = collections["events"].replace_one.await_args
        assert args.args[0] == {"_id": "evt-1"}
        assert args.kwargs["upsert"] is True

    @pytest.mark.asyncio
    async def test_remove(self, mongo_store, collections):
        await mongo_store.initialize()

        await mongo_store.remove("evt-1")

        collections["events"].delete_one.assert_awaited_once_with({"_id": "evt-1"})

    @pytest.mark.asyncio
    async def test_get_missing(self, mongo_store):
        await mongo_store.initialize()

        with pytest.raises(RecordNotFoundError):
            await mongo_store.get("missing")

    @pytest.mark.asyncio
    async def test_get_maps_document(self, mongo_store, collections):
        await mongo_store.initialize()
        collections["events"].find_one.return_value = {
            "_id": "evt-1",
            "name": "Vacaciones",
            "date": "2026-12-20",
            "created_at": NOW.isoformat(),
        }

        assert await mongo_store.get("evt-1") == make_event()

    @pytest.mark.asyncio
    async def test_load_all_skips_corrupt_documents(self, mongo_store, collections):
        await mongo_store.initialize()
        _with_documents(
            collections["events"],
            [
                mongo_store.to_document(make_event()),
                {"_id": "bad", "name": "No date"},
            ],
        )

        assert await mongo_store.load_all() == [make_event()]

    @pytest.mark.asyncio
    async def test_find_by_date_filters(self, mongo_store, collections):
        await mongo_store.initialize()
        _with_documents(collections["events"], [])

        await mongo_store.find_by_date("2026-12-20")

        collections["events"].find.assert_called_once_with({"date": "2026-12-20"})


def test_requires_uri_without_client(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)

    with pytest.raises(ValueError, match="MONGODB_URI"):
        MongoEventStore()
