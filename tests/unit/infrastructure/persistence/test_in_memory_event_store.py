"""Unit tests for InMemoryEventStore."""

import pytest

from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from daycounter.infrastructure.persistence.in_memory.event_store import InMemoryEventStore
from tests.helpers import make_event


@pytest.mark.asyncio
async def test_operations_before_initialize_fail():
    store = InMemoryEventStore()
    with pytest.raises(StoreUnavailableError):
        await store.load_all()


@pytest.mark.asyncio
async def test_unavailable_store_cannot_initialize():
    with pytest.raises(StoreUnavailableError):
        await InMemoryEventStore(unavailable=True).initialize()


@pytest.mark.asyncio
async def test_insert_get_remove():
    store = InMemoryEventStore()
    await store.initialize()
    event = make_event()

    await store.insert(event)
    assert await store.get(event.id) == event

    with pytest.raises(DuplicateKeyError):
        await store.insert(event)

    await store.remove(event.id)
    await store.remove(event.id)
    with pytest.raises(RecordNotFoundError):
        await store.get(event.id)


@pytest.mark.asyncio
async def test_update_upserts():
    store = InMemoryEventStore()
    await store.initialize()
    event = make_event()

    await store.update(event)
    await store.update(event.with_changes("Renamed", event.date))

    assert [e.name for e in await store.load_all()] == ["Renamed"]


@pytest.mark.asyncio
async def test_secondary_lookups():
    store = InMemoryEventStore()
    await store.initialize()
    await store.insert(make_event("Boda", "2027-05-01", "e1"))
    await store.insert(make_event("Boda", "2027-06-01", "e2"))
    await store.insert(make_event("Viaje", "2027-05-01", "e3"))

    assert {e.id for e in await store.find_by_name("Boda")} == {"e1", "e2"}
    assert {e.id for e in await store.find_by_date("2027-05-01")} == {"e1", "e3"}


@pytest.mark.asyncio
async def test_data_survives_close_and_reinitialize():
    store = InMemoryEventStore()
    await store.initialize()
    await store.insert(make_event())
    await store.close()

    await store.initialize()

    assert len(await store.load_all()) == 1
