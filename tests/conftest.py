"""Shared test fixtures.

Unit tests run against the in-memory store and a pinned clock; nothing
here touches the network or the user's home directory.
"""

import pytest
import pytest_asyncio

from daycounter.application.countdown.edit_session import EditSession
from daycounter.application.countdown.event_repository import EventRepository
from daycounter.infrastructure.clock import FixedClock
from daycounter.infrastructure.events.in_memory_bus import InMemoryEventBus
from tests.helpers import NOW, ControllableEventStore, RecordingView


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest_asyncio.fixture
async def store() -> ControllableEventStore:
    store = ControllableEventStore()
    await store.initialize()
    return store


@pytest.fixture
def repository(store, clock, event_bus) -> EventRepository:
    return EventRepository(store, clock, max_events=250, event_bus=event_bus)


@pytest.fixture
def session(repository) -> EditSession:
    return EditSession(repository)


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
