"""In-memory event store implementation.

Provides an in-memory implementation of the IEventStore port.
Uses a dictionary keyed by event id, with no external dependencies.
"""

import logging
from typing import Dict, List, Optional

from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


class InMemoryEventStore:
    """
    In-memory implementation of IEventStore port.

    Events are immutable, so they are stored and returned without copying.
    The name/date "indexes" are derived on demand from the primary map.

    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> store = InMemoryEventStore()
        >>> await store.initialize()
        >>> await store.insert(event)
        >>> events = await store.load_all()
    """

    def __init__(self, unavailable: bool = False) -> None:
        """
        Initialize store with empty storage.

        Args:
            unavailable: Simulate an engine that cannot be opened
        """
        self._storage: Optional[Dict[str, Event]] = None
        self._unavailable = unavailable

    async def initialize(self) -> None:
        if self._unavailable:
            raise StoreUnavailableError("In-memory store disabled")
        if self._storage is None:
            self._storage = {}
            logger.debug("InMemoryEventStore initialized")

    def _require(self) -> Dict[str, Event]:
        if self._storage is None:
            raise StoreUnavailableError("Store not initialized")
        return self._storage

    async def insert(self, event: Event) -> None:
        storage = self._require()
        if event.id in storage:
            raise DuplicateKeyError(event.id)
        storage[event.id] = event

    async def update(self, event: Event) -> None:
        self._require()[event.id] = event

    async def remove(self, event_id: str) -> None:
        self._require().pop(event_id, None)

    async def get(self, event_id: str) -> Event:
        event = self._require().get(event_id)
        if event is None:
            raise RecordNotFoundError(event_id)
        return event

    async def load_all(self) -> List[Event]:
        return list(self._require().values())

    async def close(self) -> None:
        """Nothing to release; stored data is kept for re-initialization."""

    # ============================================================
    # Secondary lookups (non-unique)
    # ============================================================

    async def find_by_name(self, name: str) -> List[Event]:
        return [e for e in self._require().values() if e.name == name]

    async def find_by_date(self, date: str) -> List[Event]:
        return [e for e in self._require().values() if e.date == date]

    def clear(self) -> None:
        """
        Clear all events from storage.

        Note: Utility method for testing - not part of IEventStore port
        """
        if self._storage is not None:
            self._storage.clear()
