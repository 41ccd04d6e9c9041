"""Event repository - authoritative in-memory list of live events.

Orchestrates validation, capacity, persistence and the filtered view.

Mutate-after-success: every mutating operation awaits the store first
and only touches the in-memory list once the store call has succeeded.
The list is re-checked right before a persisted result is applied, so an
edit that completes after its event was deleted is discarded instead of
bringing the event back.
"""

import logging
from typing import List, Optional

from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.events import EventAdded, EventRemoved, EventUpdated
from daycounter.domain.countdown.core.events.base import DomainEvent
from daycounter.domain.countdown.core.exceptions import (
    CapacityExceededError,
    EventNotFoundError,
)
from daycounter.domain.countdown.core.factories.event_factory import EventFactory
from daycounter.domain.shared.ports.clock import IClock
from daycounter.domain.shared.ports.event_bus import IEventBus
from daycounter.domain.shared.ports.event_store import IEventStore
from daycounter.infrastructure.config import DEFAULT_MAX_EVENTS

logger = logging.getLogger(__name__)


class EventRepository:
    """
    In-memory owner of Event values during a session.

    State:
    - events: newest-created first (default order)
    - filtered_events: subset matching search_term, soonest date first
    - search_term: last term passed to filter(); mutations re-apply it
    - max_events: capacity enforced on add only

    Example:
        >>> repository = EventRepository(store, SystemClock())
        >>> await repository.load()
        >>> event = await repository.add("Vacaciones", "2026-12-20")
        >>> repository.filter("vac")
        [Event(id='...', name='Vacaciones', date='2026-12-20', ...)]
    """

    def __init__(
        self,
        store: IEventStore,
        clock: IClock,
        max_events: int = DEFAULT_MAX_EVENTS,
        event_bus: Optional[IEventBus] = None,
    ) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")

        self._store = store
        self._clock = clock
        self._event_bus = event_bus
        self.max_events = max_events

        self._events: List[Event] = []
        self._filtered: List[Event] = []
        self._search_term = ""
        # Adds whose store insert is still in flight; they hold a capacity slot
        self._pending_adds = 0

    # ============================================================
    # Read access
    # ============================================================

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    @property
    def filtered_events(self) -> List[Event]:
        return list(self._filtered)

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def total_count(self) -> int:
        return len(self._events)

    def contains(self, event_id: str) -> bool:
        return self._index_of(event_id) is not None

    def get(self, event_id: str) -> Event:
        """
        Return the live event with this id.

        Raises:
            EventNotFoundError: If no live event has this id
        """
        index = self._index_of(event_id)
        if index is None:
            raise EventNotFoundError(event_id)
        return self._events[index]

    def _index_of(self, event_id: str) -> Optional[int]:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None

    # ============================================================
    # Mutations
    # ============================================================

    async def add(self, name: str, date: str) -> Event:
        """
        Validate, persist and insert a new event at the front of the list.

        Flow:
        1. Trim name; reject empty name/date or unparsable date
        2. Reject dates before today
        3. Reject when live events plus in-flight adds reach max_events
        4. Build the Event (new id, created_at = now)
        5. Persist via store.insert; on failure nothing changes in memory
        6. Prepend, recompute filtered view, publish EventAdded

        Raises:
            EmptyFieldError, InvalidDateError, PastDateError,
            CapacityExceededError: Validation failures (store not touched)
            PersistenceError: Store rejected the insert
        """
        clean_name, clean_date = EventFactory.validate_input(name, date, self._clock.today())

        if len(self._events) + self._pending_adds >= self.max_events:
            raise CapacityExceededError(self.max_events)

        event = EventFactory.create(clean_name, clean_date, self._clock.now())

        self._pending_adds += 1
        try:
            await self._store.insert(event)
        finally:
            self._pending_adds -= 1

        self._events.insert(0, event)
        self._refilter()

        logger.info(
            "Event added",
            extra={"event_id": event.id, "date": event.date, "total": len(self._events)},
        )
        await self._publish(EventAdded.create(event.id, event.name, event.date))
        return event

    async def edit(self, event_id: str, new_name: str, new_date: str) -> Event:
        """
        Replace name/date of a live event, keeping id and created_at.

        Capacity is not checked: an edit never changes the population.

        Raises:
            EmptyFieldError, InvalidDateError, PastDateError: Validation failures
            EventNotFoundError: Event is not live, before or after persistence
            PersistenceError: Store rejected the update
        """
        clean_name, clean_date = EventFactory.validate_input(
            new_name, new_date, self._clock.today()
        )

        current = self.get(event_id)
        updated = current.with_changes(clean_name, clean_date)

        await self._store.update(updated)

        index = self._index_of(event_id)
        if index is None:
            # Deleted while the update was in flight; the upsert must not resurrect it.
            logger.warning(
                "Discarding edit of event deleted during persistence",
                extra={"event_id": event_id},
            )
            await self._store.remove(event_id)
            raise EventNotFoundError(event_id)

        previous = self._events[index]
        self._events[index] = updated
        self._refilter()

        updated_fields = [
            field
            for field in ("name", "date")
            if getattr(previous, field) != getattr(updated, field)
        ]
        logger.info(
            "Event updated",
            extra={"event_id": event_id, "updated_fields": updated_fields},
        )
        await self._publish(EventUpdated.create(event_id, updated_fields))
        return updated

    async def remove(self, event_id: str) -> None:
        """
        Delete an event from the store, then from the list.

        Unknown ids are a successful no-op.

        Raises:
            PersistenceError: Store rejected the delete (list unchanged)
        """
        await self._store.remove(event_id)

        index = self._index_of(event_id)
        if index is None:
            logger.debug("Remove of unknown event ignored", extra={"event_id": event_id})
            return

        del self._events[index]
        self._refilter()

        logger.info(
            "Event removed",
            extra={"event_id": event_id, "total": len(self._events)},
        )
        await self._publish(EventRemoved.create(event_id))

    # ============================================================
    # Views
    # ============================================================

    def filter(self, search_term: str) -> List[Event]:
        """
        Compute and store the filtered view.

        Matches case-insensitively on name, or literally on the raw date
        string. An empty term matches everything. The result is always
        ordered by date ascending (soonest first); ties keep list order.
        """
        term = search_term or ""
        self._search_term = term

        if not term:
            matches = list(self._events)
        else:
            needle = term.lower()
            matches = [
                event
                for event in self._events
                if needle in event.name.lower() or term in event.date
            ]

        self._filtered = sorted(matches, key=lambda event: event.target_date)
        return list(self._filtered)

    async def load(self) -> None:
        """
        Replace the list with the store contents.

        Raises:
            PersistenceError: Store could not be read (list unchanged)
        """
        events = await self._store.load_all()
        events.sort(key=lambda event: event.created_at, reverse=True)

        self._events = events
        self.filter("")

        logger.info("Events loaded", extra={"total": len(events)})

    def _refilter(self) -> None:
        self.filter(self._search_term)

    async def _publish(self, event: DomainEvent) -> None:
        if self._event_bus is not None:
            await self._event_bus.publish(event)
