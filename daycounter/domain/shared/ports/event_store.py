"""Event store port (interface).

Defines the contract for durable event persistence.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.
"""

from typing import List, Protocol

from daycounter.domain.countdown.core.entities.event import Event

# Single durable collection, versioned schema
COLLECTION_NAME = "events"
SCHEMA_VERSION = 1


class IEventStore(Protocol):
    """
    Interface for event persistence operations.

    Records are keyed by ``Event.id``. Implementations keep non-unique
    secondary indexes on ``name`` and ``date``. Every operation is a single
    atomic transaction: it either completes or leaves the store unchanged,
    and raises a PersistenceError subclass on failure.

    Implementations:
    - InMemoryEventStore (tests, transient sessions)
    - SQLiteEventStore (default, local file)
    - MongoEventStore (MongoDB via motor)

    Example usage (application layer):
        >>> class EventRepository:
        ...     def __init__(self, store: IEventStore):
        ...         self._store = store
        ...
        ...     async def add(self, name: str, date: str) -> Event:
        ...         event = EventFactory.create(name, date, now)
        ...         await self._store.insert(event)
        ...         return event
    """

    async def initialize(self) -> None:
        """
        Open or create the store and establish the schema.

        Idempotent: calling it on an initialized store is a no-op.

        Raises:
            StoreUnavailableError: If the engine cannot be opened or holds
                an unsupported schema version
        """
        ...

    async def insert(self, event: Event) -> None:
        """
        Insert a new event.

        Raises:
            DuplicateKeyError: If a record with event.id already exists
            WriteFailedError: If the engine rejects the write
        """
        ...

    async def update(self, event: Event) -> None:
        """
        Upsert an event: create it if absent, otherwise overwrite all fields.

        Raises:
            WriteFailedError: If the engine rejects the write
        """
        ...

    async def remove(self, event_id: str) -> None:
        """
        Delete an event. Succeeds when event_id is absent.

        Raises:
            WriteFailedError: If the engine rejects the delete
        """
        ...

    async def get(self, event_id: str) -> Event:
        """
        Fetch a single event by id.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        ...

    async def load_all(self) -> List[Event]:
        """
        Return every stored event in unspecified order.

        Records that no longer satisfy Event invariants are skipped.
        """
        ...

    async def find_by_name(self, name: str) -> List[Event]:
        """Return events whose name equals ``name`` (secondary index)."""
        ...

    async def find_by_date(self, date: str) -> List[Event]:
        """Return events targeting ``date`` (secondary index)."""
        ...

    async def close(self) -> None:
        """Release engine resources."""
        ...
