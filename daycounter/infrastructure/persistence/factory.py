"""Event Store Factory for Persistence Layer.

Environment-based store selection.
Strategy:
- Default: sqlite (durable, local file, no server needed)
- EVENT_STORE_BACKEND=inmemory: fast, isolated, lost on exit
- EVENT_STORE_BACKEND=mongodb: MongoDB server (requires MONGODB_URI)

Usage:
    from daycounter.infrastructure.persistence.factory import create_event_store

    store = create_event_store()  # New instance for the configured backend
"""

import logging
import os

from daycounter.domain.shared.ports.event_store import IEventStore
from daycounter.infrastructure.config import get_sqlite_path, get_store_backend
from daycounter.infrastructure.persistence.in_memory.event_store import InMemoryEventStore
from daycounter.infrastructure.persistence.sqlite.event_store import SQLiteEventStore

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("sqlite", "inmemory", "mongodb")


def create_event_store() -> IEventStore:
    """Create event store based on EVENT_STORE_BACKEND env var.

    Returns:
        IEventStore: Uninitialized store instance (call initialize())

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI
    """
    mode = get_store_backend()

    if mode == "mongodb":
        if not os.getenv("MONGODB_URI"):
            raise ValueError(
                "EVENT_STORE_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use EVENT_STORE_BACKEND=sqlite"
            )

        from daycounter.infrastructure.persistence.mongodb.event_store import MongoEventStore

        logger.info("Using MongoDB event store")
        return MongoEventStore()

    if mode == "inmemory":
        logger.info("Using in-memory event store")
        return InMemoryEventStore()

    if mode == "sqlite":
        path = get_sqlite_path()
        logger.info("Using SQLite event store", extra={"db_path": str(path)})
        return SQLiteEventStore(path)

    raise ValueError(
        f"Unknown EVENT_STORE_BACKEND '{mode}'. "
        f"Supported: {', '.join(SUPPORTED_BACKENDS)}"
    )
