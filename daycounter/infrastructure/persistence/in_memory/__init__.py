"""In-memory persistence implementations."""

from daycounter.infrastructure.persistence.in_memory.event_store import InMemoryEventStore

__all__ = ["InMemoryEventStore"]
