"""SQLite persistence implementation."""

from daycounter.infrastructure.persistence.sqlite.event_store import SQLiteEventStore

__all__ = ["SQLiteEventStore"]
