"""MongoDB store implementations."""

from .base import MongoBaseRepository
from .event_store import MongoEventStore

__all__ = [
    "MongoBaseRepository",
    "MongoEventStore",
]
