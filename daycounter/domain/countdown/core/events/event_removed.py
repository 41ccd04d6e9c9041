"""EventRemoved domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class EventRemoved(DomainEvent):
    """Domain event: an event was deleted from the store and the live list."""

    event_id: str

    @classmethod
    def create(cls, event_id: str) -> "EventRemoved":
        return cls(
            occurrence_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            event_id=event_id,
        )
