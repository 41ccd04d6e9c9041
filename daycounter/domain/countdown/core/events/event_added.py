"""EventAdded domain event."""

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class EventAdded(DomainEvent):
    """Domain event: a new event has been persisted and is live.

    Examples:
        >>> added = EventAdded.create(event_id="a1", name="Trip", date="2026-12-01")
        >>> added.name
        'Trip'
    """

    event_id: str
    name: str
    date: str

    @classmethod
    def create(cls, event_id: str, name: str, date: str) -> "EventAdded":
        return cls(
            occurrence_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            event_id=event_id,
            name=name,
            date=date,
        )
