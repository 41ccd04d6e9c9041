"""EventUpdated domain event."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List
from uuid import uuid4

from .base import DomainEvent


@dataclass(frozen=True)
class EventUpdated(DomainEvent):
    """Domain event: an event's name and/or date were committed.

    Attributes:
        event_id: ID of the edited event.
        updated_fields: Fields whose value actually changed.
    """

    event_id: str
    updated_fields: List[str] = field(default_factory=list)

    @classmethod
    def create(cls, event_id: str, updated_fields: List[str]) -> "EventUpdated":
        return cls(
            occurrence_id=uuid4(),
            occurred_at=datetime.now(timezone.utc),
            event_id=event_id,
            updated_fields=list(updated_fields),
        )
