"""Base domain event.

Domain events are immutable records of facts that already happened to an
Event entity (added, updated, removed).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class DomainEvent:
    """Base class for domain events.

    Attributes:
        occurrence_id: Unique identifier of this occurrence.
        occurred_at: When it happened (timezone-aware).

    Raises:
        ValueError: If occurred_at is not timezone-aware.
    """

    occurrence_id: UUID
    occurred_at: datetime

    def __post_init__(self) -> None:
        if self.occurred_at.tzinfo is None:
            raise ValueError("occurred_at must be timezone-aware")
