"""Event entity - one tracked date."""

from dataclasses import dataclass, replace
from datetime import date, datetime

from daycounter.domain.countdown.calculation.date_math import parse_event_date
from daycounter.domain.countdown.core.exceptions import InvalidDateError


@dataclass(frozen=True)
class Event:
    """
    Entity: a user-tracked (name, date) pair.

    Invariants:
    - id is non-empty and never changes
    - name is non-empty after trimming
    - date is a valid ISO calendar date string (YYYY-MM-DD)
    - created_at is timezone-aware and never changes

    The raw ``date`` string is kept verbatim: search matches against it
    and it is what the store persists.

    Identity: Defined by ``id``
    Mutability: Immutable; edits produce a new instance via with_changes()
    """

    id: str
    name: str
    date: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Event id cannot be empty")

        if not self.name or not self.name.strip():
            raise ValueError("Event name cannot be empty")

        try:
            parse_event_date(self.date)
        except InvalidDateError as e:
            raise ValueError(f"Invalid event date: {self.date!r}") from e

        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")

    @property
    def target_date(self) -> date:
        return parse_event_date(self.date)

    def with_changes(self, name: str, date: str) -> "Event":
        """Return a copy with a new name/date, keeping id and created_at."""
        return replace(self, name=name, date=date)
