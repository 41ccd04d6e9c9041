"""Factory for creating and re-validating Event entities.

The factory is the only path from raw user input to an Event. It applies
the user-facing validation rules (required fields, valid date, not in the
past) and raises domain errors, whereas Event.__post_init__ only guards
structural invariants.
"""

from datetime import date, datetime
from typing import Tuple

from daycounter.domain.countdown.calculation.date_math import days_until, parse_event_date
from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import EmptyFieldError, PastDateError
from daycounter.domain.countdown.core.value_objects.event_id import EventId


class EventFactory:
    """Factory for creating Event entities with proper initialization."""

    @staticmethod
    def validate_input(name: str, date_str: str, today: date) -> Tuple[str, str]:
        """
        Validate user-entered name and date.

        Args:
            name: Raw name as typed (will be trimmed)
            date_str: Raw ISO date as typed
            today: Current calendar date

        Returns:
            Tuple of (trimmed name, normalized ISO date)

        Raises:
            EmptyFieldError: If name (after trim) or date is empty
            InvalidDateError: If date is not a valid calendar date
            PastDateError: If date is before today
        """
        clean_name = (name or "").strip()
        clean_date = (date_str or "").strip()

        if not clean_name:
            raise EmptyFieldError("name")
        if not clean_date:
            raise EmptyFieldError("date")

        target = parse_event_date(clean_date)
        if days_until(target, today) < 0:
            raise PastDateError(clean_date)

        return clean_name, target.isoformat()

    @staticmethod
    def create(name: str, date_str: str, now: datetime) -> Event:
        """
        Create a new Event from user input.

        Args:
            name: Raw event name
            date_str: Raw ISO date
            now: Current timezone-aware time, becomes created_at

        Returns:
            New Event with a freshly generated id

        Raises:
            EmptyFieldError, InvalidDateError, PastDateError

        Example:
            >>> from datetime import timezone
            >>> now = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
            >>> event = EventFactory.create("  Vacaciones ", "2026-12-20", now)
            >>> event.name
            'Vacaciones'
        """
        clean_name, clean_date = EventFactory.validate_input(name, date_str, now.date())

        return Event(
            id=str(EventId.generate()),
            name=clean_name,
            date=clean_date,
            created_at=now,
        )
