"""Pure date arithmetic for countdowns.

All functions work on calendar dates. Times of day are dropped before any
comparison, so a countdown never depends on the hour it is computed at,
nor on DST transitions between the two dates.

None of these functions read the wall clock: callers pass ``today``
explicitly (see daycounter.infrastructure.clock).
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union

from daycounter.domain.countdown.core.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]


class CountdownStatus(Enum):
    """Where a target date sits relative to today."""

    PAST = "past"
    TODAY = "today"
    FUTURE = "future"


def parse_event_date(raw: str) -> date:
    """Parse an ISO calendar date (``YYYY-MM-DD``).

    Raises:
        InvalidDateError: If raw is not a valid calendar date.
    """
    try:
        return date.fromisoformat(raw.strip())
    except (ValueError, AttributeError) as e:
        raise InvalidDateError(str(raw)) from e


def to_calendar_date(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_event_date(value)


def days_until(target: DateLike, today: DateLike) -> int:
    """Whole days from today to target.

    Returns:
        0 if target is today, positive for days remaining,
        negative for days elapsed.

    Examples:
        >>> days_until("2026-01-02", date(2026, 1, 1))
        1
        >>> days_until(date(2025, 12, 31), date(2026, 1, 1))
        -1
    """
    return (to_calendar_date(target) - to_calendar_date(today)).days


def countdown_status(days: int) -> CountdownStatus:
    if days < 0:
        return CountdownStatus.PAST
    if days == 0:
        return CountdownStatus.TODAY
    return CountdownStatus.FUTURE


def tomorrow(today: DateLike) -> date:
    """Default target date offered to the user for a new event."""
    return to_calendar_date(today) + timedelta(days=1)


def format_display_date(value: DateLike) -> str:
    """Long-form display date, e.g. ``Monday, 19 October 2026``.

    Weekday and month names follow the process LC_TIME locale. The result
    is for display only and is never parsed back.
    """
    day = to_calendar_date(value)
    return f"{day:%A}, {day.day} {day:%B} {day.year}"
