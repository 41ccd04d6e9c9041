"""Date calculations for countdown display and validation."""

from daycounter.domain.countdown.calculation.date_math import (
    CountdownStatus,
    countdown_status,
    days_until,
    format_display_date,
    parse_event_date,
    to_calendar_date,
    tomorrow,
)

__all__ = [
    "CountdownStatus",
    "countdown_status",
    "days_until",
    "format_display_date",
    "parse_event_date",
    "to_calendar_date",
    "tomorrow",
]
