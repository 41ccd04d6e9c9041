"""Value objects for the countdown domain."""

from daycounter.domain.countdown.core.value_objects.event_id import EventId

__all__ = ["EventId"]
