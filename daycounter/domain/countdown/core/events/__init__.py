"""Domain events for the countdown bounded context."""

from .base import DomainEvent
from .event_added import EventAdded
from .event_removed import EventRemoved
from .event_updated import EventUpdated

__all__ = [
    "DomainEvent",
    "EventAdded",
    "EventUpdated",
    "EventRemoved",
]
