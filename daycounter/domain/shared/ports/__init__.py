"""Ports shared across the countdown domain."""

from daycounter.domain.shared.ports.clock import IClock
from daycounter.domain.shared.ports.event_bus import EventHandler, IEventBus, Unsubscribe
from daycounter.domain.shared.ports.event_store import (
    COLLECTION_NAME,
    SCHEMA_VERSION,
    IEventStore,
)

__all__ = [
    "IClock",
    "IEventBus",
    "EventHandler",
    "Unsubscribe",
    "IEventStore",
    "COLLECTION_NAME",
    "SCHEMA_VERSION",
]
