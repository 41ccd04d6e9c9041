"""Handlers for countdown domain events.

Side effects only: they never touch repository or session state.
"""

import logging

from daycounter.domain.countdown.core.events import (
    DomainEvent,
    EventAdded,
    EventRemoved,
    EventUpdated,
)
from daycounter.domain.shared.ports.event_bus import IEventBus

logger = logging.getLogger(__name__)


class EventAuditHandler:
    """Writes one structured audit log line per committed change.

    Example:
        >>> handler = EventAuditHandler()
        >>> handler.register(bus)
        >>> await bus.publish(EventRemoved.create("a1"))
        # Logs: "event_removed" with event_id and occurred_at
    """

    def register(self, bus: IEventBus) -> None:
        bus.subscribe(DomainEvent, self.handle)

    async def handle(self, event: DomainEvent) -> None:
        extra = {
            "occurrence_id": str(event.occurrence_id),
            "occurred_at": event.occurred_at.isoformat(),
        }

        if isinstance(event, EventAdded):
            logger.info(
                "event_added",
                extra={**extra, "event_id": event.event_id, "date": event.date},
            )
        elif isinstance(event, EventUpdated):
            logger.info(
                "event_updated",
                extra={
                    **extra,
                    "event_id": event.event_id,
                    "updated_fields": event.updated_fields,
                },
            )
        elif isinstance(event, EventRemoved):
            logger.info("event_removed", extra={**extra, "event_id": event.event_id})
        else:
            logger.debug("domain_event", extra={**extra, "event_type": type(event).__name__})
