"""In-process domain event dispatch."""

import logging
from collections import defaultdict
from typing import DefaultDict, List, Type

from daycounter.domain.countdown.core.events.base import DomainEvent
from daycounter.domain.shared.ports.event_bus import EventHandler, TEvent, Unsubscribe

logger = logging.getLogger(__name__)


class InMemoryEventBus:
    """
    IEventBus adapter that awaits handlers inline, in subscription order.

    A handler subscribed to a base class also receives its subclasses, so
    ``subscribe(DomainEvent, audit)`` sees every change. A handler that
    raises is logged and skipped: the change it reports is already
    committed, so the publisher is never failed.

    Example:
        >>> bus = InMemoryEventBus()
        >>> stop = bus.subscribe(EventAdded, notify_added)
        >>> await bus.publish(EventAdded.create("a1", "Trip", "2026-12-01"))
        >>> stop()
    """

    def __init__(self) -> None:
        self._subscriptions: DefaultDict[Type[DomainEvent], List[EventHandler]] = defaultdict(
            list
        )

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler) -> Unsubscribe:
        self._subscriptions[event_type].append(handler)
        logger.debug(
            "Subscribed to domain event",
            extra={"event_type": event_type.__name__, "handler": _name_of(handler)},
        )

        def unsubscribe() -> None:
            handlers = self._subscriptions.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    async def publish(self, event: DomainEvent) -> None:
        delivered = 0
        for handler in self._matching(type(event)):
            delivered += 1
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Domain event handler raised",
                    extra={
                        "event_type": type(event).__name__,
                        "occurrence_id": str(event.occurrence_id),
                        "handler": _name_of(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

        logger.debug(
            "Domain event published",
            extra={"event_type": type(event).__name__, "handlers": delivered},
        )

    def handler_count(self, event_type: Type[DomainEvent]) -> int:
        """Handlers that would receive an event of exactly this type."""
        return len(self._matching(event_type))

    def reset(self) -> None:
        self._subscriptions.clear()

    def _matching(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        # Most specific type first, then its bases
        matches: List[EventHandler] = []
        for cls in event_type.__mro__:
            matches.extend(self._subscriptions.get(cls, []))
        return matches


def _name_of(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))
