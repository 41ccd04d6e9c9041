"""Event bus port (interface).

Lets the repository announce committed changes (added, updated, removed)
without knowing who listens.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from daycounter.domain.countdown.core.events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]
Unsubscribe = Callable[[], None]


class IEventBus(Protocol):
    """
    Interface for domain event publishing and subscription.

    Example usage (application layer):
        >>> class EventRepository:
        ...     async def remove(self, event_id: str) -> None:
        ...         ...
        ...         await self._event_bus.publish(EventRemoved.create(event_id))
    """

    def subscribe(self, event_type: Type[TEvent], handler: EventHandler) -> Unsubscribe:
        """
        Register an async handler for an event type and its subclasses.

        Returns:
            Callable that removes the subscription
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to every matching handler."""
        ...
