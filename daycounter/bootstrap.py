"""Composition root.

Wires configuration, store, repository, edit session and controller for a
given view. The returned controller is not started; await start().
"""

import logging
from typing import Optional

from daycounter.application.countdown.controller import EventController
from daycounter.application.countdown.edit_session import EditSession
from daycounter.application.countdown.event_handlers import EventAuditHandler
from daycounter.application.countdown.event_repository import EventRepository
from daycounter.application.countdown.view import IEventView
from daycounter.domain.shared.ports.clock import IClock
from daycounter.domain.shared.ports.event_bus import IEventBus
from daycounter.domain.shared.ports.event_store import IEventStore
from daycounter.infrastructure.clock import SystemClock
from daycounter.infrastructure.config import get_max_events, load_environment
from daycounter.infrastructure.events.in_memory_bus import InMemoryEventBus
from daycounter.infrastructure.logging_config import configure_logging
from daycounter.infrastructure.persistence.factory import create_event_store

logger = logging.getLogger(__name__)


def create_controller(
    view: IEventView,
    store: Optional[IEventStore] = None,
    clock: Optional[IClock] = None,
    event_bus: Optional[IEventBus] = None,
    max_events: Optional[int] = None,
) -> EventController:
    """
    Build a ready-to-start controller.

    Args:
        view: Presentation adapter
        store: Event store (default: from EVENT_STORE_BACKEND)
        clock: Time source (default: SystemClock)
        event_bus: Domain event bus (default: new InMemoryEventBus); the
            audit log handler is subscribed to it
        max_events: Capacity (default: MAX_EVENTS env var, 250)

    Raises:
        ValueError: If the configured store backend is invalid
    """
    load_environment()
    configure_logging()

    store = store if store is not None else create_event_store()
    clock = clock if clock is not None else SystemClock()
    if event_bus is None:
        event_bus = InMemoryEventBus()
    EventAuditHandler().register(event_bus)

    repository = EventRepository(
        store,
        clock,
        max_events=max_events if max_events is not None else get_max_events(),
        event_bus=event_bus,
    )
    session = EditSession(repository)

    logger.debug("Controller created", extra={"store": type(store).__name__})
    return EventController(store, repository, session, view, clock)
