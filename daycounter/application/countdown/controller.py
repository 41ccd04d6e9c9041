"""Event controller - translates user actions into repository/session calls.

Every user action ends with explicit view calls (render, message). No
error escapes to the caller: each failure is reported through
view.show_message and the controller stays usable, except when the store
cannot be opened at start-up, which leaves it read-only.
"""

import logging
from typing import Optional

from daycounter.application.countdown import messages
from daycounter.application.countdown.cards import build_cards
from daycounter.application.countdown.edit_session import EditDraft, EditSession
from daycounter.application.countdown.event_repository import EventRepository
from daycounter.application.countdown.view import IEventView, MessageKind
from daycounter.domain.countdown.calculation.date_math import tomorrow
from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import (
    DomainError,
    PersistenceError,
    StoreUnavailableError,
)
from daycounter.domain.shared.ports.clock import IClock
from daycounter.domain.shared.ports.event_store import IEventStore

logger = logging.getLogger(__name__)


class EventController:
    """
    Entry point for every user action.

    Example:
        >>> controller = EventController(store, repository, session, view, clock)
        >>> await controller.start()
        >>> await controller.add_event("Vacaciones", "2026-12-20")
        >>> controller.search("vac")
    """

    def __init__(
        self,
        store: IEventStore,
        repository: EventRepository,
        session: EditSession,
        view: IEventView,
        clock: IClock,
    ) -> None:
        self._store = store
        self._repository = repository
        self._session = session
        self._view = view
        self._clock = clock
        self._disabled = False

    @property
    def disabled(self) -> bool:
        """True when the store could not be opened; only searching works."""
        return self._disabled

    @property
    def repository(self) -> EventRepository:
        return self._repository

    @property
    def session(self) -> EditSession:
        return self._session

    # ============================================================
    # Lifecycle
    # ============================================================

    async def start(self) -> bool:
        """
        Open the store, load events, reset the form and render.

        Returns:
            False if the store is unavailable (controller disabled)
        """
        try:
            await self._store.initialize()
        except StoreUnavailableError as e:
            self._disabled = True
            logger.error("Event store unavailable, running read-only", extra={"error": str(e)})
            self._view.show_message(messages.STORE_UNAVAILABLE, MessageKind.ERROR)
            self._reset_form()
            self._render()
            return False

        try:
            await self._repository.load()
        except PersistenceError as e:
            self._report(e, "load")

        self._reset_form()
        self._render()
        return True

    async def refresh(self) -> None:
        """Reload from the store, keeping the current search term."""
        if self._disabled:
            self._render()
            return

        term = self._repository.search_term
        try:
            await self._repository.load()
        except PersistenceError as e:
            self._report(e, "load")
            return

        if term:
            self._repository.filter(term)
        self._session.reconcile()
        self._render()

    async def stop(self) -> None:
        await self._store.close()

    # ============================================================
    # User actions
    # ============================================================

    async def add_event(self, name: str, date: str) -> Optional[Event]:
        if self._reject_when_disabled():
            return None

        try:
            event = await self._repository.add(name, date)
        except DomainError as e:
            self._report(e, "add")
            return None

        self._reset_form()
        self._render()
        self._view.show_message(messages.EVENT_ADDED, MessageKind.SUCCESS)
        return event

    def search(self, term: str) -> None:
        self._repository.filter(term)
        self._render()

    def clear_search(self) -> None:
        self.search("")

    def start_edit(self, event_id: str) -> Optional[EditDraft]:
        if self._reject_when_disabled():
            return None

        try:
            draft = self._session.start_edit(event_id)
        except DomainError as e:
            self._report(e, "update")
            return None

        self._render()
        return draft

    def update_draft(
        self,
        event_id: str,
        name: Optional[str] = None,
        date: Optional[str] = None,
    ) -> Optional[EditDraft]:
        try:
            return self._session.update_draft(event_id, name=name, date=date)
        except DomainError as e:
            self._report(e, "update")
            return None

    def cancel_edit(self, event_id: str) -> None:
        try:
            self._session.cancel_edit(event_id)
        except DomainError as e:
            self._report(e, "update")
            return

        self._render()

    async def save_edit(self, event_id: str) -> Optional[Event]:
        if self._reject_when_disabled():
            return None

        try:
            event = await self._session.commit(event_id)
        except DomainError as e:
            self._report(e, "update")
            self._render()
            return None

        self._render()
        self._view.show_message(messages.EVENT_UPDATED, MessageKind.SUCCESS)
        return event

    async def delete_event(self, event_id: str) -> bool:
        """
        Delete after user confirmation.

        Returns:
            True if the deletion was confirmed and persisted
        """
        if self._reject_when_disabled():
            return False

        if not self._view.prompt_confirm(messages.CONFIRM_DELETE):
            return False

        try:
            await self._repository.remove(event_id)
        except PersistenceError as e:
            self._report(e, "delete")
            return False

        self._session.forget(event_id)
        self._render()
        self._view.show_message(messages.EVENT_DELETED, MessageKind.SUCCESS)
        return True

    # ============================================================
    # Helpers
    # ============================================================

    def _render(self) -> None:
        cards = build_cards(
            self._repository.filtered_events,
            self._clock.today(),
            self._session,
        )
        self._view.render_list(cards, self._repository.total_count, self._repository.max_events)

    def _reset_form(self) -> None:
        self._view.reset_form("", tomorrow(self._clock.today()).isoformat())

    def _report(self, error: DomainError, action: str) -> None:
        if isinstance(error, PersistenceError):
            logger.error(
                "Storage operation failed",
                extra={"action": action, "code": error.code.value, "error": str(error)},
            )
        else:
            logger.info(
                "Action rejected",
                extra={"action": action, "code": error.code.value},
            )
        self._view.show_message(messages.describe_error(error, action), MessageKind.ERROR)

    def _reject_when_disabled(self) -> bool:
        if self._disabled:
            self._view.show_message(messages.STORE_DISABLED, MessageKind.ERROR)
        return self._disabled
