"""Edit session - the single-item edit/view toggle.

At most one event is in EDITING at any time; every other event is
VIEWING. Starting an edit on a second event silently cancels the first.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from daycounter.application.countdown.event_repository import EventRepository
from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import EventNotFoundError, NotEditingError

logger = logging.getLogger(__name__)


class EditState(Enum):
    VIEWING = "viewing"
    EDITING = "editing"


@dataclass(frozen=True)
class EditDraft:
    """Uncommitted name/date values for the event being edited."""

    event_id: str
    name: str
    date: str


class EditSession:
    """
    Tracks which event (if any) is being edited and its draft values.

    Transitions:
    - start_edit(id): VIEWING → EDITING (implicitly cancels another draft)
    - cancel_edit(id): EDITING → VIEWING, draft discarded
    - commit(id): EDITING → VIEWING on success; stays EDITING with the
      draft kept when validation or persistence fails
    """

    def __init__(self, repository: EventRepository) -> None:
        self._repository = repository
        self._draft: Optional[EditDraft] = None

    @property
    def draft(self) -> Optional[EditDraft]:
        return self._draft

    @property
    def editing_id(self) -> Optional[str]:
        return self._draft.event_id if self._draft else None

    def is_editing(self, event_id: str) -> bool:
        return self._draft is not None and self._draft.event_id == event_id

    def state_of(self, event_id: str) -> EditState:
        return EditState.EDITING if self.is_editing(event_id) else EditState.VIEWING

    def start_edit(self, event_id: str) -> EditDraft:
        """
        Put an event in edit mode, seeding the draft from committed values.

        Re-starting the event already being edited keeps its draft.

        Raises:
            EventNotFoundError: If the event is not live (current draft kept)
        """
        if self._draft is not None and self._draft.event_id == event_id:
            return self._draft

        event = self._repository.get(event_id)

        if self._draft is not None:
            logger.debug(
                "Implicitly cancelling edit",
                extra={"event_id": self._draft.event_id, "next_event_id": event_id},
            )

        self._draft = EditDraft(event_id=event.id, name=event.name, date=event.date)
        return self._draft

    def update_draft(
        self,
        event_id: str,
        name: Optional[str] = None,
        date: Optional[str] = None,
    ) -> EditDraft:
        """
        Change draft values as the user types. Nothing is validated here.

        Raises:
            NotEditingError: If event_id is not being edited
        """
        draft = self._require(event_id)
        changes = {}
        if name is not None:
            changes["name"] = name
        if date is not None:
            changes["date"] = date
        self._draft = replace(draft, **changes)
        return self._draft

    def cancel_edit(self, event_id: str) -> None:
        """
        Discard the draft; committed values are untouched.

        Raises:
            NotEditingError: If event_id is not being edited
        """
        self._require(event_id)
        self._draft = None

    async def commit(self, event_id: str) -> Event:
        """
        Commit the draft through EventRepository.edit.

        If the draft changes while the commit is suspended, the newer draft
        stays in EDITING; the committed values are the ones submitted.

        Returns:
            The updated Event

        Raises:
            NotEditingError: If event_id is not being edited
            ValidationError: Draft rejected; session stays EDITING
            PersistenceError: Store failed; session stays EDITING
            EventNotFoundError: Event is gone; session returns to VIEWING
        """
        draft = self._require(event_id)

        try:
            event = await self._repository.edit(event_id, draft.name, draft.date)
        except EventNotFoundError:
            self.forget(event_id)
            raise

        # Only the submitted draft is closed; one typed or started meanwhile stays open
        if self._draft is draft:
            self._draft = None
        return event

    def forget(self, event_id: str) -> None:
        """Drop the draft if it belongs to event_id (e.g. after deletion)."""
        if self.is_editing(event_id):
            self._draft = None

    def reconcile(self) -> None:
        """Drop the draft if its event is no longer live (e.g. after reload)."""
        if self._draft is not None and not self._repository.contains(self._draft.event_id):
            logger.debug(
                "Dropping draft of vanished event",
                extra={"event_id": self._draft.event_id},
            )
            self._draft = None

    def _require(self, event_id: str) -> EditDraft:
        if self._draft is None or self._draft.event_id != event_id:
            raise NotEditingError(event_id)
        return self._draft
