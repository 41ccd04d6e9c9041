"""Display model for one event card."""

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, List, Optional, Sequence

from daycounter.application.countdown import messages
from daycounter.domain.countdown.calculation.date_math import (
    CountdownStatus,
    countdown_status,
    days_until,
    format_display_date,
)
from daycounter.domain.countdown.core.entities.event import Event

if TYPE_CHECKING:
    from daycounter.application.countdown.edit_session import EditSession


@dataclass(frozen=True)
class EventCard:
    """Everything a view needs to draw one event, with no domain lookups."""

    id: str
    name: str
    date: str
    display_date: str
    days: int
    status: CountdownStatus
    label: str
    editing: bool = False
    draft_name: Optional[str] = None
    draft_date: Optional[str] = None

    @property
    def abs_days(self) -> int:
        return abs(self.days)


def build_card(event: Event, today: date, session: Optional["EditSession"] = None) -> EventCard:
    days = days_until(event.target_date, today)
    draft = session.draft if session is not None and session.is_editing(event.id) else None

    return EventCard(
        id=event.id,
        name=event.name,
        date=event.date,
        display_date=format_display_date(event.target_date),
        days=days,
        status=countdown_status(days),
        label=messages.countdown_label(days),
        editing=draft is not None,
        draft_name=draft.name if draft else None,
        draft_date=draft.date if draft else None,
    )


def build_cards(
    events: Sequence[Event],
    today: date,
    session: Optional["EditSession"] = None,
) -> List[EventCard]:
    return [build_card(event, today, session) for event in events]
