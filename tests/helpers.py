"""Test doubles and builders shared by the test suite."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from daycounter.application.countdown.cards import EventCard
from daycounter.application.countdown.view import MessageKind
from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import WriteFailedError
from daycounter.infrastructure.persistence.in_memory.event_store import InMemoryEventStore

# Monday 19 October 2026, mid-morning
NOW = datetime(2026, 10, 19, 10, 30, tzinfo=timezone.utc)
TODAY = "2026-10-19"
TOMORROW = "2026-10-20"
YESTERDAY = "2026-10-18"


class ControllableEventStore(InMemoryEventStore):
    """In-memory store whose operations can be made to fail or to pause.

    - fail_next("insert") makes the next insert raise WriteFailedError
    - hold("update") pauses updates until release("update"); entered("update")
      is set once an update is waiting
    """

    def __init__(self) -> None:
        super().__init__()
        self._failures: Dict[str, int] = {}
        self._gates: Dict[str, asyncio.Event] = {}
        self._entered: Dict[str, asyncio.Event] = {}
        self.calls: List[Tuple[str, Any]] = []

    def fail_next(self, operation: str, times: int = 1) -> None:
        self._failures[operation] = self._failures.get(operation, 0) + times

    def hold(self, operation: str) -> None:
        self._gates[operation] = asyncio.Event()
        self._entered[operation] = asyncio.Event()

    def release(self, operation: str) -> None:
        self._gates.pop(operation).set()

    def entered(self, operation: str) -> asyncio.Event:
        return self._entered[operation]

    async def _before(self, operation: str, arg: Any) -> None:
        self.calls.append((operation, arg))
        gate = self._gates.get(operation)
        if gate is not None:
            self._entered[operation].set()
            await gate.wait()
        if self._failures.get(operation):
            self._failures[operation] -= 1
            raise WriteFailedError(operation)

    async def insert(self, event: Event) -> None:
        await self._before("insert", event)
        await super().insert(event)

    async def update(self, event: Event) -> None:
        await self._before("update", event)
        await super().update(event)

    async def remove(self, event_id: str) -> None:
        await self._before("remove", event_id)
        await super().remove(event_id)

    async def load_all(self) -> List[Event]:
        await self._before("load_all", None)
        return await super().load_all()


class RecordingView:
    """IEventView test double that records every call."""

    def __init__(self, confirm: bool = True) -> None:
        self.confirm = confirm
        self.renders: List[Tuple[List[EventCard], int, int]] = []
        self.messages: List[Tuple[str, MessageKind]] = []
        self.prompts: List[str] = []
        self.forms: List[Tuple[str, str]] = []

    def render_list(self, cards: Sequence[EventCard], total_count: int, max_events: int) -> None:
        self.renders.append((list(cards), total_count, max_events))

    def show_message(self, text: str, kind: MessageKind) -> None:
        self.messages.append((text, kind))

    def prompt_confirm(self, text: str) -> bool:
        self.prompts.append(text)
        return self.confirm

    def reset_form(self, name: str, date: str) -> None:
        self.forms.append((name, date))

    @property
    def last_cards(self) -> List[EventCard]:
        return self.renders[-1][0]

    @property
    def last_message(self) -> Optional[Tuple[str, MessageKind]]:
        return self.messages[-1] if self.messages else None


def make_event(
    name: str = "Vacaciones",
    date: str = "2026-12-20",
    event_id: str = "evt-1",
    created_at: datetime = NOW,
) -> Event:
    return Event(id=event_id, name=name, date=date, created_at=created_at)


