"""View port (interface).

The presentation layer (markup, styling, widgets, toasts) implements this
protocol. The controller drives it with explicit calls; a view never
reads repository or session state directly.
"""

from enum import Enum
from typing import Protocol, Sequence

from daycounter.application.countdown.cards import EventCard


class MessageKind(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class IEventView(Protocol):
    """Interface the controller renders through."""

    def render_list(self, cards: Sequence[EventCard], total_count: int, max_events: int) -> None:
        """
        Show the filtered events.

        Args:
            cards: Filtered events, soonest first, ready for display
            total_count: Number of live events (before filtering)
            max_events: Capacity, for the "shown/total (max)" counter
        """
        ...

    def show_message(self, text: str, kind: MessageKind) -> None:
        """Show a transient notification."""
        ...

    def prompt_confirm(self, text: str) -> bool:
        """Ask a yes/no question; used before destructive deletes."""
        ...

    def reset_form(self, name: str, date: str) -> None:
        """Reset the add-event form (empty name, date defaulted to tomorrow)."""
        ...
