"""Clock port (interface).

The domain never reads the wall clock directly; application services ask
an IClock so tests and replays can pin "now".
"""

from datetime import date, datetime
from typing import Protocol


class IClock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Current time, timezone-aware, in the user's local zone."""
        ...

    def today(self) -> date:
        """Current local calendar date."""
        ...
