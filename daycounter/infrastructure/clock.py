"""Clock adapters implementing the IClock port."""

from datetime import date, datetime, timedelta
from typing import Optional


class SystemClock:
    """Wall clock in the machine's local timezone."""

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """
    Clock pinned to a given instant.

    Example:
        >>> from datetime import timezone
        >>> clock = FixedClock(datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc))
        >>> clock.today()
        datetime.date(2026, 10, 19)
    """

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            raise ValueError("FixedClock instant must be timezone-aware")
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def today(self) -> date:
        return self._instant.date()

    def set(self, instant: Optional[datetime] = None, **delta: float) -> None:
        """
        Move the clock.

        Args:
            instant: New absolute instant, or
            **delta: timedelta keyword arguments applied to the current instant
        """
        if instant is not None:
            if instant.tzinfo is None:
                raise ValueError("FixedClock instant must be timezone-aware")
            self._instant = instant
        else:
            self._instant = self._instant + timedelta(**delta)
