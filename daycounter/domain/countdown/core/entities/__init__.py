from daycounter.domain.countdown.core.entities.event import Event

__all__ = ["Event"]
