from daycounter.domain.countdown.core.factories.event_factory import EventFactory

__all__ = ["EventFactory"]
