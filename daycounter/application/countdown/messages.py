"""User-facing texts shown through the view."""

from daycounter.domain.countdown.core.exceptions import (
    CapacityExceededError,
    DomainError,
    ErrorCode,
    PersistenceError,
)

EVENT_ADDED = "Event added"
EVENT_UPDATED = "Event updated"
EVENT_DELETED = "Event deleted"
CONFIRM_DELETE = "Are you sure you want to delete this event?"

STORE_UNAVAILABLE = "Storage is unavailable; events cannot be saved in this session"
STORE_DISABLED = "Storage is unavailable; changes are disabled"

_VALIDATION_TEXTS = {
    ErrorCode.EMPTY_FIELD: "Please fill in all fields",
    ErrorCode.INVALID_DATE: "Please enter a valid date",
    ErrorCode.PAST_DATE: "Can you travel back in time? Pick today or a later date",
    ErrorCode.EVENT_NOT_FOUND: "This event no longer exists",
    ErrorCode.NOT_EDITING: "This event is not being edited",
}

_PERSISTENCE_TEXTS = {
    "add": "Error saving the event",
    "update": "Error updating the event",
    "delete": "Error deleting the event",
    "load": "Error loading events",
}

LABEL_PAST = "PAST"
LABEL_TODAY = "TODAY"
LABEL_DAY = "DAY"
LABEL_DAYS = "DAYS"


def describe_error(error: DomainError, action: str) -> str:
    """
    Text for an error raised while performing ``action``.

    Args:
        error: Domain error
        action: One of "add", "update", "delete", "load"
    """
    if isinstance(error, CapacityExceededError):
        return f"Maximum of {error.max_events} events reached"
    if isinstance(error, PersistenceError):
        if error.code is ErrorCode.STORE_UNAVAILABLE:
            return STORE_DISABLED
        return _PERSISTENCE_TEXTS.get(action, "Storage error")
    return _VALIDATION_TEXTS.get(error.code, error.message)


def countdown_label(days: int) -> str:
    if days < 0:
        return LABEL_PAST
    if days == 0:
        return LABEL_TODAY
    return LABEL_DAY if days == 1 else LABEL_DAYS

