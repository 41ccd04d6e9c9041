"""Domain exceptions for the countdown bounded context.

This module defines the exception hierarchy for event management errors.
Every exception carries an ErrorCode and a user-safe message so the
controller can report it without inspecting the exception type.

Hierarchy:
    DomainError
    ├─ ValidationError        (detected before any store call)
    │   ├─ EmptyFieldError
    │   ├─ InvalidDateError
    │   ├─ PastDateError
    │   ├─ CapacityExceededError
    │   └─ EventNotFoundError
    ├─ EditSessionError
    │   └─ NotEditingError
    └─ PersistenceError       (raised by store adapters)
        ├─ StoreUnavailableError
        ├─ DuplicateKeyError
        ├─ RecordNotFoundError
        └─ WriteFailedError
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EMPTY_FIELD = "EMPTY_FIELD"
    INVALID_DATE = "INVALID_DATE"
    PAST_DATE = "PAST_DATE"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NOT_EDITING = "NOT_EDITING"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    WRITE_FAILED = "WRITE_FAILED"


class DomainError(Exception):
    """Base exception for the countdown domain.

    Attributes:
        code: Machine-readable error code.
        message: User-safe description (no engine internals).
    """

    code: ErrorCode = ErrorCode.WRITE_FAILED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


# ============================================================
# Validation errors
# ============================================================


class ValidationError(DomainError):
    """Raised when user input violates an event invariant."""


class EmptyFieldError(ValidationError):
    """Raised when the name (after trim) or the date is empty."""

    code = ErrorCode.EMPTY_FIELD

    def __init__(self, field: str) -> None:
        super().__init__(f"Field '{field}' is required")
        self.field = field


class InvalidDateError(ValidationError):
    """Raised when a date string is not a valid ISO calendar date."""

    code = ErrorCode.INVALID_DATE

    def __init__(self, raw: str) -> None:
        super().__init__(f"'{raw}' is not a valid date (expected YYYY-MM-DD)")
        self.raw = raw


class PastDateError(ValidationError):
    """Raised when a new or edited event targets a date before today."""

    code = ErrorCode.PAST_DATE

    def __init__(self, date: str) -> None:
        super().__init__(f"Date {date} is in the past")
        self.date = date


class CapacityExceededError(ValidationError):
    """Raised when adding an event would exceed the configured maximum."""

    code = ErrorCode.CAPACITY_EXCEEDED

    def __init__(self, max_events: int) -> None:
        super().__init__(f"Maximum of {max_events} events reached")
        self.max_events = max_events


class EventNotFoundError(ValidationError):
    """Raised when an operation references an event that is not live."""

    code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, event_id: str) -> None:
        super().__init__("Event not found")
        self.event_id = event_id


# ============================================================
# Edit session errors
# ============================================================


class EditSessionError(DomainError):
    """Raised when an edit transition is not allowed in the current state."""


class NotEditingError(EditSessionError):
    """Raised when cancel/commit/update targets an event that is not being edited."""

    code = ErrorCode.NOT_EDITING

    def __init__(self, event_id: str) -> None:
        super().__init__("Event is not being edited")
        self.event_id = event_id


# ============================================================
# Persistence errors
# ============================================================


class PersistenceError(DomainError):
    """Base exception for store failures.

    The store is never partially written; callers must leave their
    in-memory state unchanged when this is raised.
    """


class StoreUnavailableError(PersistenceError):
    """Raised when the storage engine cannot be opened or is not initialized."""

    code = ErrorCode.STORE_UNAVAILABLE

    def __init__(self, message: str = "Storage is unavailable") -> None:
        super().__init__(message)


class DuplicateKeyError(PersistenceError):
    """Raised by insert when a record with the same id already exists."""

    code = ErrorCode.DUPLICATE_KEY

    def __init__(self, event_id: str) -> None:
        super().__init__("An event with this id already exists")
        self.event_id = event_id


class RecordNotFoundError(PersistenceError):
    """Raised when a store lookup requires a record that does not exist."""

    code = ErrorCode.RECORD_NOT_FOUND

    def __init__(self, event_id: str) -> None:
        super().__init__("Stored event not found")
        self.event_id = event_id


class WriteFailedError(PersistenceError):
    """Raised when the engine rejects a read or write."""

    code = ErrorCode.WRITE_FAILED

    def __init__(self, operation: str) -> None:
        super().__init__(f"Storage operation '{operation}' failed")
        self.operation = operation
