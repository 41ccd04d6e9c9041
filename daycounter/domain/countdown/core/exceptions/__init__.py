"""Domain exceptions for the countdown bounded context."""

from daycounter.domain.countdown.core.exceptions.domain_errors import (
    CapacityExceededError,
    DomainError,
    DuplicateKeyError,
    EditSessionError,
    EmptyFieldError,
    ErrorCode,
    EventNotFoundError,
    InvalidDateError,
    NotEditingError,
    PastDateError,
    PersistenceError,
    RecordNotFoundError,
    StoreUnavailableError,
    ValidationError,
    WriteFailedError,
)

__all__ = [
    "ErrorCode",
    "DomainError",
    "ValidationError",
    "EmptyFieldError",
    "InvalidDateError",
    "PastDateError",
    "CapacityExceededError",
    "EventNotFoundError",
    "EditSessionError",
    "NotEditingError",
    "PersistenceError",
    "StoreUnavailableError",
    "DuplicateKeyError",
    "RecordNotFoundError",
    "WriteFailedError",
]
