"""Domain error codes for the bookings module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_REGISTRATION = "INVALID_REGISTRATION"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_FULLY_BOOKED = "EVENT_FULLY_BOOKED"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    SCHEMA_ERROR = "SCHEMA_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRegistrationError(DomainError):
    """Raised when registration input fails format rules."""

    def __init__(self, violations: list[str]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REGISTRATION,
            message="Registration details are invalid",
        )
        self.violations = tuple(violations)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Selected event is no longer available!",
        )
        self.event_id = event_id


class EventFullyBookedError(DomainError):
    """Raised when an event has no slots left."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULLY_BOOKED,
            message="This event is fully booked!",
        )
        self.event_id = event_id


class DuplicateRegistrationError(DomainError):
    """Raised when a student is already registered for an event."""

    def __init__(self, student_id: str, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message="You are already registered for this event!",
        )
        self.student_id = student_id
        self.event_id = event_id


class PersistenceError(DomainError):
    """Raised when the record store cannot read or write a record."""

    def __init__(self, key: str) -> None:
        super().__init__(
            code=ErrorCode.PERSISTENCE_FAILURE,
            message="Could not save your changes. Please try again.",
        )
        self.key = key


class SchemaError(DomainError):
    """Raised when a persisted record does not match the expected layout."""

    def __init__(self, key: str, details: object = None) -> None:
        super().__init__(
            code=ErrorCode.SCHEMA_ERROR,
            message="Stored booking data is malformed",
        )
        self.key = key
        self.details = details
