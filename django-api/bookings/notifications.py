"""Transient notices shown to the user after an action.

Clients display each notice and dismiss it after `display_seconds`.
"""

from dataclasses import dataclass
from enum import Enum

from bookings.domain import Event, Registration
from bookings.domain.errors import DomainError, InvalidRegistrationError

MESSAGE_SECONDS = 5
CONFIRMATION_SECONDS = 10


class Level(Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    level: Level
    text: str
    display_seconds: int = MESSAGE_SECONDS
    title: str | None = None
    details: tuple[tuple[str, str], ...] = ()


def success(text: str) -> Notice:
    return Notice(level=Level.SUCCESS, text=text)


def error(text: str) -> Notice:
    return Notice(level=Level.ERROR, text=text)


def for_error(exc: DomainError) -> list[Notice]:
    """One error notice per problem the user has to fix."""
    if isinstance(exc, InvalidRegistrationError):
        return [error(violation) for violation in exc.violations]
    return [error(exc.message)]


def form_guidance(event: Event) -> Notice:
    return success(f'Please complete the registration form for "{event.name}".')


def registration_confirmed(registration: Registration) -> list[Notice]:
    """The confirmation panel followed by the short success message."""
    confirmation = Notice(
        level=Level.SUCCESS,
        title="Registration Confirmed!",
        text=(
            f"{registration.student_name} is registered for {registration.event_name}."
        ),
        display_seconds=CONFIRMATION_SECONDS,
        details=(
            ("Student Name", registration.student_name),
            ("Student ID", registration.student_id.value),
            ("Event", registration.event_name),
            ("Registration Date", registration.registered_at.date().isoformat()),
        ),
    )
    return [confirmation, success("Registration completed successfully!")]
