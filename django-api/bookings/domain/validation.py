"""Format rules for registration form input.

Pure functions: they never touch the store. Whether the selected event
exists is resolved separately by the service.
"""

import re

from bookings.domain.value_objects import STUDENT_ID_PATTERN, EventId

NAME_MIN_LENGTH = 2

NAME_MESSAGE = "Please enter a valid full name (at least 2 characters)."
STUDENT_ID_MESSAGE = "Please enter a valid Student ID (6 digits, e.g., 665437)."
EVENT_MESSAGE = "Please select an event to register for."

_EVENT_ID_PATTERN = re.compile(r"[0-9]+")


def parse_event_id(value: object) -> int | None:
    """Resolve a submitted event selection to a positive integer, or None."""
    if isinstance(value, EventId):
        value = value.value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        value = value.strip()
        if _EVENT_ID_PATTERN.fullmatch(value):
            parsed = int(value)
            return parsed if parsed > 0 else None
    return None


def validate_registration_input(
    name: str | None, student_id: str | None, event_id: object
) -> list[str]:
    """Return the violated rules as user-facing messages, in form order.

    Every rule is checked; an empty list means the input is well formed.
    """
    violations = []

    if not isinstance(name, str) or len(name.strip()) < NAME_MIN_LENGTH:
        violations.append(NAME_MESSAGE)

    if not isinstance(student_id, str) or not STUDENT_ID_PATTERN.fullmatch(student_id):
        violations.append(STUDENT_ID_MESSAGE)

    if parse_event_id(event_id) is None:
        violations.append(EVENT_MESSAGE)

    return violations
