"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
The key-value persistence model is in bookings/models.py.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime

from bookings.domain.value_objects import Capacity, EventId, RegistrationId, StudentId


@dataclass(frozen=True)
class Event:
    """Domain representation of a bookable campus event."""

    id: EventId
    name: str
    date: date
    venue: str
    slots: Capacity

    @property
    def is_fully_booked(self) -> bool:
        return self.slots.value == 0

    def book_slot(self) -> "Event":
        """Return a copy of this event with one slot taken.

        Raises:
            ValueError: If the event has no slots left.
        """
        return replace(self, slots=self.slots.decrement())


@dataclass(frozen=True)
class Registration:
    """Domain representation of a student's registration for an event."""

    id: RegistrationId
    student_name: str
    student_id: StudentId
    event_id: EventId
    event_name: str
    registered_at: datetime

    def matches(self, student_id: StudentId, event_id: EventId) -> bool:
        return self.student_id == student_id and self.event_id == event_id
