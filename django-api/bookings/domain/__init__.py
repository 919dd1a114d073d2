from bookings.domain.models import Event, Registration
from bookings.domain.value_objects import Capacity, EventId, RegistrationId, StudentId

__all__ = [
    "Event",
    "Registration",
    "EventId",
    "RegistrationId",
    "StudentId",
    "Capacity",
]
