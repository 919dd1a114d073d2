"""Built-in event catalog used when no events record has been stored yet."""

from datetime import date

from bookings.domain import Capacity, Event, EventId

SEED_EVENTS = (
    Event(
        id=EventId(1),
        name="Tech Innovation Summit 2025",
        date=date(2025, 9, 15),
        venue="Main Auditorium",
        slots=Capacity(150),
    ),
    Event(
        id=EventId(2),
        name="Career Fair & Networking",
        date=date(2025, 9, 22),
        venue="Student Center",
        slots=Capacity(200),
    ),
    Event(
        id=EventId(3),
        name="International Cultural Festival",
        date=date(2025, 10, 5),
        venue="Campus Grounds",
        slots=Capacity(300),
    ),
    Event(
        id=EventId(4),
        name="Academic Excellence Awards",
        date=date(2025, 10, 12),
        venue="Conference Hall",
        slots=Capacity(100),
    ),
    Event(
        id=EventId(5),
        name="Sports Day Championship",
        date=date(2025, 10, 20),
        venue="Sports Complex",
        slots=Capacity(250),
    ),
    Event(
        id=EventId(6),
        name="Alumni Networking Dinner",
        date=date(2025, 9, 8),
        venue="Grand Ballroom",
        slots=Capacity(0),
    ),
)
