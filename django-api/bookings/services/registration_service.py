"""Registration service - all booking business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

One RegistrationService instance owns the events and registrations of a
session. Every operation runs to completion before the next starts.
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from django.utils import timezone

from bookings.domain import Event, EventId, Registration, RegistrationId, StudentId
from bookings.domain.errors import (
    DuplicateRegistrationError,
    EventFullyBookedError,
    EventNotFoundError,
    InvalidRegistrationError,
    PersistenceError,
)
from bookings.domain.validation import parse_event_id, validate_registration_input
from bookings.seed import SEED_EVENTS
from bookings.stores.interfaces import RecordStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """In-memory authority for events and registrations."""

    def __init__(
        self, store: RecordStore, clock: Callable[[], datetime] = timezone.now
    ) -> None:
        self._store = store
        self._clock = clock
        self._events: list[Event] = []
        self._registrations: list[Registration] = []
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """Load both records from the store, seeding the event catalog if absent.

        Raises:
            SchemaError: If a stored record is malformed.
            PersistenceError: If the store cannot be read or the seed
                cannot be written.
        """
        self._initialized = False

        events = self._store.load_events()
        if events is None:
            events = list(SEED_EVENTS)
            self._store.save_events(events)
            logger.info("Seeded %d built-in events", len(events))

        registrations = self._store.load_registrations() or []

        self._events = events
        self._registrations = registrations
        self._initialized = True

        orphans = self.orphaned_registrations()
        if orphans:
            unknown = sorted({r.event_id.value for r in orphans})
            logger.warning(
                "%d registration(s) reference unknown events: %s",
                len(orphans),
                ", ".join(str(event_id) for event_id in unknown),
            )

    def list_events(self) -> list[Event]:
        """Return all events in catalog order."""
        self._ensure_initialized()
        return list(self._events)

    def list_registrable_events(self) -> Iterator[Event]:
        """Yield events that still have slots, in catalog order."""
        self._ensure_initialized()
        return (event for event in self._events if not event.is_fully_booked)

    def list_registrations(self) -> list[Registration]:
        """Return all registrations in creation order."""
        self._ensure_initialized()
        return list(self._registrations)

    def orphaned_registrations(self) -> list[Registration]:
        """Return registrations whose event is not in the catalog."""
        self._ensure_initialized()
        known = {event.id for event in self._events}
        return [r for r in self._registrations if r.event_id not in known]

    def find_event(self, event_id: int | EventId) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        self._ensure_initialized()
        _, event = self._locate(event_id)
        return event

    def prepare_registration(self, event_id: int | EventId) -> Event:
        """Return the event a registration form should be pre-filled with.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventFullyBookedError: If the event has no slots left.
        """
        event = self.find_event(event_id)
        if event.is_fully_booked:
            raise EventFullyBookedError(event.id.value)
        return event

    def register_student(
        self, student_name: str | None, student_id: str | None, event_id: object
    ) -> Registration:
        """Register a student for an event, taking one of its slots.

        Nothing changes unless the whole registration is stored.

        Raises:
            EventFullyBookedError: If the selected event has no slots left.
            InvalidRegistrationError: If the input breaks a format rule.
            EventNotFoundError: If the selected event does not exist.
            DuplicateRegistrationError: If the student is already registered.
            PersistenceError: If the store rejects the write.
        """
        self._ensure_initialized()
        if isinstance(student_name, str):
            student_name = student_name.strip()
        if isinstance(student_id, str):
            student_id = student_id.strip()

        selected = parse_event_id(event_id)
        index, event = self._find_index(selected)
        if event is not None and event.is_fully_booked:
            logger.info("Rejected registration for fully booked event %s", event.id)
            raise EventFullyBookedError(event.id.value)

        violations = validate_registration_input(student_name, student_id, event_id)
        if violations:
            logger.info(
                "Rejected registration with %d invalid field(s)", len(violations)
            )
            raise InvalidRegistrationError(violations)

        if event is None:
            raise EventNotFoundError(selected)

        student = StudentId(student_id)
        if any(r.matches(student, event.id) for r in self._registrations):
            logger.info(
                "Rejected duplicate registration of %s for event %s", student, event.id
            )
            raise DuplicateRegistrationError(student.value, event.id.value)

        registered_at = self._clock()
        registration = Registration(
            id=self._next_registration_id(registered_at),
            student_name=student_name,
            student_id=student,
            event_id=event.id,
            event_name=event.name,
            registered_at=registered_at,
        )

        self._events[index] = event.book_slot()
        self._registrations.append(registration)
        try:
            self._store.save_all(self._events, self._registrations)
        except PersistenceError:
            self._events[index] = event
            self._registrations.pop()
            logger.error(
                "Registration of %s for event %s was not saved", student, event.id
            )
            raise

        logger.info(
            "Registered %s for event %s (%d slots left)",
            student,
            event.id,
            self._events[index].slots.value,
        )
        return registration

    def reset_all(self) -> None:
        """Clear both stored records and return to the uninitialized state."""
        self._store.clear()
        self._events = []
        self._registrations = []
        self._initialized = False
        logger.info("Cleared all booking records")

    def _next_registration_id(self, registered_at: datetime) -> RegistrationId:
        candidate = int(registered_at.timestamp() * 1000)
        if self._registrations:
            latest = max(r.id.value for r in self._registrations)
            if candidate <= latest:
                candidate = latest + 1
        return RegistrationId(candidate)

    def _find_index(self, event_id: int | EventId | None) -> tuple[int, Event | None]:
        if event_id is None or isinstance(event_id, bool):
            return -1, None
        if not isinstance(event_id, EventId):
            event_id = EventId(event_id)
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index, event
        return -1, None

    def _locate(self, event_id: int | EventId) -> tuple[int, Event]:
        index, event = self._find_index(event_id)
        if event is None:
            raise EventNotFoundError(getattr(event_id, "value", event_id))
        return index, event

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError(
                "RegistrationService is not initialized; call initialize() first"
            )
