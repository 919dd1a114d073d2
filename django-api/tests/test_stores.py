"""Tests for record stores and the record codec.

Run with: pytest tests/test_stores.py -v
"""

from datetime import date, datetime, timezone
from unittest import mock

import pytest
from django.db import DatabaseError

from bookings.domain import (
    Capacity,
    Event,
    EventId,
    Registration,
    RegistrationId,
    StudentId,
)
from bookings.domain.errors import PersistenceError, SchemaError
from bookings.models import StoredRecord
from bookings.seed import SEED_EVENTS
from bookings.services import RegistrationService
from bookings.stores import DjangoRecordStore, MemoryRecordStore
from bookings.stores.codec import (
    decode_events,
    decode_registrations,
    encode_events,
    encode_registrations,
)

REGISTRATION = Registration(
    id=RegistrationId(1756722600000),
    student_name="Jane Doe",
    student_id=StudentId("665437"),
    event_id=EventId(2),
    event_name="Career Fair & Networking",
    registered_at=datetime(2025, 9, 1, 10, 30, tzinfo=timezone.utc),
)


def event_record(**overrides) -> dict:
    return {
        "id": 1,
        "name": "Gala",
        "date": "2025-12-24",
        "venue": "Hall",
        "slots": 1,
        **overrides,
    }


REGISTRATION_RECORD = {
    "id": 1756722600000,
    "studentName": "Jane Doe",
    "studentId": "665437",
    "eventId": 2,
    "eventName": "Career Fair & Networking",
    "registrationDate": "2025-09-01T10:30:00Z",
}


class TestCodec:
    """Tests for the persisted record layout."""

    def test_encode_events_layout(self):
        """Events are stored with the fields and order of the form."""
        assert encode_events(SEED_EVENTS[:1]) == [
            {
                "id": 1,
                "name": "Tech Innovation Summit 2025",
                "date": "2025-09-15",
                "venue": "Main Auditorium",
                "slots": 150,
            }
        ]

    def test_encode_registrations_layout(self):
        """Registrations use camelCase keys and an ISO timestamp."""
        assert encode_registrations([REGISTRATION]) == [REGISTRATION_RECORD]

    def test_decode_events(self):
        """A valid events record becomes Event models."""
        events = decode_events("events", [event_record(id=3, slots=0)])
        assert events == [
            Event(
                id=EventId(3),
                name="Gala",
                date=date(2025, 12, 24),
                venue="Hall",
                slots=Capacity(0),
            )
        ]

    def test_decode_registrations(self):
        """A valid registrations record becomes Registration models."""
        assert decode_registrations("registrations", [REGISTRATION_RECORD]) == [
            REGISTRATION
        ]

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 1},
            "events",
            [event_record(date="soon")],
            [event_record(slots=-1)],
            [{k: v for k, v in event_record().items() if k != "slots"}],
        ],
    )
    def test_decode_events_rejects_malformed(self, payload):
        """Wrong shapes and field values raise SchemaError naming the key."""
        with pytest.raises(SchemaError) as excinfo:
            decode_events("events", payload)
        assert excinfo.value.key == "events"

    def test_decode_events_rejects_duplicate_ids(self):
        """Two events may not share an id."""
        record = event_record()
        with pytest.raises(SchemaError):
            decode_events("events", [record, record])

    def test_decode_registrations_rejects_bad_student_id(self):
        """Stored student ids must be six digits."""
        with pytest.raises(SchemaError):
            decode_registrations(
                "registrations", [{**REGISTRATION_RECORD, "studentId": "12345"}]
            )

    def test_decode_registrations_rejects_duplicate_pair(self):
        """A student may appear only once per event."""
        other = {**REGISTRATION_RECORD, "id": REGISTRATION_RECORD["id"] + 1}
        with pytest.raises(SchemaError):
            decode_registrations("registrations", [REGISTRATION_RECORD, other])


class TestMemoryRecordStore:
    """Tests for MemoryRecordStore."""

    def test_absent_records_load_as_none(self):
        """Missing keys load as None rather than empty lists."""
        store = MemoryRecordStore()
        assert store.load_events() is None
        assert store.load_registrations() is None

    def test_round_trip_and_clear(self):
        """Saved records load back and clear removes them."""
        store = MemoryRecordStore()
        store.save_events(SEED_EVENTS)
        store.save_registrations([REGISTRATION])

        assert store.load_events() == list(SEED_EVENTS)
        assert store.load_registrations() == [REGISTRATION]

        store.clear()
        assert store.data == {}

    def test_invalid_json_raises_schema_error(self):
        """Unparseable text is reported as malformed data."""
        store = MemoryRecordStore()
        store.data[store.events_key] = "{not json"
        with pytest.raises(SchemaError):
            store.load_events()

    def test_save_all_restores_records_when_a_write_fails(self):
        """A failed registrations write leaves the events record as it was."""
        store = MemoryRecordStore()
        store.save_events(SEED_EVENTS)
        before = dict(store.data)

        with mock.patch.object(
            store,
            "save_registrations",
            side_effect=PersistenceError(store.registrations_key),
        ):
            with pytest.raises(PersistenceError):
                store.save_all(SEED_EVENTS[:1], [REGISTRATION])

        assert store.data == before


@pytest.mark.django_db
class TestDjangoRecordStore:
    """Tests for DjangoRecordStore."""

    def test_absent_records_load_as_none(self):
        """Missing rows load as None."""
        store = DjangoRecordStore()
        assert store.load_events() is None
        assert store.load_registrations() is None

    def test_save_writes_one_row_per_record(self):
        """Saving again replaces the row for that key."""
        store = DjangoRecordStore()
        store.save_events(SEED_EVENTS)
        store.save_events(SEED_EVENTS[:2])
        store.save_registrations([REGISTRATION])

        assert StoredRecord.objects.count() == 2
        assert StoredRecord.objects.get(key="usiu-registrations").payload == [
            REGISTRATION_RECORD
        ]
        assert store.load_events() == list(SEED_EVENTS[:2])
        assert store.load_registrations() == [REGISTRATION]

    def test_keys_come_from_settings(self, settings):
        """Record keys can be overridden in BOOKINGS settings."""
        settings.BOOKINGS = {"EVENTS_KEY": "ev", "REGISTRATIONS_KEY": "reg"}
        store = DjangoRecordStore()
        store.save_events(SEED_EVENTS)
        assert StoredRecord.objects.filter(key="ev").exists()

    def test_clear_removes_only_booking_records(self):
        """Rows under other keys survive a clear."""
        StoredRecord.objects.create(key="unrelated", payload=[])
        store = DjangoRecordStore()
        store.save_events(SEED_EVENTS)
        store.save_registrations([REGISTRATION])

        store.clear()

        assert list(StoredRecord.objects.values_list("key", flat=True)) == ["unrelated"]

    def test_corrupt_row_raises_schema_error(self):
        """A row with the wrong shape raises SchemaError."""
        StoredRecord.objects.create(key="usiu-events", payload={"broken": True})
        with pytest.raises(SchemaError):
            DjangoRecordStore().load_events()

    def test_database_error_raises_persistence_error(self):
        """Database failures surface as PersistenceError for the key."""
        store = DjangoRecordStore()
        with mock.patch.object(
            StoredRecord.objects,
            "update_or_create",
            side_effect=DatabaseError("disk full"),
        ):
            with pytest.raises(PersistenceError) as excinfo:
                store.save_events(SEED_EVENTS)
        assert excinfo.value.key == "usiu-events"

    def test_save_all_writes_nothing_when_second_write_fails(self):
        """Both records roll back together."""
        store = DjangoRecordStore()
        store.save_events(SEED_EVENTS)
        original = StoredRecord.objects.update_or_create
        calls = []

        def fail_after_first(**kwargs):
            calls.append(kwargs["key"])
            if len(calls) > 1:
                raise DatabaseError("disk full")
            return original(**kwargs)

        with mock.patch.object(
            StoredRecord.objects, "update_or_create", side_effect=fail_after_first
        ):
            with pytest.raises(PersistenceError) as excinfo:
                store.save_all(SEED_EVENTS[:1], [REGISTRATION])

        assert calls == ["usiu-events", "usiu-registrations"]
        assert excinfo.value.key == "usiu-registrations"
        assert store.load_events() == list(SEED_EVENTS)
        assert store.load_registrations() is None

    def test_failed_registration_leaves_slots_in_database(self, clock):
        """A registration that cannot be stored does not cost a slot."""
        service = RegistrationService(DjangoRecordStore(), clock=clock)
        service.initialize()
        original = StoredRecord.objects.update_or_create
        calls = []

        def fail_after_first(**kwargs):
            calls.append(kwargs["key"])
            if len(calls) > 1:
                raise DatabaseError("disk full")
            return original(**kwargs)

        with mock.patch.object(
            StoredRecord.objects, "update_or_create", side_effect=fail_after_first
        ):
            with pytest.raises(PersistenceError):
                service.register_student("Jane Doe", "665437", 2)

        reloaded = RegistrationService(DjangoRecordStore(), clock=clock)
        reloaded.initialize()
        assert reloaded.find_event(2).slots == Capacity(200)
        assert reloaded.list_registrations() == []
        assert service.find_event(2).slots == Capacity(200)
