"""Record codec for the persisted events and registrations layouts.

Decoding validates every item with a DRF serializer and checks the
collection-level invariants (unique event ids, one registration per
student and event). Anything else raises SchemaError.
"""

from collections.abc import Iterable
from typing import Any

from rest_framework import serializers

from bookings.domain import (
    Capacity,
    Event,
    EventId,
    Registration,
    RegistrationId,
    StudentId,
)
from bookings.domain.errors import SchemaError


class EventRecordSerializer(serializers.Serializer):
    """Persisted layout of one event."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    date = serializers.DateField()
    venue = serializers.CharField()
    slots = serializers.IntegerField(min_value=0)


class RegistrationRecordSerializer(serializers.Serializer):
    """Persisted layout of one registration."""

    id = serializers.IntegerField()
    studentName = serializers.CharField()
    studentId = serializers.CharField()
    eventId = serializers.IntegerField()
    eventName = serializers.CharField()
    registrationDate = serializers.DateTimeField()

    def validate_studentId(self, value: str) -> str:
        try:
            StudentId(value)
        except ValueError as exc:
            raise serializers.ValidationError(str(exc)) from exc
        return value


def encode_events(events: Iterable[Event]) -> list[dict[str, Any]]:
    records = [
        {
            "id": event.id.value,
            "name": event.name,
            "date": event.date,
            "venue": event.venue,
            "slots": event.slots.value,
        }
        for event in events
    ]
    return [dict(item) for item in EventRecordSerializer(records, many=True).data]


def encode_registrations(
    registrations: Iterable[Registration],
) -> list[dict[str, Any]]:
    records = [
        {
            "id": registration.id.value,
            "studentName": registration.student_name,
            "studentId": registration.student_id.value,
            "eventId": registration.event_id.value,
            "eventName": registration.event_name,
            "registrationDate": registration.registered_at,
        }
        for registration in registrations
    ]
    return [
        dict(item) for item in RegistrationRecordSerializer(records, many=True).data
    ]


def decode_events(key: str, payload: Any) -> list[Event]:
    """Decode the events record stored under key.

    Raises:
        SchemaError: If the payload is not a list of valid, uniquely
            identified events.
    """
    serializer = EventRecordSerializer(data=payload, many=True)
    if not serializer.is_valid():
        raise SchemaError(key, serializer.errors)

    events = [
        Event(
            id=EventId(item["id"]),
            name=item["name"],
            date=item["date"],
            venue=item["venue"],
            slots=Capacity(item["slots"]),
        )
        for item in serializer.validated_data
    ]

    seen = set()
    for event in events:
        if event.id in seen:
            raise SchemaError(key, f"duplicate event id {event.id}")
        seen.add(event.id)
    return events


def decode_registrations(key: str, payload: Any) -> list[Registration]:
    """Decode the registrations record stored under key.

    Raises:
        SchemaError: If the payload is not a list of valid registrations
            or repeats a student and event pair.
    """
    serializer = RegistrationRecordSerializer(data=payload, many=True)
    if not serializer.is_valid():
        raise SchemaError(key, serializer.errors)

    registrations = [
        Registration(
            id=RegistrationId(item["id"]),
            student_name=item["studentName"],
            student_id=StudentId(item["studentId"]),
            event_id=EventId(item["eventId"]),
            event_name=item["eventName"],
            registered_at=item["registrationDate"],
        )
        for item in serializer.validated_data
    ]

    seen = set()
    for registration in registrations:
        pair = (registration.student_id, registration.event_id)
        if pair in seen:
            raise SchemaError(
                key,
                f"duplicate registration of {registration.student_id} "
                f"for event {registration.event_id}",
            )
        seen.add(pair)
    return registrations
