"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateField()
    venue = serializers.CharField()
    slots = serializers.IntegerField(source="slots.value")
    fullyBooked = serializers.BooleanField(source="is_fully_booked")


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.IntegerField(source="id.value")
    studentName = serializers.CharField(source="student_name")
    studentId = serializers.CharField(source="student_id.value")
    eventId = serializers.IntegerField(source="event_id.value")
    eventName = serializers.CharField(source="event_name")
    registrationDate = serializers.DateTimeField(source="registered_at")


class FormValueField(serializers.CharField):
    """Form text that never fails on its own.

    Nulls and values that are not text become None, which the domain
    validator reports as a missing field.
    """

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_blank", True)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("default", "")
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (str, int, float)):
            return None
        return super().to_internal_value(data)


class RegistrationFormSerializer(serializers.Serializer):
    """Raw registration form input.

    Format rules are applied by the domain validator so every violation is
    reported with its user-facing message; this only collects the fields.
    """

    studentName = FormValueField()
    studentId = FormValueField()
    selectedEvent = FormValueField()


class NoticeSerializer(serializers.Serializer):
    """Serializer for transient notices."""

    level = serializers.CharField(source="level.value")
    title = serializers.CharField(allow_null=True)
    text = serializers.CharField()
    displaySeconds = serializers.IntegerField(source="display_seconds")
    details = serializers.SerializerMethodField()

    def get_details(self, notice) -> list[dict[str, str]]:
        return [{"label": label, "value": value} for label, value in notice.details]
