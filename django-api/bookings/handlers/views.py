"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.http import Http404
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookings import notifications
from bookings.conf import get_setting
from bookings.domain.errors import DomainError, ErrorCode
from bookings.handlers.serializers import (
    EventSerializer,
    NoticeSerializer,
    RegistrationFormSerializer,
    RegistrationSerializer,
)
from bookings.services import RegistrationService
from bookings.stores import DjangoRecordStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.INVALID_REGISTRATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_FULLY_BOOKED: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
    ErrorCode.SCHEMA_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.PERSISTENCE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_registration_service() -> RegistrationService:
    """Build and load the service that owns this request's booking state."""
    service = RegistrationService(DjangoRecordStore())
    service.initialize()
    return service


def render_notices(notices) -> list[dict]:
    return NoticeSerializer(notices, many=True).data


class BookingView(APIView):
    """Base handler that maps domain errors to responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            if ERROR_STATUS[exc.code] >= 500:
                logger.error("Booking request failed: %s", exc)
            return Response(
                {
                    "error": {"code": exc.code.value, "message": exc.message},
                    "messages": render_notices(notifications.for_error(exc)),
                },
                status=ERROR_STATUS[exc.code],
            )
        return super().handle_exception(exc)


class EventListView(BookingView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        service = get_registration_service()
        events = service.list_events()
        return Response({"results": EventSerializer(events, many=True).data})


class RegistrableEventListView(BookingView):
    """Handler for GET /api/events/registrable"""

    def get(self, request: Request) -> Response:
        service = get_registration_service()
        events = list(service.list_registrable_events())
        return Response({"results": EventSerializer(events, many=True).data})


class EventDetailView(BookingView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: int) -> Response:
        service = get_registration_service()
        event = service.find_event(event_id)
        return Response(EventSerializer(event).data)


class RegistrationFormView(BookingView):
    """Handler for GET /api/events/{event_id}/registration-form

    Pre-fills the registration form for an event. Nothing is booked.
    """

    def get(self, request: Request, event_id: int) -> Response:
        service = get_registration_service()
        event = service.prepare_registration(event_id)
        return Response(
            {
                "form": {
                    "studentName": "",
                    "studentId": "",
                    "selectedEvent": event.id.value,
                },
                "event": EventSerializer(event).data,
                "messages": render_notices([notifications.form_guidance(event)]),
            }
        )


class RegistrationListView(BookingView):
    """Handler for GET and POST /api/registrations"""

    def get(self, request: Request) -> Response:
        service = get_registration_service()
        registrations = service.list_registrations()
        return Response(
            {"results": RegistrationSerializer(registrations, many=True).data}
        )

    def post(self, request: Request) -> Response:
        form = RegistrationFormSerializer(data=request.data)
        form.is_valid(raise_exception=True)

        service = get_registration_service()
        registration = service.register_student(
            form.validated_data["studentName"],
            form.validated_data["studentId"],
            form.validated_data["selectedEvent"],
        )
        return Response(
            {
                "registration": RegistrationSerializer(registration).data,
                "event": EventSerializer(
                    service.find_event(registration.event_id)
                ).data,
                "messages": render_notices(
                    notifications.registration_confirmed(registration)
                ),
            },
            status=status.HTTP_201_CREATED,
        )


class ResetView(BookingView):
    """Handler for POST /api/reset

    Clears all stored bookings and reloads the built-in catalog.
    """

    def post(self, request: Request) -> Response:
        if not get_setting("ALLOW_RESET"):
            raise Http404
        service = RegistrationService(DjangoRecordStore())
        service.reset_all()
        service.initialize()
        return Response(
            {
                "results": EventSerializer(service.list_events(), many=True).data,
                "messages": render_notices(
                    [notifications.success("All data reset.")]
                ),
            }
        )
