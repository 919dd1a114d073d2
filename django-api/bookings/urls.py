from django.urls import path

from bookings.handlers import (
    EventDetailView,
    EventListView,
    RegistrableEventListView,
    RegistrationFormView,
    RegistrationListView,
    ResetView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path(
        "events/registrable",
        RegistrableEventListView.as_view(),
        name="event-registrable",
    ),
    path("events/<int:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<int:event_id>/registration-form",
        RegistrationFormView.as_view(),
        name="registration-form",
    ),
    path("registrations", RegistrationListView.as_view(), name="registration-list"),
    path("reset", ResetView.as_view(), name="reset"),
]
