from bookings.handlers.views import (
    EventDetailView,
    EventListView,
    RegistrableEventListView,
    RegistrationFormView,
    RegistrationListView,
    ResetView,
)

__all__ = [
    "EventListView",
    "RegistrableEventListView",
    "EventDetailView",
    "RegistrationFormView",
    "RegistrationListView",
    "ResetView",
]
