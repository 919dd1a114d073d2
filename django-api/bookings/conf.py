"""App settings, read from the BOOKINGS dict in Django settings."""

from typing import Any

from django.conf import settings

DEFAULTS = {
    "EVENTS_KEY": "usiu-events",
    "REGISTRATIONS_KEY": "usiu-registrations",
    "ALLOW_RESET": False,
}


def get_setting(name: str) -> Any:
    overrides = getattr(settings, "BOOKINGS", {})
    return overrides.get(name, DEFAULTS[name])
