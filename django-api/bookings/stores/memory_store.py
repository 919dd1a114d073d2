"""In-memory RecordStore holding JSON text per key, like browser local storage."""

import json
from collections.abc import Sequence

from bookings.conf import DEFAULTS
from bookings.domain import Event, Registration
from bookings.domain.errors import PersistenceError, SchemaError
from bookings.stores.codec import (
    decode_events,
    decode_registrations,
    encode_events,
    encode_registrations,
)
from bookings.stores.interfaces import RecordStore

DEFAULT_EVENTS_KEY = DEFAULTS["EVENTS_KEY"]
DEFAULT_REGISTRATIONS_KEY = DEFAULTS["REGISTRATIONS_KEY"]


class MemoryRecordStore(RecordStore):
    """Process-local record store. `data` maps record keys to JSON text."""

    def __init__(
        self,
        events_key: str = DEFAULT_EVENTS_KEY,
        registrations_key: str = DEFAULT_REGISTRATIONS_KEY,
    ) -> None:
        self.events_key = events_key
        self.registrations_key = registrations_key
        self.data: dict[str, str] = {}

    def load_events(self) -> list[Event] | None:
        if self.events_key not in self.data:
            return None
        return decode_events(self.events_key, self._parse(self.events_key))

    def save_events(self, events: Sequence[Event]) -> None:
        self.data[self.events_key] = json.dumps(encode_events(events))

    def load_registrations(self) -> list[Registration] | None:
        if self.registrations_key not in self.data:
            return None
        return decode_registrations(
            self.registrations_key, self._parse(self.registrations_key)
        )

    def save_registrations(self, registrations: Sequence[Registration]) -> None:
        self.data[self.registrations_key] = json.dumps(
            encode_registrations(registrations)
        )

    def save_all(
        self, events: Sequence[Event], registrations: Sequence[Registration]
    ) -> None:
        snapshot = dict(self.data)
        try:
            self.save_events(events)
            self.save_registrations(registrations)
        except PersistenceError:
            self.data.clear()
            self.data.update(snapshot)
            raise

    def clear(self) -> None:
        self.data.pop(self.events_key, None)
        self.data.pop(self.registrations_key, None)

    def _parse(self, key: str) -> object:
        try:
            return json.loads(self.data[key])
        except json.JSONDecodeError as exc:
            raise SchemaError(key, str(exc)) from exc
