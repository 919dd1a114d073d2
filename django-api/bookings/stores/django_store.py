"""Django ORM implementation of the RecordStore.

Each named record is one StoredRecord row holding the encoded JSON list.
"""

import logging
from collections.abc import Sequence
from typing import Any

from django.db import DatabaseError, transaction

from bookings.conf import get_setting
from bookings.domain import Event, Registration
from bookings.domain.errors import PersistenceError
from bookings.models import StoredRecord
from bookings.stores.codec import (
    decode_events,
    decode_registrations,
    encode_events,
    encode_registrations,
)
from bookings.stores.interfaces import RecordStore

logger = logging.getLogger(__name__)


class DjangoRecordStore(RecordStore):
    """Database-backed record store using the Django ORM."""

    def __init__(
        self, events_key: str | None = None, registrations_key: str | None = None
    ) -> None:
        self.events_key = events_key or get_setting("EVENTS_KEY")
        self.registrations_key = registrations_key or get_setting("REGISTRATIONS_KEY")

    def load_events(self) -> list[Event] | None:
        payload = self._read(self.events_key)
        if payload is None:
            return None
        return decode_events(self.events_key, payload)

    def save_events(self, events: Sequence[Event]) -> None:
        self._write((self.events_key, encode_events(events)))

    def load_registrations(self) -> list[Registration] | None:
        payload = self._read(self.registrations_key)
        if payload is None:
            return None
        return decode_registrations(self.registrations_key, payload)

    def save_registrations(self, registrations: Sequence[Registration]) -> None:
        self._write((self.registrations_key, encode_registrations(registrations)))

    def save_all(
        self, events: Sequence[Event], registrations: Sequence[Registration]
    ) -> None:
        self._write(
            (self.events_key, encode_events(events)),
            (self.registrations_key, encode_registrations(registrations)),
        )

    def clear(self) -> None:
        try:
            StoredRecord.objects.filter(
                key__in=[self.events_key, self.registrations_key]
            ).delete()
        except DatabaseError as exc:
            logger.exception("Failed to clear booking records")
            raise PersistenceError(self.events_key) from exc

    def _read(self, key: str) -> Any:
        try:
            record = StoredRecord.objects.filter(key=key).first()
        except DatabaseError as exc:
            logger.exception("Failed to read record %s", key)
            raise PersistenceError(key) from exc
        return None if record is None else record.payload

    def _write(self, *records: tuple[str, list[dict[str, Any]]]) -> None:
        key = None
        try:
            with transaction.atomic():
                for key, payload in records:
                    StoredRecord.objects.update_or_create(
                        key=key, defaults={"payload": payload}
                    )
        except DatabaseError as exc:
            logger.exception("Failed to write record %s", key)
            raise PersistenceError(key) from exc
