"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. A store is a
pass-through codec over two named records; it keeps no copy of its own.
Single-record writes are last write wins; save_all replaces both records
as one unit.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bookings.domain import Event, Registration


class RecordStore(ABC):
    """Interface for booking record persistence operations."""

    @abstractmethod
    def load_events(self) -> list[Event] | None:
        """Return the stored events in order, or None if no record exists."""
        ...

    @abstractmethod
    def save_events(self, events: Sequence[Event]) -> None:
        """Replace the events record."""
        ...

    @abstractmethod
    def load_registrations(self) -> list[Registration] | None:
        """Return the stored registrations in order, or None if no record exists."""
        ...

    @abstractmethod
    def save_registrations(self, registrations: Sequence[Registration]) -> None:
        """Replace the registrations record."""
        ...

    @abstractmethod
    def save_all(
        self, events: Sequence[Event], registrations: Sequence[Registration]
    ) -> None:
        """Replace both records together.

        If either write fails, neither record changes.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove both records."""
        ...
