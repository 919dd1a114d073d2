from bookings.stores.django_store import DjangoRecordStore
from bookings.stores.interfaces import RecordStore
from bookings.stores.memory_store import MemoryRecordStore

__all__ = ["RecordStore", "DjangoRecordStore", "MemoryRecordStore"]
