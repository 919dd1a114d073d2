"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from bookings.services import RegistrationService
from bookings.stores import MemoryRecordStore

FIXED_NOW = datetime(2025, 9, 1, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def memory_store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def service(memory_store: MemoryRecordStore, clock) -> RegistrationService:
    service = RegistrationService(memory_store, clock=clock)
    service.initialize()
    return service


@pytest.fixture
def allow_reset(settings):
    settings.BOOKINGS = {**settings.BOOKINGS, "ALLOW_RESET": True}
