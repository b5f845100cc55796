"""Shared test fixtures for the car insurance test suite."""

from datetime import date, datetime, timezone

import pytest

from car_insurance.services.car_service import CarService
from fakes import FixedClock, InMemoryInsuranceStore


@pytest.fixture
def clock():
    """Mid-2024, well inside every seeded policy's lifetime."""
    return FixedClock(datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    """One owner, one car (id 1) insured for calendar year 2024."""
    store = InMemoryInsuranceStore()
    owner = store.add_owner(1, "Test Owner", "test@example.com")
    car = store.add_car(1, "TEST123", owner)
    store.add_policy(1, car, "TestProvider", date(2024, 1, 1), date(2024, 12, 31))
    return store


@pytest.fixture
def car_service(store, clock):
    return CarService(store, clock)


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'car_insurance.db'}"
