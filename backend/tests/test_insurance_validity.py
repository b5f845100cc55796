"""Insurance validity checks: inclusive boundaries, unknown cars, bad dates."""

import asyncio
from datetime import date

import pytest

from car_insurance.core.errors import InvalidDateFormatError, InvalidInputError, NotFoundError


@pytest.mark.parametrize(
    ("query_date", "expected"),
    [
        ("2024-01-01", True),    # exact start date
        ("2024-12-31", True),    # exact end date
        ("2024-06-15", True),
        ("2023-12-31", False),   # one day before start
        ("2025-01-01", False),   # one day after end
    ],
)
def test_validity_is_inclusive_at_both_ends(car_service, query_date, expected):
    result = asyncio.run(car_service.is_insurance_valid(1, query_date))

    assert result.valid is expected
    assert result.car_id == 1
    assert result.date == query_date


def test_unknown_car_is_not_found(car_service):
    with pytest.raises(NotFoundError) as exc_info:
        asyncio.run(car_service.is_insurance_valid(999, "2024-06-15"))

    assert str(exc_info.value) == "Car 999 not found"
    assert exc_info.value.details == {"car_id": 999}


@pytest.mark.parametrize("query_date", ["2024-02-30", "not-a-date", ""])
def test_unknown_car_is_not_found_whatever_the_date(car_service, query_date):
    with pytest.raises(NotFoundError):
        asyncio.run(car_service.is_insurance_valid(999, query_date))


@pytest.mark.parametrize("query_date", ["2024-02-30", "2023-02-29", "2024-04-31", "2024-13-01", "2024-00-10"])
def test_impossible_calendar_date_is_rejected_as_bad_format(car_service, query_date):
    with pytest.raises(InvalidDateFormatError) as exc_info:
        asyncio.run(car_service.is_insurance_valid(1, query_date))

    assert str(exc_info.value) == "Invalid date format. Use YYYY-MM-DD."
    assert exc_info.value.value == query_date


@pytest.mark.parametrize("query_date", ["2024/06/15", "20240615", "2024-6-15", "15-06-2024", "", "2024-06-15T00:00"])
def test_malformed_date_is_rejected_as_bad_format(car_service, query_date):
    with pytest.raises(InvalidDateFormatError):
        asyncio.run(car_service.is_insurance_valid(1, query_date))


def test_leap_day_is_a_real_date(car_service):
    result = asyncio.run(car_service.is_insurance_valid(1, "2024-02-29"))

    assert result.valid is True


@pytest.mark.parametrize("query_date", ["1899-12-31", "0001-01-01", "2124-06-16", "9999-12-31"])
def test_dates_outside_sane_bounds_are_rejected(car_service, query_date):
    with pytest.raises(InvalidInputError) as exc_info:
        asyncio.run(car_service.is_insurance_valid(1, query_date))

    assert not isinstance(exc_info.value, InvalidDateFormatError)
    assert str(exc_info.value) == "Date must be possible."


def test_bounds_themselves_are_accepted(car_service):
    # clock is 2024-06-15, so the upper bound is 2124-06-15
    assert asyncio.run(car_service.is_insurance_valid(1, "1900-01-01")).valid is False
    assert asyncio.run(car_service.is_insurance_valid(1, "2124-06-15")).valid is False


def test_gap_between_policies_is_uninsured(store, car_service):
    car = store.cars[1]
    store.add_policy(2, car, "OtherProvider", date(2025, 3, 1), date(2025, 12, 31))

    assert asyncio.run(car_service.is_insurance_valid(1, "2025-02-28")).valid is False
    assert asyncio.run(car_service.is_insurance_valid(1, "2025-03-01")).valid is True


def test_other_cars_policies_do_not_count(store, car_service):
    owner = store.owners[1]
    store.add_car(2, "UNINSURED1", owner)

    assert asyncio.run(car_service.is_insurance_valid(2, "2024-06-15")).valid is False
