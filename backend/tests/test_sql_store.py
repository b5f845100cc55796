"""SqlInsuranceStore and repositories against a real (SQLite) database."""

import asyncio
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from car_insurance.core.errors import InvalidInputError
from car_insurance.repositories import cars as car_repository
from car_insurance.repositories import expiration_logs as expiration_log_repository
from car_insurance.repositories import policies as policy_repository
from car_insurance.repositories.store import SqlInsuranceStore
from car_insurance.services.car_service import CarService
from car_insurance.services.expiration_scheduler import session_scoped_sweep
from fakes import FixedClock, sqlite_session_factory


async def _seed(session):
    owner = await car_repository.create_owner(session, name="Test Owner", email="Test@Example.com")
    car = await car_repository.create_car(
        session, vin="test12345", make="Toyota", model="Camry", year_of_manufacture=2020, owner_id=owner.id
    )
    policy = await policy_repository.create_policy(
        session, car_id=car.id, provider="Garanti", start_date=date(2023, 1, 1), end_date=date(2024, 1, 1)
    )
    await session.commit()
    return owner, car, policy


def test_policy_coverage_boundaries(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, _ = await _seed(session)
                store = SqlInsuranceStore(session)
                return car.id, [
                    await store.has_policy_covering(car.id, date(2022, 12, 31)),
                    await store.has_policy_covering(car.id, date(2023, 1, 1)),
                    await store.has_policy_covering(car.id, date(2024, 1, 1)),
                    await store.has_policy_covering(car.id, date(2024, 1, 2)),
                    await store.has_policy_covering(car.id + 1, date(2023, 6, 1)),
                ]

    _, coverage = asyncio.run(scenario())

    assert coverage == [False, True, True, False, False]


def test_car_lookup_and_listing(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, _ = await _seed(session)

            async with factory() as session:
                store = SqlInsuranceStore(session)
                cars = await store.list_cars()
                return (
                    await store.car_exists(car.id),
                    await store.car_exists(999),
                    [(c.vin, c.owner.name, c.owner.email) for c in cars],
                    (await car_repository.get_car_by_vin(session, "TEST12345")).id == car.id,
                )

    exists, missing, listed, found_by_vin = asyncio.run(scenario())

    assert exists is True
    assert missing is False
    assert listed == [("TEST12345", "Test Owner", "test@example.com")]
    assert found_by_vin is True


def test_policy_end_before_start_is_refused(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, _ = await _seed(session)
                await policy_repository.create_policy(
                    session, car_id=car.id, provider="X", start_date=date(2024, 5, 1), end_date=date(2024, 4, 30)
                )

    with pytest.raises(ValueError):
        asyncio.run(scenario())


def test_claim_registration_round_trip(sqlite_url):
    clock = FixedClock(datetime(2024, 6, 15, 9, 0, tzinfo=timezone.utc))

    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, _ = await _seed(session)
                car_id = car.id
                service = CarService(SqlInsuranceStore(session), clock)
                created = await service.register_claim(
                    car_id, claim_date="2024-02-10", description=" Hail damage ", amount=Decimal("800.25")
                )

            async with factory() as session:
                history = await CarService(SqlInsuranceStore(session), clock).get_car_history(car_id)
                return created, history

    created, history = asyncio.run(scenario())

    assert created.id is not None
    assert created.description == "Hail damage"
    assert [e.type.value for e in history.history] == ["PolicyStart", "PolicyEnd", "Claim"]
    assert history.history[-1].claim_id == created.id
    assert history.history[-1].amount == Decimal("800.25")


def test_sweep_is_idempotent_against_the_database(sqlite_url):
    clock = FixedClock(datetime(2024, 1, 2, 0, 30, tzinfo=timezone.utc))

    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                await _seed(session)

            sweep = session_scoped_sweep(factory, clock)
            first = await sweep()
            second = await sweep()

            async with factory() as session:
                logs = await expiration_log_repository.list_expiration_logs(session)
                return first, second, [(log.policy_id, log.expiration_date, log.log_message) for log in logs]

    first, second, logs = asyncio.run(scenario())

    assert first.processed_count == 1
    assert second.processed_count == 0
    assert len(logs) == 1
    policy_id, expiration_date, message = logs[0]
    assert expiration_date == date(2024, 1, 1)
    assert message == (
        f"Insurance policy {policy_id} for car TEST12345 (Owner: Test Owner) "
        "provided by Garanti expired on 2024-01-01"
    )


def test_unlogged_query_excludes_logged_policies(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, policy = await _seed(session)
                second = await policy_repository.create_policy(
                    session, car_id=car.id, provider="Allianz", start_date=date(2023, 6, 1), end_date=date(2024, 1, 1)
                )
                await expiration_log_repository.create_expiration_log(
                    session,
                    policy_id=policy.id,
                    expiration_date=policy.end_date,
                    processed_at=datetime(2024, 1, 2, 0, 15, tzinfo=timezone.utc),
                    log_message="Already processed",
                )
                await session.commit()
                second_id = second.id

            async with factory() as session:
                pending = await policy_repository.find_unlogged_policies_expiring_on(session, date(2024, 1, 1))
                return second_id, [(p.id, p.car.vin, p.car.owner.name) for p in pending]

    second_id, pending = asyncio.run(scenario())

    assert pending == [(second_id, "TEST12345", "Test Owner")]


def test_second_log_row_for_a_policy_violates_unique_constraint(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, _, policy = await _seed(session)
                for _ in range(2):
                    await expiration_log_repository.create_expiration_log(
                        session,
                        policy_id=policy.id,
                        expiration_date=policy.end_date,
                        processed_at=datetime(2024, 1, 2, 0, 15, tzinfo=timezone.utc),
                        log_message="duplicate",
                    )

    with pytest.raises(IntegrityError):
        asyncio.run(scenario())


def test_claim_amount_survives_the_numeric_column(sqlite_url):
    clock = FixedClock(datetime(2024, 6, 15, 9, 0, tzinfo=timezone.utc))

    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                _, car, _ = await _seed(session)
                car_id = car.id
                service = CarService(SqlInsuranceStore(session), clock)
                with pytest.raises(InvalidInputError):
                    await service.register_claim(
                        car_id, claim_date="2024-02-10", description="Chip", amount=Decimal("0.004")
                    )
                created = await service.register_claim(
                    car_id, claim_date="2024-02-10", description="Chip", amount=Decimal("19.9")
                )

            async with factory() as session:
                history = await CarService(SqlInsuranceStore(session), clock).get_car_history(car_id)
                return created, [e for e in history.history if e.claim_id is not None]

    created, stored_claims = asyncio.run(scenario())

    assert len(stored_claims) == 1
    assert stored_claims[0].amount > 0
    assert stored_claims[0].amount == created.amount == Decimal("19.90")
