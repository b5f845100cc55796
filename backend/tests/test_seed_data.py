import asyncio

from sqlalchemy import func, select

from car_insurance.db.models.owner import Owner
from car_insurance.repositories import cars as car_repository
from fakes import sqlite_session_factory
from scripts.seed_data import SEED_OWNERS, seed


def test_seeding_twice_reuses_owners_and_cars(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            await seed(factory)
            await seed(factory)

            async with factory() as session:
                owner_count = await session.scalar(select(func.count()).select_from(Owner))
                cars = await car_repository.list_cars_with_owner(session)
                return owner_count, [(car.vin, car.owner.email) for car in cars]

    owner_count, cars = asyncio.run(scenario())

    assert owner_count == len(SEED_OWNERS)
    assert cars == [("VIN12345", "ana.pop@example.com"), ("VIN67890", "bogdan.ionescu@example.com")]


def test_owner_lookup_ignores_email_case(sqlite_url):
    async def scenario():
        async with sqlite_session_factory(sqlite_url) as factory:
            async with factory() as session:
                owner = await car_repository.create_owner(session, name="Ana Pop", email="ana.pop@example.com")
                await session.commit()
                found = await car_repository.get_owner_by_email(session, " Ana.Pop@Example.COM ")
                missing = await car_repository.get_owner_by_email(session, "nobody@example.com")
                return owner.id, found.id, missing

    owner_id, found_id, missing = asyncio.run(scenario())

    assert found_id == owner_id
    assert missing is None
