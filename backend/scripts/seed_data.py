"""
Seed demo owners, cars and policies for development.
Run: python -m scripts.seed_data  (from backend/)
"""

import asyncio
from datetime import date

from car_insurance.db.session import async_session
from car_insurance.repositories.cars import create_car, create_owner, get_car_by_vin, get_owner_by_email
from car_insurance.repositories.policies import create_policy


SEED_OWNERS = [
    {
        "name": "Ana Pop",
        "email": "ana.pop@example.com",
        "cars": [
            {
                "vin": "VIN12345",
                "make": "Dacia",
                "model": "Logan",
                "year_of_manufacture": 2018,
                "policies": [
                    {"provider": "Allianz", "start_date": date(2024, 1, 1), "end_date": date(2024, 12, 31)},
                    {"provider": "Groupama", "start_date": date(2025, 1, 1), "end_date": date(2025, 12, 31)},
                ],
            },
        ],
    },
    {
        "name": "Bogdan Ionescu",
        "email": "bogdan.ionescu@example.com",
        "cars": [
            {
                "vin": "VIN67890",
                "make": "VW",
                "model": "Golf",
                "year_of_manufacture": 2021,
                "policies": [
                    {"provider": "Allianz", "start_date": date(2025, 3, 1), "end_date": date(2025, 9, 30)},
                ],
            },
        ],
    },
]


async def seed(session_factory=async_session):
    """Insert seed data; owners are matched by email and existing VINs are skipped."""
    async with session_factory() as session:
        for owner_data in SEED_OWNERS:
            owner = await get_owner_by_email(session, owner_data["email"])
            if owner is None:
                owner = await create_owner(session, name=owner_data["name"], email=owner_data["email"])
            for car_data in owner_data["cars"]:
                if await get_car_by_vin(session, car_data["vin"]) is not None:
                    print(f"  Skipped existing car: {car_data['vin']}")
                    continue
                car = await create_car(
                    session,
                    vin=car_data["vin"],
                    make=car_data["make"],
                    model=car_data["model"],
                    year_of_manufacture=car_data["year_of_manufacture"],
                    owner_id=owner.id,
                )
                for policy_data in car_data["policies"]:
                    await create_policy(session, car_id=car.id, **policy_data)
                print(f"  Created car: {car.vin} ({owner.name}, {len(car_data['policies'])} policies)")
        await session.commit()
    print(f"Seeded {len(SEED_OWNERS)} owners.")


if __name__ == "__main__":
    asyncio.run(seed())
