"""
Car and owner repository: data-access operations for the cars and owners tables.
"""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from car_insurance.db.models.car import Car
from car_insurance.db.models.owner import Owner


async def create_owner(db: AsyncSession, *, name: str, email: str | None = None) -> Owner:
    """Create an owner."""
    owner = Owner(name=name.strip(), email=email.lower().strip() if email else None)
    db.add(owner)
    await db.flush()
    return owner


async def get_owner_by_email(db: AsyncSession, email: str) -> Owner | None:
    """Fetch an owner by email (case-insensitive)."""
    stmt = select(Owner).where(Owner.email == email.lower().strip()).order_by(Owner.id).limit(1)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_car(
    db: AsyncSession,
    *,
    vin: str,
    owner_id: int,
    year_of_manufacture: int,
    make: str | None = None,
    model: str | None = None,
) -> Car:
    """Create a car registered to ``owner_id``."""
    car = Car(
        vin=vin.strip().upper(),
        make=make,
        model=model,
        year_of_manufacture=year_of_manufacture,
        owner_id=owner_id,
    )
    db.add(car)
    await db.flush()
    return car


async def car_exists(db: AsyncSession, car_id: int) -> bool:
    """Return True when a car with this primary key exists."""
    stmt = select(exists().where(Car.id == car_id))
    return bool(await db.scalar(stmt))


async def get_car_by_vin(db: AsyncSession, vin: str) -> Car | None:
    """Fetch a car by VIN (case-insensitive)."""
    stmt = select(Car).where(Car.vin == vin.strip().upper())
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_cars_with_owner(db: AsyncSession) -> list[Car]:
    """List every car with its owner loaded."""
    stmt = select(Car).options(selectinload(Car.owner)).order_by(Car.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
