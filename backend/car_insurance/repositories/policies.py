"""
Insurance policy repository.

Date predicates compare calendar dates only; both policy bounds are inclusive.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from car_insurance.db.models.car import Car
from car_insurance.db.models.insurance_policy import InsurancePolicy
from car_insurance.db.models.policy_expiration_log import PolicyExpirationLog


async def create_policy(
    db: AsyncSession,
    *,
    car_id: int,
    provider: str,
    start_date: date,
    end_date: date,
) -> InsurancePolicy:
    """Create a policy for ``car_id``."""
    if end_date < start_date:
        raise ValueError("Policy end date must not precede its start date")
    policy = InsurancePolicy(
        car_id=car_id,
        provider=provider.strip(),
        start_date=start_date,
        end_date=end_date,
    )
    db.add(policy)
    await db.flush()
    return policy


async def list_policies_for_car(db: AsyncSession, car_id: int) -> list[InsurancePolicy]:
    """All policies of a car, in insertion order."""
    stmt = select(InsurancePolicy).where(InsurancePolicy.car_id == car_id).order_by(InsurancePolicy.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def has_policy_covering(db: AsyncSession, car_id: int, on_date: date) -> bool:
    """True when some policy of the car has start_date <= on_date <= end_date."""
    stmt = select(
        exists().where(
            InsurancePolicy.car_id == car_id,
            InsurancePolicy.start_date <= on_date,
            InsurancePolicy.end_date >= on_date,
        )
    )
    return bool(await db.scalar(stmt))


async def find_unlogged_policies_expiring_on(
    db: AsyncSession,
    expiration_date: date,
) -> list[InsurancePolicy]:
    """
    Policies ending on ``expiration_date`` that have no expiration-log row yet.

    Car and owner are eagerly loaded for the sweep's log message.
    """
    already_logged = exists().where(PolicyExpirationLog.policy_id == InsurancePolicy.id)
    stmt = (
        select(InsurancePolicy)
        .options(selectinload(InsurancePolicy.car).selectinload(Car.owner))
        .where(InsurancePolicy.end_date == expiration_date)
        .where(~already_logged)
        .order_by(InsurancePolicy.id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())
