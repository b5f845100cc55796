"""
Claim repository.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from car_insurance.db.models.claim import Claim


async def create_claim(
    db: AsyncSession,
    *,
    car_id: int,
    claim_date: date,
    description: str,
    amount: Decimal,
) -> Claim:
    """Insert a claim and flush so its id is populated."""
    claim = Claim(
        car_id=car_id,
        claim_date=claim_date,
        description=description,
        amount=amount,
    )
    db.add(claim)
    await db.flush()
    return claim


async def list_claims_for_car(db: AsyncSession, car_id: int) -> list[Claim]:
    """All claims of a car, in insertion order."""
    stmt = select(Claim).where(Claim.car_id == car_id).order_by(Claim.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
