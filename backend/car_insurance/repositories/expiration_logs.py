"""
Policy expiration log repository.
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from car_insurance.db.models.policy_expiration_log import PolicyExpirationLog


async def create_expiration_log(
    db: AsyncSession,
    *,
    policy_id: int,
    expiration_date: date,
    processed_at: datetime,
    log_message: str,
) -> PolicyExpirationLog:
    """Record that a policy's expiration has been reported."""
    entry = PolicyExpirationLog(
        policy_id=policy_id,
        expiration_date=expiration_date,
        processed_at=processed_at,
        log_message=log_message,
    )
    db.add(entry)
    await db.flush()
    return entry


async def list_expiration_logs(db: AsyncSession) -> list[PolicyExpirationLog]:
    """All expiration log rows, oldest first."""
    stmt = select(PolicyExpirationLog).order_by(PolicyExpirationLog.id)
    result = await db.execute(stmt)
    return list(result.scalars().all())
