"""
InsuranceStore: the persistence boundary the services depend on.

Services receive an ``InsuranceStore`` explicitly instead of reaching for
a global session.  ``SqlInsuranceStore`` adapts one ``AsyncSession`` to
the protocol by delegating to the repository modules; tests substitute an
in-memory implementation.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from car_insurance.db.models.car import Car
from car_insurance.db.models.claim import Claim
from car_insurance.db.models.insurance_policy import InsurancePolicy
from car_insurance.db.models.policy_expiration_log import PolicyExpirationLog
from car_insurance.repositories import cars as car_repository
from car_insurance.repositories import claims as claim_repository
from car_insurance.repositories import expiration_logs as expiration_log_repository
from car_insurance.repositories import policies as policy_repository


class InsuranceStore(Protocol):
    async def car_exists(self, car_id: int) -> bool: ...

    async def list_cars(self) -> list[Car]: ...

    async def list_policies_for_car(self, car_id: int) -> list[InsurancePolicy]: ...

    async def list_claims_for_car(self, car_id: int) -> list[Claim]: ...

    async def has_policy_covering(self, car_id: int, on_date: date) -> bool: ...

    async def add_claim(
        self,
        *,
        car_id: int,
        claim_date: date,
        description: str,
        amount: Decimal,
    ) -> Claim: ...

    async def find_unlogged_policies_expiring_on(self, expiration_date: date) -> list[InsurancePolicy]: ...

    async def add_expiration_log(
        self,
        *,
        policy_id: int,
        expiration_date: date,
        processed_at: datetime,
        log_message: str,
    ) -> PolicyExpirationLog: ...

    async def commit(self) -> None: ...


class SqlInsuranceStore:
    """``InsuranceStore`` backed by a SQLAlchemy ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def car_exists(self, car_id: int) -> bool:
        return await car_repository.car_exists(self.session, car_id)

    async def list_cars(self) -> list[Car]:
        return await car_repository.list_cars_with_owner(self.session)

    async def list_policies_for_car(self, car_id: int) -> list[InsurancePolicy]:
        return await policy_repository.list_policies_for_car(self.session, car_id)

    async def list_claims_for_car(self, car_id: int) -> list[Claim]:
        return await claim_repository.list_claims_for_car(self.session, car_id)

    async def has_policy_covering(self, car_id: int, on_date: date) -> bool:
        return await policy_repository.has_policy_covering(self.session, car_id, on_date)

    async def add_claim(
        self,
        *,
        car_id: int,
        claim_date: date,
        description: str,
        amount: Decimal,
    ) -> Claim:
        return await claim_repository.create_claim(
            self.session,
            car_id=car_id,
            claim_date=claim_date,
            description=description,
            amount=amount,
        )

    async def find_unlogged_policies_expiring_on(self, expiration_date: date) -> list[InsurancePolicy]:
        return await policy_repository.find_unlogged_policies_expiring_on(self.session, expiration_date)

    async def add_expiration_log(
        self,
        *,
        policy_id: int,
        expiration_date: date,
        processed_at: datetime,
        log_message: str,
    ) -> PolicyExpirationLog:
        return await expiration_log_repository.create_expiration_log(
            self.session,
            policy_id=policy_id,
            expiration_date=expiration_date,
            processed_at=processed_at,
            log_message=log_message,
        )

    async def commit(self) -> None:
        await self.session.commit()
