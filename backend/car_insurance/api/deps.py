"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from car_insurance.db.session import get_db as _get_db
from car_insurance.repositories.store import InsuranceStore, SqlInsuranceStore
from car_insurance.services.car_service import CarService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


async def get_store(db: AsyncSession = Depends(get_db)) -> InsuranceStore:
    """Wrap the request-scoped session in the store interface."""
    return SqlInsuranceStore(db)


async def get_car_service(store: InsuranceStore = Depends(get_store)) -> CarService:
    """Build a CarService for the current request."""
    return CarService(store)
