"""Car endpoints: listing, insurance validity, claims and history."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from car_insurance.api.deps import get_car_service
from car_insurance.api.schemas.cars import (
    CarHistoryResponse,
    CarResponse,
    ClaimResponse,
    CreateClaimRequest,
    InsuranceValidityResponse,
)
from car_insurance.services.car_service import CarService

router = APIRouter(prefix="/cars", tags=["Cars"])


@router.get("", response_model=list[CarResponse])
async def list_cars(service: CarService = Depends(get_car_service)) -> list[CarResponse]:
    """List all cars with their owners."""
    cars = await service.list_cars()
    return [CarResponse.model_validate(car) for car in cars]


@router.get("/{car_id}/insurance-valid", response_model=InsuranceValidityResponse)
async def is_insurance_valid(
    car_id: int,
    date: str = Query(..., description="Calendar date, YYYY-MM-DD"),
    service: CarService = Depends(get_car_service),
) -> InsuranceValidityResponse:
    """Check whether the car is insured on ``date``."""
    result = await service.is_insurance_valid(car_id, date)
    return InsuranceValidityResponse.model_validate(result)


@router.post("/{car_id}/claims", response_model=ClaimResponse, status_code=status.HTTP_201_CREATED)
async def register_claim(
    car_id: int,
    payload: CreateClaimRequest,
    service: CarService = Depends(get_car_service),
) -> ClaimResponse:
    """Register a claim against the car."""
    claim = await service.register_claim(
        car_id,
        claim_date=payload.claim_date,
        description=payload.description,
        amount=payload.amount,
    )
    return ClaimResponse.model_validate(claim)


@router.get("/{car_id}/history", response_model=CarHistoryResponse)
async def get_car_history(
    car_id: int,
    service: CarService = Depends(get_car_service),
) -> CarHistoryResponse:
    """Policy starts, policy ends and claims of the car, oldest first."""
    history = await service.get_car_history(car_id)
    return CarHistoryResponse.model_validate(history)
