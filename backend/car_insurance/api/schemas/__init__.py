"""API schema package."""

from car_insurance.api.schemas.cars import (
    CarHistoryResponse,
    CarResponse,
    ClaimResponse,
    CreateClaimRequest,
    HistoryItem,
    InsuranceValidityResponse,
)

__all__ = [
    "CarResponse",
    "InsuranceValidityResponse",
    "CreateClaimRequest",
    "ClaimResponse",
    "HistoryItem",
    "CarHistoryResponse",
]
