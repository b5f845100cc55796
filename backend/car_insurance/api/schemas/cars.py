"""Car, claim and history request/response schemas."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from car_insurance.core.constants import HistoryEventType


class CarResponse(BaseModel):
    """A car with its owner, as returned by GET /cars."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    vin: str
    make: str | None
    model: str | None
    year_of_manufacture: int
    owner_id: int
    owner_name: str
    owner_email: str | None


class InsuranceValidityResponse(BaseModel):
    """Result of an insurance validity check; ``date`` echoes the query."""

    model_config = ConfigDict(from_attributes=True)

    car_id: int
    date: str
    valid: bool


class CreateClaimRequest(BaseModel):
    """Request payload for registering a claim.

    Values are checked by the service so that every rejection carries
    the same error shape.
    """

    claim_date: str | None = Field(None, examples=["2024-06-15"])
    description: str | None = None
    amount: Decimal | None = None


class ClaimResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    car_id: int
    claim_date: dt.date
    description: str
    amount: Decimal


class HistoryItem(BaseModel):
    """One timeline entry; policy fields or claim fields are set depending on ``type``."""

    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    type: HistoryEventType
    policy_id: int | None = None
    provider: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    claim_id: int | None = None
    description: str | None = None
    amount: Decimal | None = None


class CarHistoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    car_id: int
    history: list[HistoryItem]
