"""
CarService: read and write operations on a single car's insurance record.

Answers:
    - which cars exist (with their owners)
    - whether a car is insured on a given date
    - registering a claim against a car
    - the car's merged policy/claim history timeline

All persistence goes through the injected ``InsuranceStore``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from car_insurance.core.clock import Clock, SystemClock
from car_insurance.core.config import settings
from car_insurance.core.constants import HistoryEventType
from car_insurance.core.dates import add_years, parse_iso_date
from car_insurance.core.errors import InvalidInputError, NotFoundError
from car_insurance.core.logging import get_logger
from car_insurance.db.models.claim import Claim
from car_insurance.repositories.store import InsuranceStore

# Claim amounts are stored as NUMERIC(12, 2).
AMOUNT_STEP = Decimal("0.01")
MAX_CLAIM_AMOUNT = Decimal("9999999999.99")


@dataclass
class CarSummary:
    """A car together with its owner's contact details."""

    id: int
    vin: str
    make: str | None
    model: str | None
    year_of_manufacture: int
    owner_id: int
    owner_name: str
    owner_email: str | None


@dataclass
class InsuranceValidity:
    car_id: int
    date: str                       # echoed verbatim from the request
    valid: bool


@dataclass
class HistoryEvent:
    """One dated entry in a car's timeline."""

    date: date
    type: HistoryEventType
    policy_id: int | None = None
    provider: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    claim_id: int | None = None
    description: str | None = None
    amount: Decimal | None = None


@dataclass
class CarHistory:
    car_id: int
    history: list[HistoryEvent] = field(default_factory=list)


class CarService:
    """
    Query and registration operations for cars.

    Usage::

        service = CarService(SqlInsuranceStore(session))
        result = await service.is_insurance_valid(1, "2024-06-15")
    """

    def __init__(
        self,
        store: InsuranceStore,
        clock: Clock | None = None,
        *,
        min_valid_date: date | None = None,
        max_years_ahead: int | None = None,
    ) -> None:
        self.store = store
        self.clock = clock or SystemClock()
        self.min_valid_date = min_valid_date or settings.MIN_VALID_DATE
        self.max_years_ahead = max_years_ahead if max_years_ahead is not None else settings.MAX_VALID_YEARS_AHEAD
        self.logger = get_logger("services.car")

    async def list_cars(self) -> list[CarSummary]:
        cars = await self.store.list_cars()
        return [
            CarSummary(
                id=car.id,
                vin=car.vin,
                make=car.make,
                model=car.model,
                year_of_manufacture=car.year_of_manufacture,
                owner_id=car.owner_id,
                owner_name=car.owner.name,
                owner_email=car.owner.email,
            )
            for car in cars
        ]

    async def is_insurance_valid(self, car_id: int, date_str: str) -> InsuranceValidity:
        """
        Check whether ``car_id`` is covered on ``date_str`` (YYYY-MM-DD).

        The car is looked up before the date is parsed, so an unknown car
        is reported as not found whatever the date looks like.

        Raises:
            NotFoundError: the car does not exist.
            InvalidDateFormatError: the date is malformed or impossible.
            InvalidInputError: the date is outside the accepted range.
        """
        await self._require_car(car_id)

        on_date = parse_iso_date(date_str)
        max_valid_date = add_years(self.clock.today(), self.max_years_ahead)
        if on_date < self.min_valid_date or on_date > max_valid_date:
            raise InvalidInputError(
                "Date must be possible.",
                details={
                    "date": date_str,
                    "min": self.min_valid_date.isoformat(),
                    "max": max_valid_date.isoformat(),
                },
            )

        valid = await self.store.has_policy_covering(car_id, on_date)
        return InsuranceValidity(car_id=car_id, date=date_str, valid=valid)

    async def register_claim(
        self,
        car_id: int,
        *,
        claim_date: str,
        description: str | None,
        amount: Decimal | None,
    ) -> Claim:
        """
        Validate and persist a new claim for ``car_id``.

        Rules, checked in order: car exists, date parses, date is not in
        the future, amount is positive and fits the stored precision,
        description is not blank.
        """
        await self._require_car(car_id)

        parsed_date = parse_iso_date(claim_date, "Invalid claim date format. Use YYYY-MM-DD.")
        if parsed_date > self.clock.today():
            raise InvalidInputError(
                "Claim date cannot be in the future.",
                details={"claim_date": claim_date},
            )

        if amount is None or not amount.is_finite() or amount <= 0:
            raise InvalidInputError(
                "Claim amount must be greater than zero.",
                details={"amount": str(amount)},
            )
        if amount > MAX_CLAIM_AMOUNT:
            raise InvalidInputError(
                f"Claim amount must not exceed {MAX_CLAIM_AMOUNT}.",
                details={"amount": str(amount)},
            )
        if amount != amount.quantize(AMOUNT_STEP):
            raise InvalidInputError(
                "Claim amount must have at most two decimal places.",
                details={"amount": str(amount)},
            )
        amount = amount.quantize(AMOUNT_STEP)

        if description is None or not description.strip():
            raise InvalidInputError("Claim description is required.")

        claim = await self.store.add_claim(
            car_id=car_id,
            claim_date=parsed_date,
            description=description.strip(),
            amount=amount,
        )
        await self.store.commit()

        self.logger.info(
            "Claim registered",
            car_id=car_id,
            claim_id=claim.id,
            claim_date=parsed_date.isoformat(),
            amount=str(amount),
        )
        return claim

    async def get_car_history(self, car_id: int) -> CarHistory:
        """
        Merge policy starts, policy ends and claims into one timeline.

        Events are sorted by date; events sharing a date keep the order
        starts, ends, claims (and store order within each group).
        """
        await self._require_car(car_id)

        policies = await self.store.list_policies_for_car(car_id)
        claims = await self.store.list_claims_for_car(car_id)

        events: list[HistoryEvent] = []
        events.extend(
            HistoryEvent(
                date=p.start_date,
                type=HistoryEventType.POLICY_START,
                policy_id=p.id,
                provider=p.provider,
                start_date=p.start_date,
                end_date=p.end_date,
            )
            for p in policies
        )
        events.extend(
            HistoryEvent(
                date=p.end_date,
                type=HistoryEventType.POLICY_END,
                policy_id=p.id,
                provider=p.provider,
                start_date=p.start_date,
                end_date=p.end_date,
            )
            for p in policies
        )
        events.extend(
            HistoryEvent(
                date=c.claim_date,
                type=HistoryEventType.CLAIM,
                claim_id=c.id,
                description=c.description,
                amount=c.amount,
            )
            for c in claims
        )

        return CarHistory(car_id=car_id, history=sorted(events, key=lambda e: e.date))

    async def _require_car(self, car_id: int) -> None:
        if not await self.store.car_exists(car_id):
            raise NotFoundError(f"Car {car_id} not found", details={"car_id": car_id})
