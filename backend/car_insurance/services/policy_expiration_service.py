"""
PolicyExpirationService: one run of the expiration sweep.

A policy expires at the midnight that ends its ``end_date``.  The sweep
runs more often than hourly and looks back one hour: if that window
crossed midnight, every policy whose end date is the day just finished
has expired and gets reported once.

The expiration log table is the idempotence marker, so overlapping or
repeated runs never report the same policy twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from car_insurance.core.clock import Clock, SystemClock
from car_insurance.core.logging import get_logger
from car_insurance.db.models.insurance_policy import InsurancePolicy
from car_insurance.repositories.store import InsuranceStore

LOOKBACK_WINDOW = timedelta(hours=1)


@dataclass
class SweepResult:
    """Outcome of one sweep run."""

    ran_at: datetime
    target_date: date | None = None
    skipped: bool = False           # window did not cross midnight; store untouched
    processed_policy_ids: list[int] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return len(self.processed_policy_ids)


def build_expiration_message(policy: InsurancePolicy) -> str:
    car = policy.car
    return (
        f"Insurance policy {policy.id} for car {car.vin} (Owner: {car.owner.name}) "
        f"provided by {policy.provider} expired on {policy.end_date.isoformat()}"
    )


class PolicyExpirationService:
    def __init__(self, store: InsuranceStore, clock: Clock | None = None) -> None:
        self.store = store
        self.clock = clock or SystemClock()
        self.logger = get_logger("services.policy_expiration")

    async def process_expired_policies(self) -> SweepResult:
        now = self.clock.now()
        one_hour_ago = now - LOOKBACK_WINDOW

        if one_hour_ago.date() == now.date():
            self.logger.info(
                "No midnight transition in the last hour. No policies to process",
                process_time=now.isoformat(),
            )
            return SweepResult(ran_at=now, skipped=True)

        target_date = one_hour_ago.date()
        log = self.logger.bind(target_date=target_date.isoformat())

        expired = await self.store.find_unlogged_policies_expiring_on(target_date)
        if not expired:
            log.info("No new expired policies to process", process_time=now.isoformat())
            return SweepResult(ran_at=now, target_date=target_date)

        processed: list[int] = []
        for policy in expired:
            message = build_expiration_message(policy)
            log.warning(message, policy_id=policy.id, car_vin=policy.car.vin)
            await self.store.add_expiration_log(
                policy_id=policy.id,
                expiration_date=policy.end_date,
                processed_at=now,
                log_message=message,
            )
            processed.append(policy.id)

        await self.store.commit()
        log.info(f"Processed {len(processed)} expired policies", count=len(processed))

        return SweepResult(ran_at=now, target_date=target_date, processed_policy_ids=processed)
