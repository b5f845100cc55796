"""
ExpirationSweepScheduler: drives the policy expiration sweep on a fixed interval.

Loop semantics:
    - run the sweep, then wait ``interval_seconds`` before the next run,
      so runs never overlap
    - an exception inside a run is logged and the loop keeps going
    - ``stop()`` interrupts the wait between runs; a run already in
      progress is allowed to finish

Usage::

    scheduler = ExpirationSweepScheduler(
        run_sweep=session_scoped_sweep(async_session),
        interval_seconds=900,
    )
    scheduler.start()
    ...
    await scheduler.stop()
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from car_insurance.core.clock import Clock
from car_insurance.core.logging import get_logger
from car_insurance.repositories.store import SqlInsuranceStore
from car_insurance.services.policy_expiration_service import PolicyExpirationService, SweepResult

SweepRunner = Callable[[], Awaitable[SweepResult]]


def session_scoped_sweep(
    session_factory: async_sessionmaker[AsyncSession],
    clock: Clock | None = None,
) -> SweepRunner:
    """Build a sweep runner that opens a fresh session for every run."""

    async def run() -> SweepResult:
        async with session_factory() as session:
            service = PolicyExpirationService(SqlInsuranceStore(session), clock)
            return await service.process_expired_policies()

    return run


class ExpirationSweepScheduler:
    def __init__(self, run_sweep: SweepRunner, interval_seconds: float) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.run_sweep = run_sweep
        self.interval_seconds = interval_seconds
        self.logger = get_logger("services.expiration_scheduler")
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> SweepResult | None:
        """Run one sweep; failures are logged and reported as ``None``."""
        try:
            return await self.run_sweep()
        except Exception as exc:
            self.logger.exception(
                "Error occurred while processing expired policies",
                error=str(exc),
            )
            return None

    async def run_forever(self) -> None:
        self.logger.info("Policy expiration sweep starting", interval_seconds=self.interval_seconds)

        while not self._stop_event.is_set():
            await self.run_once()
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                continue

        self.logger.info("Policy expiration sweep stopping")

    def start(self) -> asyncio.Task:
        """Schedule the loop on the running event loop."""
        if self.is_running:
            return self._task
        self._stop_event.clear()
        self._task = asyncio.create_task(self.run_forever(), name="policy-expiration-sweep")
        return self._task

    async def stop(self) -> None:
        """Signal the loop to exit and wait for it."""
        self._stop_event.set()
        if self._task is not None:
            await self._task
            self._task = None
