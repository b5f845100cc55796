"""
Celery tasks: policy expiration sweep.

Alternative driver to the in-process scheduler for deployments that run
periodic work through Celery beat (see ``beat_schedule`` in celeryconfig).
Both drivers can run at once: already-logged policies are never reported
again.
"""

import asyncio

import structlog

from car_insurance.db.session import make_session_factory
from car_insurance.services.expiration_scheduler import session_scoped_sweep
from car_insurance.services.policy_expiration_service import SweepResult
from car_insurance.tasks import celery_app

logger = structlog.get_logger("tasks.expiration")


async def _sweep_with_fresh_engine() -> SweepResult:
    """Run one sweep on a fresh engine (avoids event loop conflicts in Celery)."""
    session_factory, engine = make_session_factory()
    try:
        return await session_scoped_sweep(session_factory)()
    finally:
        await engine.dispose()


@celery_app.task(bind=True, name="car_insurance.tasks.expiration_tasks.sweep_expired_policies")
def sweep_expired_policies(self):
    """Detect policies that expired at the last midnight and log each once."""
    task_log = logger.bind(task_id=self.request.id)
    task_log.info("Expiration sweep task started")

    result = asyncio.run(_sweep_with_fresh_engine())

    task_log.info(
        "Expiration sweep task finished",
        skipped=result.skipped,
        target_date=result.target_date.isoformat() if result.target_date else None,
        processed=result.processed_count,
    )
    return {
        "ran_at": result.ran_at.isoformat(),
        "skipped": result.skipped,
        "target_date": result.target_date.isoformat() if result.target_date else None,
        "processed_policy_ids": result.processed_policy_ids,
    }
