"""
Celery configuration for the car insurance background tasks.

Loaded by `celery_app.config_from_object("celeryconfig")` in car_insurance/tasks/__init__.py.
All broker/result-backend URLs come from environment variables,
defaulting to localhost for local dev.
"""

import os

# ═══════════════════════════════════════════════════════════
#  Broker & Result Backend
# ═══════════════════════════════════════════════════════════

broker_url = os.getenv("CELERY_BROKER_URL", "redis://localhost:6379/0")
result_backend = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/1")

# ═══════════════════════════════════════════════════════════
#  Serialization: JSON only
# ═══════════════════════════════════════════════════════════

task_serializer = "json"
result_serializer = "json"
accept_content = ["json"]

# ═══════════════════════════════════════════════════════════
#  Timezone
# ═══════════════════════════════════════════════════════════

timezone = "UTC"
enable_utc = True

# ═══════════════════════════════════════════════════════════
#  Task Execution
# ═══════════════════════════════════════════════════════════

# Acknowledge tasks AFTER they complete
task_acks_late = True
task_reject_on_worker_lost = True

worker_prefetch_multiplier = 1

# A sweep is a single indexed query plus a handful of inserts
task_soft_time_limit = 300
task_time_limit = 330

# ═══════════════════════════════════════════════════════════
#  Result Expiry: auto-clean after 24h
# ═══════════════════════════════════════════════════════════

result_expires = 86400

task_default_queue = "default"

# ═══════════════════════════════════════════════════════════
#  Beat Schedule (periodic tasks)
# ═══════════════════════════════════════════════════════════
# Run with: celery -A car_insurance.tasks beat
# Set EXPIRATION_SWEEP_ENABLED=false on the API when beat drives the sweep.

beat_schedule = {
    "sweep-expired-policies": {
        "task": "car_insurance.tasks.expiration_tasks.sweep_expired_policies",
        "schedule": float(os.getenv("EXPIRATION_SWEEP_INTERVAL_SECONDS", "900")),
    },
}
