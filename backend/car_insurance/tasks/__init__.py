"""
Celery application factory.
"""

from celery import Celery

celery_app = Celery("car_insurance")
celery_app.config_from_object("celeryconfig")

# Auto-discover tasks in these modules
celery_app.autodiscover_tasks([
    "car_insurance.tasks.expiration_tasks",
])
