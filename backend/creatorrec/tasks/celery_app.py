"""Celery application configuration."""

from celery import Celery

from creatorrec.config import get_settings

settings = get_settings()

celery_app = Celery(
    "creatorrec",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=[
        "creatorrec.tasks.recommendation_tasks",
    ],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="Africa/Nairobi",
    task_track_started=True,
    task_time_limit=600,
    task_soft_time_limit=540,
    worker_prefetch_multiplier=1,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
)
