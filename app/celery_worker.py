# app/celery_worker.py
from celery import Celery

from app.utils.settings import get_settings

settings = get_settings()

celery_app = Celery(
    "shop",
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
)

# import tasks explicitly so the worker registers them
celery_app.conf.imports = (
    "app.services.notification_service",
)

celery_app.conf.task_always_eager = settings.celery_task_always_eager
celery_app.conf.timezone = "UTC"
