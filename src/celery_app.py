"""Celery application configuration."""

from celery import Celery

from src.config import get_settings

settings = get_settings()

app = Celery(
    "pokedex_api",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["src.tasks.search_history"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_ignore_result=True,
    task_time_limit=60,
    task_soft_time_limit=45,
    # Publishing happens inside requests; give up quickly if the broker is down
    task_publish_retry_policy={
        "max_retries": 1,
        "interval_start": 0,
        "interval_step": 0.2,
        "interval_max": 0.5,
    },
)
