"""Celery application configuration."""

from celery import Celery
from celery.schedules import crontab

from foodtech.config import get_settings

settings = get_settings()

app = Celery(
    "foodtech",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["foodtech.tasks.shopping_lists", "foodtech.tasks.reminders"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone=settings.scheduler_timezone,
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
)

app.conf.beat_schedule = {
    # Mondays at midnight, school timezone
    "generate-weekly-shopping-list": {
        "task": "foodtech.tasks.shopping_lists.generate_weekly_shopping_list",
        "schedule": crontab(minute=0, hour=0, day_of_week=1),
    },
    # Every day at noon
    "send-order-reminders": {
        "task": "foodtech.tasks.reminders.send_order_reminders",
        "schedule": crontab(minute=0, hour=12),
    },
}
