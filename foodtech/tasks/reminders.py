"""Celery tasks for order reminders."""

import logging

from sqlalchemy.orm import Session

from foodtech.celery_app import app as celery_app
from foodtech.config import get_settings
from foodtech.database import SessionLocal
from foodtech.services.reminder_service import ReminderService

logger = logging.getLogger(__name__)


@celery_app.task
def send_order_reminders() -> dict:
    """Remind students who have not ordered for a class in the next few days.

    This task runs every day at noon via celery-beat.

    Returns:
        dict with processing statistics
    """
    db: Session = SessionLocal()
    try:
        return ReminderService(db).send_order_reminders(get_settings().reminder_lookahead_days)

    except Exception as e:
        logger.error(f"Error sending order reminders: {e}", exc_info=True)
        db.rollback()
        return {"error": str(e)}

    finally:
        db.close()
