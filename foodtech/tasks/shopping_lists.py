"""Celery tasks for shopping list generation."""

import logging

from sqlalchemy.orm import Session

from foodtech.celery_app import app as celery_app
from foodtech.database import SessionLocal
from foodtech.services.shopping_service import ShoppingService

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=3)
def generate_weekly_shopping_list(self) -> dict:
    """Store a shopping list snapshot for the upcoming week and notify teachers.

    This task runs every Monday at midnight via celery-beat.

    Returns:
        dict with the snapshot id and ingredient count
    """
    db: Session = SessionLocal()
    try:
        logger.info("Starting weekly shopping list generation")
        snapshot = ShoppingService(db).create_snapshot(generated_by="system")
        return {
            "success": True,
            "snapshot_id": snapshot.id,
            "ingredients": len(snapshot.items),
        }

    except Exception as e:
        logger.error(f"Error generating shopping list: {e}", exc_info=True)
        db.rollback()

        if self.request.retries < self.max_retries:
            raise self.retry(exc=e, countdown=60) from e

        return {"error": str(e)}

    finally:
        db.close()
