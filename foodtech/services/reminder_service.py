"""Reminder service for students who have not ordered yet."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from foodtech.models.enums import UserRole
from foodtech.models.order import Order
from foodtech.models.school_class import SchoolClass
from foodtech.models.user import User
from foodtech.services.aggregation import to_utc
from foodtech.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class ReminderService:
    """Service for order reminder notifications."""

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.db = db
        self.notification_service = notification_service or NotificationService(db)

    def find_students_without_orders(
        self,
        school_class: SchoolClass,
        start: datetime,
        end: datetime,
    ) -> list[User]:
        """Students of a class with no order dated inside ``[start, end]``."""
        submitted = {
            student_id
            for (student_id,) in self.db.query(Order.student_id)
            .filter(
                Order.class_id == school_class.id,
                Order.date >= start,
                Order.date <= end,
            )
            .distinct()
            .all()
        }
        students = (
            self.db.query(User)
            .filter(User.role == UserRole.STUDENT, User.class_id == school_class.id)
            .order_by(User.id)
            .all()
        )
        return [student for student in students if student.id not in submitted]

    def send_order_reminders(self, lookahead_days: int, now: datetime | None = None) -> dict:
        """Remind every student who has not ordered for an upcoming class.

        Returns:
            dict with processing statistics
        """
        start = to_utc(now or datetime.now(UTC))
        end = start + timedelta(days=lookahead_days)
        stats = {"classes_checked": 0, "reminders_sent": 0}

        for school_class in self.db.query(SchoolClass).order_by(SchoolClass.id).all():
            stats["classes_checked"] += 1
            missing = self.find_students_without_orders(school_class, start, end)
            if not missing:
                continue

            logger.info(f"Class {school_class.name} has {len(missing)} students without orders")
            for student in missing:
                self.notification_service.notify(
                    student.id,
                    title="Reminder: Submit Your Recipe Order",
                    message=(
                        "Please submit your recipe order for the upcoming class "
                        f"in {school_class.name}."
                    ),
                    link="/dashboard/student",
                )
                stats["reminders_sent"] += 1

        self.db.commit()
        logger.info(f"Order reminders complete: {stats}")
        return stats
