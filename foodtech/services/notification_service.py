"""Notification service for in-app dashboard notifications."""

import logging

from sqlalchemy.orm import Session

from foodtech.models.enums import UserRole
from foodtech.models.notification import Notification
from foodtech.models.user import User

logger = logging.getLogger(__name__)


class NotificationService:
    """Creates and reads notification records.

    Writes are added to the session but not committed; callers commit as
    part of their own unit of work.
    """

    def __init__(self, db: Session):
        self.db = db

    def notify(
        self,
        user_id: int,
        title: str,
        message: str,
        link: str | None = None,
    ) -> Notification:
        """Queue a notification for a single user."""
        notification = Notification(user_id=user_id, title=title, message=message, link=link)
        self.db.add(notification)
        return notification

    def notify_teachers(self, title: str, message: str, link: str | None = None) -> int:
        """Queue the same notification for every teacher. Returns the count."""
        teacher_ids = [
            user_id
            for (user_id,) in self.db.query(User.id).filter(User.role == UserRole.TEACHER).all()
        ]
        for teacher_id in teacher_ids:
            self.notify(teacher_id, title, message, link)

        logger.info(f"Queued '{title}' notification for {len(teacher_ids)} teachers")
        return len(teacher_ids)

    def list_for_user(self, user_id: int, unread_only: bool = False) -> list[Notification]:
        """Newest-first notifications for a user."""
        query = self.db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.read.is_(False))
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    def mark_read(self, notification_id: int, user_id: int) -> Notification | None:
        """Mark one of the user's notifications as read."""
        notification = (
            self.db.query(Notification)
            .filter(Notification.id == notification_id, Notification.user_id == user_id)
            .first()
        )
        if notification is None:
            return None
        notification.read = True
        self.db.commit()
        self.db.refresh(notification)
        return notification
