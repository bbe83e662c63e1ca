"""Notification API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from foodtech.api.dependencies import get_current_user, get_notification_service
from foodtech.models.user import User
from foodtech.schemas.notification import NotificationResponse
from foodtech.services.notification_service import NotificationService

router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])


@router.get("", response_model=list[NotificationResponse])
def list_notifications(
    current_user: Annotated[User, Depends(get_current_user)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
    unread_only: bool = False,
):
    """List the current user's notifications, newest first."""
    return notification_service.list_for_user(current_user.id, unread_only=unread_only)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    notification_service: Annotated[NotificationService, Depends(get_notification_service)],
):
    """Mark a notification as read."""
    notification = notification_service.mark_read(notification_id, current_user.id)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return notification
