"""Notification schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    """Notification response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    message: str
    link: str | None
    read: bool
    created_at: datetime
