"""In-app notification model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from foodtech.database import Base
from foodtech.models.mixins import TimestampMixin


class Notification(Base, TimestampMixin):
    """Notification shown to a user on their dashboard."""

    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    message = Column(String(1000), nullable=False)
    link = Column(String(500), nullable=True)
    read = Column(Boolean, nullable=False, default=False, index=True)

    # Relationships
    user = relationship("User", backref="notifications")
