"""User model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from foodtech.database import Base
from foodtech.models.enums import UserRole
from foodtech.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication, role and class membership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)
    role = Column(
        Enum(UserRole, name="userrole", values_callable=lambda x: [e.value for e in x]),
        default=UserRole.STUDENT,
        nullable=False,
    )
    # Students belong to one class; teachers leave this empty
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True, index=True)

    # Relationships
    school_class = relationship("SchoolClass", back_populates="members")

    @property
    def is_teacher(self) -> bool:
        """Check if the user is a teacher."""
        return self.role == UserRole.TEACHER
