"""School class model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from foodtech.database import Base
from foodtech.models.mixins import TimestampMixin


class SchoolClass(Base, TimestampMixin):
    """A timetabled food-technology class."""

    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    day = Column(String(20), nullable=True)  # "Monday", "Tuesday", ...
    time = Column(String(20), nullable=True)  # "09:00"
    students = Column(Integer, nullable=False, default=0)  # Expected roster size
    room = Column(String(50), nullable=True)
    teacher = Column(String(255), nullable=True)

    # Relationships
    members = relationship("User", back_populates="school_class")
    orders = relationship("Order", back_populates="school_class")
