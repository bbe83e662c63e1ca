"""Student order model."""

from sqlalchemy import JSON, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from foodtech.database import Base
from foodtech.models.enums import OrderStatus
from foodtech.models.mixins import TimestampMixin


class Order(Base, TimestampMixin):
    """A student's ingredient order for one class session."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=True)
    recipe_name = Column(String(255), nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)  # Class session date
    # Ingredient lines: [{"name": "Flour", "amount": "2", "unit": "cups"}, ...]
    ingredients = Column(JSON, nullable=False, default=list)
    status = Column(
        Enum(OrderStatus, name="orderstatus", values_callable=lambda x: [e.value for e in x]),
        default=OrderStatus.PENDING,
        nullable=False,
        index=True,
    )

    # Relationships
    student = relationship("User", backref="orders")
    school_class = relationship("SchoolClass", back_populates="orders")
    recipe = relationship("Recipe")
