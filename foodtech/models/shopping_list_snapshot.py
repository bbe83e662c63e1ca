"""Shopping list snapshot model."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String

from foodtech.database import Base
from foodtech.models.mixins import TimestampMixin


class ShoppingListSnapshot(Base, TimestampMixin):
    """Dated, immutable record of a generated shopping list."""

    __tablename__ = "shopping_list_snapshots"

    id = Column(Integer, primary_key=True, index=True)
    window_start = Column(DateTime(timezone=True), nullable=False)
    window_end = Column(DateTime(timezone=True), nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=True, index=True)
    statuses = Column(JSON, nullable=False)  # ["pending", "approved"]
    # {"Flour": {"name": ..., "unit": ..., "required": ..., "in_stock": ..., "to_order": ...}}
    items = Column(JSON, nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    generated_by = Column(String(50), nullable=False, default="system")  # "system" | "user:<id>"
