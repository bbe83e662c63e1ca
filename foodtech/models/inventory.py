"""Inventory item model for the storeroom."""

from sqlalchemy import Column, Float, Integer, String

from foodtech.database import Base
from foodtech.models.mixins import TimestampMixin


class InventoryItem(Base, TimestampMixin):
    """Storeroom stock of a single ingredient, in its native unit."""

    __tablename__ = "inventory_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=True)  # Optional: "Dry Goods", "Dairy", ...
    current_stock = Column(Float, nullable=False, default=0)
    unit = Column(String(50), nullable=False, default="")
    min_level = Column(Float, nullable=False, default=0)
