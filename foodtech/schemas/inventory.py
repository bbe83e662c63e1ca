"""Inventory schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class InventoryItemCreate(BaseModel):
    """Create an inventory item."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    current_stock: float = Field(0, ge=0)
    unit: str = Field("", max_length=50)
    min_level: float = Field(0, ge=0)


class InventoryItemUpdate(BaseModel):
    """Update an inventory item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = None
    current_stock: float | None = Field(None, ge=0)
    unit: str | None = Field(None, max_length=50)
    min_level: float | None = Field(None, ge=0)


class InventoryItemResponse(BaseModel):
    """Inventory item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str | None
    current_stock: float
    unit: str
    min_level: float
    stock_status: str  # "ok" | "medium" | "low"
    created_at: datetime
    updated_at: datetime
