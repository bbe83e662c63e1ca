"""Shopping list schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from foodtech.models.enums import OrderStatus


class ShoppingListEntryResponse(BaseModel):
    """One ingredient's demand against stock."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    unit: str
    required: float
    in_stock: float
    to_order: float


class ShoppingListResponse(BaseModel):
    """Live shopping list for a date window."""

    window_start: datetime
    window_end: datetime
    class_id: int | None
    statuses: list[OrderStatus]
    items: dict[str, ShoppingListEntryResponse]


class ShoppingListCategoriesResponse(BaseModel):
    """Entries that need ordering, grouped by dashboard category."""

    categories: dict[str, dict[str, ShoppingListEntryResponse]]


class RestockAlert(BaseModel):
    """Ingredient whose stock does not cover demand."""

    label: str
    name: str
    unit: str
    in_stock: float
    required: float
    severity: str  # "Very Low" | "Low" | "Medium"


class SnapshotCreate(BaseModel):
    """Manually generate a shopping list snapshot."""

    window_start: datetime | None = None
    window_end: datetime | None = None
    statuses: list[OrderStatus] | None = None
    class_id: int | None = None


class SnapshotResponse(BaseModel):
    """Stored shopping list snapshot."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    window_start: datetime
    window_end: datetime
    class_id: int | None
    statuses: list[OrderStatus]
    items: dict[str, ShoppingListEntryResponse]
    status: str
    generated_by: str
    created_at: datetime


class SnapshotSummary(BaseModel):
    """Snapshot list entry without items."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    window_start: datetime
    window_end: datetime
    class_id: int | None
    status: str
    generated_by: str
    created_at: datetime
    item_count: int = Field(0, ge=0)
