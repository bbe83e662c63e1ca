"""Order schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from foodtech.models.enums import OrderStatus


class OrderIngredient(BaseModel):
    """Ingredient line on an order. ``amount`` is kept as the student typed it."""

    name: str = Field(..., max_length=255)
    amount: str = Field("", max_length=50)
    unit: str = Field("", max_length=50)


class OrderCreate(BaseModel):
    """Create an order.

    Ingredients default to the recipe's when ``recipe_id`` is given and
    ``ingredients`` is omitted.
    """

    class_id: int
    date: datetime
    recipe_id: int | None = None
    ingredients: list[OrderIngredient] | None = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class OrderStatusUpdate(BaseModel):
    """Move an order to a new status."""

    status: OrderStatus


class OrderResponse(BaseModel):
    """Order response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    class_id: int
    recipe_id: int | None
    recipe_name: str | None
    date: datetime
    ingredients: list[OrderIngredient]
    status: OrderStatus
    created_at: datetime
