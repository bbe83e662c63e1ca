"""Recipe schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# --- Recipe Ingredient ---


class RecipeIngredientCreate(BaseModel):
    """Create a recipe ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    amount: str = Field("", max_length=50)
    unit: str = Field("", max_length=50)
    required: bool = True


class RecipeIngredientResponse(BaseModel):
    """Recipe ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    recipe_id: int
    name: str
    amount: str
    unit: str
    required: bool


# --- Recipe ---


class RecipeCreate(BaseModel):
    """Create a new recipe."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    difficulty: str | None = Field(None, max_length=20)
    prep_time: str | None = Field(None, max_length=50)
    cook_time: str | None = Field(None, max_length=50)
    is_active: bool = True
    ingredients: list[RecipeIngredientCreate] = []


class RecipeUpdate(BaseModel):
    """Update a recipe. Supplying ``ingredients`` replaces the whole list."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    difficulty: str | None = Field(None, max_length=20)
    prep_time: str | None = Field(None, max_length=50)
    cook_time: str | None = Field(None, max_length=50)
    is_active: bool | None = None
    ingredients: list[RecipeIngredientCreate] | None = None


class RecipeResponse(BaseModel):
    """Recipe response with ingredients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    difficulty: str | None
    prep_time: str | None
    cook_time: str | None
    is_active: bool
    ingredients: list[RecipeIngredientResponse]
    created_at: datetime
    updated_at: datetime
