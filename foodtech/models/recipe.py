"""Recipe and RecipeIngredient models."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from foodtech.database import Base
from foodtech.models.mixins import SoftDeleteMixin, TimestampMixin


class Recipe(Base, TimestampMixin, SoftDeleteMixin):
    """Recipe students can order ingredients for."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    difficulty = Column(String(20), nullable=True)  # "Easy" | "Medium" | "Hard"
    prep_time = Column(String(50), nullable=True)
    cook_time = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.id",
    )


class RecipeIngredient(Base, TimestampMixin):
    """Ingredient within a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(String(50), nullable=False, default="")  # Free text, e.g. "2" or "0.5"
    unit = Column(String(50), nullable=False, default="")
    required = Column(Boolean, nullable=False, default=True)  # False = optional garnish etc.

    # Relationships
    recipe = relationship("Recipe", back_populates="ingredients")
