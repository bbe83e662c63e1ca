"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodtech.api.dependencies import get_current_teacher, get_current_user
from foodtech.database import get_db
from foodtech.models.recipe import Recipe, RecipeIngredient
from foodtech.models.user import User
from foodtech.schemas.recipe import RecipeCreate, RecipeResponse, RecipeUpdate

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


def get_recipe_or_404(db: Session, recipe_id: int) -> Recipe:
    """Get a recipe that has not been deleted."""
    recipe = (
        db.query(Recipe).filter(Recipe.id == recipe_id, Recipe.not_deleted()).first()
    )
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    include_inactive: bool = False,
):
    """List recipes. Students only ever see active ones."""
    query = db.query(Recipe).filter(Recipe.not_deleted())
    if not (include_inactive and current_user.is_teacher):
        query = query.filter(Recipe.is_active.is_(True))
    return query.order_by(Recipe.name).all()


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
def create_recipe(
    recipe_data: RecipeCreate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a recipe with its ingredients."""
    recipe = Recipe(**recipe_data.model_dump(exclude={"ingredients"}))
    recipe.ingredients = [
        RecipeIngredient(**ingredient.model_dump()) for ingredient in recipe_data.ingredients
    ]
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific recipe."""
    recipe = get_recipe_or_404(db, recipe_id)
    if not recipe.is_active and not current_user.is_teacher:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: int,
    recipe_data: RecipeUpdate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a recipe. Sending ``ingredients`` replaces the ingredient list."""
    recipe = get_recipe_or_404(db, recipe_id)

    updates = recipe_data.model_dump(exclude_unset=True, exclude={"ingredients"})
    for field, value in updates.items():
        setattr(recipe, field, value)

    if recipe_data.ingredients is not None:
        recipe.ingredients = [
            RecipeIngredient(**ingredient.model_dump()) for ingredient in recipe_data.ingredients
        ]

    db.commit()
    db.refresh(recipe)
    return recipe


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Soft delete a recipe; existing orders keep their copy of its ingredients."""
    recipe = get_recipe_or_404(db, recipe_id)
    recipe.soft_delete()
    db.commit()
