"""Order API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from foodtech.api.dependencies import get_current_teacher, get_current_user, get_order_service
from foodtech.database import get_db
from foodtech.models.enums import OrderStatus
from foodtech.models.order import Order
from foodtech.models.recipe import Recipe
from foodtech.models.school_class import SchoolClass
from foodtech.models.user import User
from foodtech.schemas.order import OrderCreate, OrderResponse, OrderStatusUpdate
from foodtech.services.order_service import OrderService

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


def get_visible_order(db: Session, order_id: int, user: User) -> Order:
    """Get an order the user may see: any order for teachers, their own for students."""
    query = db.query(Order).filter(Order.id == order_id)
    if not user.is_teacher:
        query = query.filter(Order.student_id == user.id)
    order = query.first()
    if not order:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def create_order(
    order_data: OrderCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Submit an ingredient order for a class session."""
    school_class = db.query(SchoolClass).filter(SchoolClass.id == order_data.class_id).first()
    if not school_class:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class not found")
    if current_user.class_id is not None and current_user.class_id != school_class.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only order for your own class",
        )

    recipe = None
    if order_data.recipe_id is not None:
        recipe = (
            db.query(Recipe)
            .filter(
                Recipe.id == order_data.recipe_id,
                Recipe.not_deleted(),
                Recipe.is_active.is_(True),
            )
            .first()
        )
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")

    if order_data.ingredients is not None:
        ingredients = [ingredient.model_dump() for ingredient in order_data.ingredients]
    elif recipe is not None:
        ingredients = [
            {"name": ing.name, "amount": ing.amount, "unit": ing.unit}
            for ing in recipe.ingredients
        ]
    else:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="An order needs a recipe or a list of ingredients",
        )

    order = Order(
        student_id=current_user.id,
        class_id=school_class.id,
        recipe_id=recipe.id if recipe else None,
        recipe_name=recipe.name if recipe else None,
        date=order_data.date,
        ingredients=ingredients,
        status=OrderStatus.PENDING,
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


@router.get("", response_model=list[OrderResponse])
def list_orders(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    class_id: int | None = None,
    order_status: OrderStatus | None = None,
):
    """List orders: all of them for teachers, a student's own otherwise."""
    query = db.query(Order)
    if not current_user.is_teacher:
        query = query.filter(Order.student_id == current_user.id)
    if class_id is not None:
        query = query.filter(Order.class_id == class_id)
    if order_status is not None:
        query = query.filter(Order.status == order_status)
    return query.order_by(Order.date, Order.id).all()


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific order."""
    return get_visible_order(db, order_id, current_user)


@router.patch("/{order_id}/status", response_model=OrderResponse)
def update_order_status(
    order_id: int,
    status_data: OrderStatusUpdate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
    order_service: Annotated[OrderService, Depends(get_order_service)],
):
    """Approve, reject, prepare or mark an order as collected."""
    order = get_visible_order(db, order_id, current_user)
    return order_service.transition(order, status_data.status)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_order(
    order_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Withdraw an order that is still pending."""
    order = get_visible_order(db, order_id, current_user)
    if order.status != OrderStatus.PENDING:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Only pending orders can be withdrawn",
        )
    db.delete(order)
    db.commit()
