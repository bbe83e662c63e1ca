"""Inventory API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from foodtech.api.dependencies import get_current_teacher
from foodtech.database import get_db
from foodtech.models.inventory import InventoryItem
from foodtech.models.user import User
from foodtech.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
)
from foodtech.services.inventory_service import InventoryService, stock_status

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


def get_inventory_item_or_404(db: Session, item_id: int) -> InventoryItem:
    item = db.query(InventoryItem).filter(InventoryItem.id == item_id).first()
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Inventory item not found"
        )
    return item


def to_response(item: InventoryItem) -> InventoryItemResponse:
    """Build the response, adding the computed stock status."""
    return InventoryItemResponse(
        id=item.id,
        name=item.name,
        category=item.category,
        current_stock=item.current_stock,
        unit=item.unit,
        min_level=item.min_level,
        stock_status=stock_status(item.current_stock, item.min_level),
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


@router.get("", response_model=list[InventoryItemResponse])
def list_inventory_items(
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
    search: str | None = None,
    category: str | None = None,
    low_only: bool = False,
):
    """List storeroom items.

    ``search`` matches any part of the name, ignoring case. ``low_only`` keeps
    items at or under their minimum level.
    """
    query = db.query(InventoryItem)
    if search:
        name = func.lower(InventoryItem.name)
        query = query.filter(name.contains(search.lower(), autoescape=True))
    if category:
        query = query.filter(InventoryItem.category == category)
    items = query.order_by(InventoryItem.category.nullslast(), InventoryItem.name).all()
    responses = [to_response(item) for item in items]
    if low_only:
        responses = [r for r in responses if r.stock_status != "ok"]
    return responses


@router.post("", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item_data: InventoryItemCreate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an item to the storeroom."""
    existing = InventoryService(db).find_item(item_data.name, item_data.unit)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Item '{existing.name}' ({existing.unit}) already exists in inventory",
        )

    item = InventoryItem(**item_data.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return to_response(item)


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific inventory item."""
    return to_response(get_inventory_item_or_404(db, item_id))


@router.put("/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: int,
    item_data: InventoryItemUpdate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update an inventory item."""
    item = get_inventory_item_or_404(db, item_id)

    updates = item_data.model_dump(exclude_unset=True)
    if "name" in updates or "unit" in updates:
        clash = InventoryService(db).find_item(
            updates.get("name", item.name), updates.get("unit", item.unit)
        )
        if clash and clash.id != item.id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="An item with this name and unit already exists in inventory",
            )

    for field, value in updates.items():
        if value is None and field != "category":
            continue
        setattr(item, field, value)

    db.commit()
    db.refresh(item)
    return to_response(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_teacher)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove an item from the storeroom."""
    item = get_inventory_item_or_404(db, item_id)
    db.delete(item)
    db.commit()
