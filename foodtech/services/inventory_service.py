"""Inventory service for stock status and stock consumption."""

import logging

from sqlalchemy import case, func, update
from sqlalchemy.orm import Session

from foodtech.models.inventory import InventoryItem
from foodtech.models.order import Order
from foodtech.services.aggregation import IngredientLine
from foodtech.services.normalizer import parse_amount

logger = logging.getLogger(__name__)

STOCK_OK = "ok"
STOCK_MEDIUM = "medium"
STOCK_LOW = "low"


def stock_status(current_stock: float, min_level: float) -> str:
    """Classify stock on hand against the item's minimum level."""
    if current_stock <= min_level * 0.5:
        return STOCK_LOW
    if current_stock <= min_level:
        return STOCK_MEDIUM
    return STOCK_OK


class InventoryService:
    """Service for inventory-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def find_item(self, name: str, unit: str) -> InventoryItem | None:
        """Find the inventory item for an ingredient name and unit, ignoring case."""
        return (
            self.db.query(InventoryItem)
            .filter(
                func.lower(InventoryItem.name) == (name or "").lower(),
                func.lower(InventoryItem.unit) == (unit or "").lower(),
            )
            .order_by(InventoryItem.id)
            .first()
        )

    def consume_order(self, order: Order) -> int:
        """Take an order's ingredients out of stock.

        Each line decrements its matching item with a single UPDATE so two
        orders finishing at once cannot overwrite each other's change. Stock
        never goes below zero. Lines with unparseable or non-positive amounts
        and lines without a matching item are skipped.

        Returns:
            Number of inventory items decremented. The caller commits.
        """
        updated = 0
        for raw_line in order.ingredients or []:
            line = IngredientLine.from_dict(raw_line)
            parsed = parse_amount(line.amount)
            if not parsed.is_ok:
                logger.warning(
                    f"Not consuming '{line.name}' for order {order.id}: {parsed.error}"
                )
                continue
            if parsed.value <= 0:
                continue

            item = self.find_item(line.name, line.unit)
            if item is None:
                logger.info(f"No inventory item for '{line.name}' ({line.unit}), skipping")
                continue

            amount = parsed.value
            stock = InventoryItem.current_stock
            self.db.execute(
                update(InventoryItem)
                .where(InventoryItem.id == item.id)
                .values(current_stock=case((stock > amount, stock - amount), else_=0))
                .execution_options(synchronize_session=False)
            )
            self.db.expire(item)
            updated += 1
            logger.info(f"Consumed {amount} {line.unit} of '{item.name}' for order {order.id}")

        return updated
