"""Order service for the order status lifecycle."""

import logging

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from foodtech.models.enums import OrderStatus
from foodtech.models.order import Order
from foodtech.services.inventory_service import InventoryService
from foodtech.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    OrderStatus.APPROVED: "Your order for {recipe} has been approved.",
    OrderStatus.REJECTED: "Your order for {recipe} has been rejected.",
    OrderStatus.PREPARED: "Your ingredients for {recipe} have been prepared.",
    OrderStatus.COLLECTED: "Your ingredients for {recipe} have been collected.",
}


class OrderService:
    """Service for order-related operations."""

    def __init__(self, db: Session, inventory_service: InventoryService | None = None):
        self.db = db
        self.inventory_service = inventory_service or InventoryService(db)

    def transition(self, order: Order, target: OrderStatus) -> Order:
        """Move an order to a new status.

        Preparing an order takes its ingredients out of the storeroom. The
        student is notified of every change.

        Raises:
            HTTPException: 409 if the transition is not allowed.
        """
        current = OrderStatus(order.status)
        if not current.can_transition_to(target):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Cannot change order status from '{current.value}' to '{target.value}'",
            )

        if target == OrderStatus.PREPARED:
            consumed = self.inventory_service.consume_order(order)
            logger.info(f"Order {order.id} prepared, {consumed} inventory items decremented")

        order.status = target
        NotificationService(self.db).notify(
            order.student_id,
            title="Order Update",
            message=STATUS_MESSAGES[target].format(recipe=order.recipe_name or "your recipe"),
            link="/dashboard/student",
        )
        self.db.commit()
        self.db.refresh(order)
        logger.info(f"Order {order.id}: {current.value} -> {target.value}")
        return order
