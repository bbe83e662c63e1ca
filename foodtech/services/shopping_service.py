"""Shopping service: database-backed shopping lists, snapshots and projections."""

import logging
from collections.abc import Collection
from datetime import UTC, datetime, timedelta
from functools import partial
from typing import Any

from sqlalchemy.orm import Session

from foodtech.config import Settings, get_settings
from foodtech.models.enums import OrderStatus
from foodtech.models.inventory import InventoryItem
from foodtech.models.order import Order
from foodtech.models.shopping_list_snapshot import ShoppingListSnapshot
from foodtech.services.aggregation import (
    IngredientLine,
    OrderRecord,
    ShoppingListEntry,
    ShoppingWindow,
    StockRecord,
    generate_shopping_list,
    resolve_statuses,
    to_utc,
)
from foodtech.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

# Substring -> dashboard category, checked in order
CATEGORY_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("flour", "sugar", "rice"), "Dry Goods"),
    (("milk", "cheese", "butter"), "Dairy"),
    (("pepper", "salt"), "Spices"),
    (("oil",), "Oils"),
]
DEFAULT_CATEGORY = "Other"

SEVERITY_VERY_LOW = "Very Low"
SEVERITY_LOW = "Low"
SEVERITY_MEDIUM = "Medium"


def categorize(name: str) -> str:
    """Pick a dashboard category from keywords in the ingredient name."""
    lowered = (name or "").lower()
    for keywords, category in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def group_by_category(
    shopping_list: dict[str, ShoppingListEntry],
) -> dict[str, dict[str, ShoppingListEntry]]:
    """Group entries that still need ordering under their dashboard category."""
    grouped: dict[str, dict[str, ShoppingListEntry]] = {}
    for label, entry in shopping_list.items():
        if entry.to_order <= 0:
            continue
        grouped.setdefault(categorize(entry.name), {})[label] = entry
    return grouped


def restock_alerts(
    shopping_list: dict[str, ShoppingListEntry],
    low_ratio: float = 0.5,
    very_low_ratio: float = 0.25,
) -> list[dict[str, Any]]:
    """Flag entries whose stock does not cover demand.

    An entry is flagged when ``in_stock <= required``. Its severity is
    "Very Low" at or under ``required * very_low_ratio``, "Low" at or under
    ``required * low_ratio`` and "Medium" otherwise.
    """
    alerts = []
    for label, entry in shopping_list.items():
        if entry.in_stock > entry.required:
            continue
        if entry.in_stock <= entry.required * very_low_ratio:
            severity = SEVERITY_VERY_LOW
        elif entry.in_stock <= entry.required * low_ratio:
            severity = SEVERITY_LOW
        else:
            severity = SEVERITY_MEDIUM
        alerts.append(
            {
                "label": label,
                "name": entry.name,
                "unit": entry.unit,
                "in_stock": entry.in_stock,
                "required": entry.required,
                "severity": severity,
            }
        )
    return alerts


class ShoppingService:
    """Service for building shopping lists from stored orders and inventory."""

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def default_window(self, now: datetime | None = None) -> ShoppingWindow:
        """The upcoming window, starting now."""
        start = now or datetime.now(UTC)
        end = start + timedelta(days=self.settings.shopping_window_days)
        return ShoppingWindow(start=start, end=end)

    def default_statuses(self) -> list[str]:
        return list(self.settings.shopping_list_statuses)

    def fetch_orders(
        self,
        window: ShoppingWindow,
        statuses: Collection[OrderStatus | str],
        class_id: int | None = None,
    ) -> list[OrderRecord]:
        """Load candidate orders, narrowed by date and status in the database."""
        query = self.db.query(Order).filter(
            Order.date >= to_utc(window.start),
            Order.date <= to_utc(window.end),
            Order.status.in_([OrderStatus(value) for value in resolve_statuses(statuses)]),
        )
        if class_id is not None:
            query = query.filter(Order.class_id == class_id)

        return [
            OrderRecord(
                id=order.id,
                class_id=order.class_id,
                student_id=order.student_id,
                date=order.date,
                status=order.status,
                ingredients=tuple(
                    IngredientLine.from_dict(line) for line in order.ingredients or []
                ),
            )
            for order in query.order_by(Order.date, Order.id).all()
        ]

    def fetch_inventory(self) -> list[StockRecord]:
        """Load the current stock snapshot."""
        return [
            StockRecord(
                id=item.id,
                name=item.name,
                unit=item.unit,
                current_stock=item.current_stock or 0,
                min_level=item.min_level or 0,
            )
            for item in self.db.query(InventoryItem).order_by(InventoryItem.id).all()
        ]

    def build(
        self,
        window: ShoppingWindow | None = None,
        statuses: Collection[OrderStatus | str] | None = None,
        class_id: int | None = None,
    ) -> dict[str, ShoppingListEntry]:
        """Build a live shopping list; defaults come from settings."""
        window = window or self.default_window()
        statuses = statuses if statuses is not None else self.default_statuses()
        return generate_shopping_list(
            partial(self.fetch_orders, window, statuses, class_id),
            self.fetch_inventory,
            window,
            statuses,
            class_id,
        )

    def restock_alerts(self, shopping_list: dict[str, ShoppingListEntry]) -> list[dict[str, Any]]:
        """Restock alerts using the configured ratios."""
        return restock_alerts(
            shopping_list,
            low_ratio=self.settings.restock_low_ratio,
            very_low_ratio=self.settings.restock_very_low_ratio,
        )

    def create_snapshot(
        self,
        window: ShoppingWindow | None = None,
        statuses: Collection[OrderStatus | str] | None = None,
        class_id: int | None = None,
        generated_by: str = "system",
        notify: bool = True,
    ) -> ShoppingListSnapshot:
        """Build a shopping list, store it as a snapshot and tell the teachers."""
        window = window or self.default_window()
        statuses = list(statuses) if statuses is not None else self.default_statuses()
        shopping_list = self.build(window, statuses, class_id)

        snapshot = ShoppingListSnapshot(
            window_start=to_utc(window.start),
            window_end=to_utc(window.end),
            class_id=class_id,
            statuses=sorted(resolve_statuses(statuses)),
            items={label: entry.to_dict() for label, entry in shopping_list.items()},
            status="pending",
            generated_by=generated_by,
        )
        self.db.add(snapshot)
        self.db.flush()

        if notify:
            NotificationService(self.db).notify_teachers(
                title="Weekly Shopping List Generated",
                message="The shopping list for the upcoming week has been generated.",
                link=f"/shopping-lists/{snapshot.id}",
            )

        self.db.commit()
        self.db.refresh(snapshot)
        logger.info(
            f"Shopping list snapshot {snapshot.id} saved with {len(shopping_list)} ingredients"
        )
        return snapshot

    def list_snapshots(self, limit: int = 20) -> list[ShoppingListSnapshot]:
        return (
            self.db.query(ShoppingListSnapshot)
            .order_by(ShoppingListSnapshot.created_at.desc(), ShoppingListSnapshot.id.desc())
            .limit(limit)
            .all()
        )

    def get_snapshot(self, snapshot_id: int) -> ShoppingListSnapshot | None:
        return (
            self.db.query(ShoppingListSnapshot)
            .filter(ShoppingListSnapshot.id == snapshot_id)
            .first()
        )
