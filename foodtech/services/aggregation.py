"""Shopping-list aggregation.

Collects ingredient demand across student orders, sums it per ingredient
and unit, and reconciles it against storeroom stock to work out what needs
buying. Everything in this module is pure: inputs come in as plain records
(or through the provider callables given to ``generate_shopping_list``)
and the report goes out as the return value.
"""

import logging
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from foodtech.models.enums import OrderStatus
from foodtech.services.normalizer import normalize_key, parse_amount

logger = logging.getLogger(__name__)


class ShoppingListConfigError(ValueError):
    """Shopping list was requested with unusable parameters."""


class InvalidWindowError(ShoppingListConfigError):
    """Date window starts after it ends."""


@dataclass(frozen=True)
class IngredientLine:
    """One ingredient line on an order; ``amount`` is untrusted text."""

    name: str
    amount: str
    unit: str

    @classmethod
    def from_dict(cls, data: dict) -> "IngredientLine":
        return cls(
            name=data.get("name") or "",
            amount=data.get("amount") if data.get("amount") is not None else "",
            unit=data.get("unit") or "",
        )


@dataclass(frozen=True)
class OrderRecord:
    """Order as seen by the aggregation engine."""

    id: str | int
    class_id: str | int | None
    date: datetime
    status: OrderStatus | str
    ingredients: tuple[IngredientLine, ...] = ()
    student_id: str | int | None = None


@dataclass(frozen=True)
class StockRecord:
    """Inventory item as seen by the aggregation engine."""

    name: str
    unit: str
    current_stock: float
    id: str | int | None = None
    min_level: float = 0


@dataclass(frozen=True)
class ShoppingWindow:
    """Inclusive date window orders must fall into."""

    start: datetime
    end: datetime

    def validate(self) -> "ShoppingWindow":
        if to_utc(self.start) > to_utc(self.end):
            raise InvalidWindowError(
                f"Window start {self.start.isoformat()} is after end {self.end.isoformat()}"
            )
        return self

    def contains(self, moment: datetime) -> bool:
        return to_utc(self.start) <= to_utc(moment) <= to_utc(self.end)


@dataclass(frozen=True)
class ShoppingListEntry:
    """Demand for one ingredient/unit against stock on hand."""

    name: str
    unit: str
    required: float
    in_stock: float
    to_order: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "unit": self.unit,
            "required": self.required,
            "in_stock": self.in_stock,
            "to_order": self.to_order,
        }


@dataclass
class _Bucket:
    name: str
    unit: str
    required: float = 0.0


def to_utc(moment: datetime) -> datetime:
    # SQLite hands back naive datetimes; treat them as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def _status_value(status: OrderStatus | str) -> str:
    return status.value if isinstance(status, OrderStatus) else str(status)


def resolve_statuses(statuses: Iterable[OrderStatus | str]) -> frozenset[str]:
    """Validate a status set and return it as plain status values."""
    resolved = set()
    for status in statuses:
        try:
            resolved.add(OrderStatus(status).value)
        except ValueError:
            raise ShoppingListConfigError(f"Unknown order status: {status!r}") from None
    return frozenset(resolved)


def _eligible(
    order: OrderRecord,
    window: ShoppingWindow,
    statuses: frozenset[str],
    class_id: str | int | None,
) -> bool:
    if _status_value(order.status) not in statuses:
        return False
    if class_id is not None and str(order.class_id) != str(class_id):
        return False
    return window.contains(order.date)


def build_shopping_list(
    orders: Iterable[OrderRecord],
    inventory: Iterable[StockRecord],
    window: ShoppingWindow,
    eligible_statuses: Collection[OrderStatus | str],
    class_id: str | int | None = None,
) -> dict[str, ShoppingListEntry]:
    """Aggregate order demand and reconcile it against inventory.

    Args:
        orders: Orders to consider; ineligible ones are filtered out here.
        inventory: Current stock snapshot.
        window: Inclusive date window for order dates.
        eligible_statuses: Order statuses that count as demand.
        class_id: Restrict demand to one class when given.

    Returns:
        Mapping of ingredient display name to its entry. Entries with nothing
        to order are included. A second bucket whose display name is already
        taken (same name, other unit) is keyed as ``"<name> (<unit>)"``.

    Raises:
        ShoppingListConfigError: window or status set is invalid.
    """
    window.validate()
    statuses = resolve_statuses(eligible_statuses)

    buckets: dict[str, _Bucket] = {}
    eligible_orders = 0
    skipped_lines = 0

    for order in orders:
        if not _eligible(order, window, statuses, class_id):
            continue
        eligible_orders += 1

        for line in order.ingredients:
            parsed = parse_amount(line.amount)
            if not parsed.is_ok:
                skipped_lines += 1
                logger.warning(
                    f"Skipping ingredient '{line.name}' on order {order.id}: {parsed.error}"
                )
                continue

            key = normalize_key(line.name, line.unit)
            bucket = buckets.get(key)
            if bucket is None:
                bucket = buckets[key] = _Bucket(name=line.name, unit=line.unit)
            bucket.required += parsed.value

    stock_by_key: dict[str, float] = {}
    for item in inventory:
        stock_by_key.setdefault(normalize_key(item.name, item.unit), item.current_stock or 0)

    result: dict[str, ShoppingListEntry] = {}
    for key, bucket in buckets.items():
        in_stock = stock_by_key.get(key, 0)
        entry = ShoppingListEntry(
            name=bucket.name,
            unit=bucket.unit,
            required=bucket.required,
            in_stock=in_stock,
            to_order=max(0, bucket.required - in_stock),
        )
        label = bucket.name
        if label in result:
            label = f"{bucket.name} ({bucket.unit})"
        suffix = 2
        while label in result:
            label = f"{bucket.name} ({bucket.unit}) #{suffix}"
            suffix += 1
        result[label] = entry

    logger.info(
        f"Aggregated {eligible_orders} orders into {len(result)} ingredients "
        f"({skipped_lines} lines skipped)"
    )
    return result


def generate_shopping_list(
    fetch_orders: Callable[[], Iterable[OrderRecord]],
    fetch_inventory: Callable[[], Iterable[StockRecord]],
    window: ShoppingWindow,
    eligible_statuses: Collection[OrderStatus | str],
    class_id: str | int | None = None,
) -> dict[str, ShoppingListEntry]:
    """Fetch orders and inventory through providers, then aggregate.

    Parameters are validated before either provider is called. Errors raised
    by the providers propagate unchanged.
    """
    window.validate()
    resolve_statuses(eligible_statuses)

    orders = list(fetch_orders())
    inventory = list(fetch_inventory())
    return build_shopping_list(orders, inventory, window, eligible_statuses, class_id)


def needs_ordering(shopping_list: dict[str, ShoppingListEntry]) -> dict[str, ShoppingListEntry]:
    """Only the entries that still have something to buy."""
    return {label: entry for label, entry in shopping_list.items() if entry.to_order > 0}
