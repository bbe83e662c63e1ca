"""Shopping list API endpoints."""

from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from foodtech.api.dependencies import get_current_teacher, get_shopping_service
from foodtech.models.enums import OrderStatus
from foodtech.models.user import User
from foodtech.schemas.shopping_list import (
    RestockAlert,
    ShoppingListCategoriesResponse,
    ShoppingListResponse,
    SnapshotCreate,
    SnapshotResponse,
    SnapshotSummary,
)
from foodtech.services.aggregation import (
    ShoppingListConfigError,
    ShoppingListEntry,
    ShoppingWindow,
)
from foodtech.services.shopping_service import ShoppingService, group_by_category

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])

StatusFilter = Annotated[list[OrderStatus] | None, Query()]


def resolve_window(
    shopping_service: ShoppingService,
    start: datetime | None,
    end: datetime | None,
) -> ShoppingWindow:
    """Fill in a missing bound from the configured window length."""
    start = start or datetime.now(UTC)
    end = end or start + timedelta(days=shopping_service.settings.shopping_window_days)
    return ShoppingWindow(start=start, end=end)


def build_or_400(
    shopping_service: ShoppingService,
    window: ShoppingWindow,
    statuses: list[OrderStatus] | None,
    class_id: int | None,
) -> dict[str, ShoppingListEntry]:
    try:
        return shopping_service.build(window, statuses, class_id)
    except ShoppingListConfigError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None


@router.get("", response_model=ShoppingListResponse)
def get_shopping_list(
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
    start: datetime | None = None,
    end: datetime | None = None,
    class_id: int | None = None,
    statuses: StatusFilter = None,
):
    """Live shopping list for a date window (defaults to the upcoming week).

    Every ingredient is listed, including ones fully covered by stock.
    """
    window = resolve_window(shopping_service, start, end)
    items = build_or_400(shopping_service, window, statuses, class_id)
    return ShoppingListResponse(
        window_start=window.start,
        window_end=window.end,
        class_id=class_id,
        statuses=statuses if statuses is not None else shopping_service.default_statuses(),
        items={label: entry.to_dict() for label, entry in items.items()},
    )


@router.get("/categories", response_model=ShoppingListCategoriesResponse)
def get_shopping_list_by_category(
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
    start: datetime | None = None,
    end: datetime | None = None,
    class_id: int | None = None,
    statuses: StatusFilter = None,
):
    """Ingredients that need ordering, grouped for the dashboard."""
    window = resolve_window(shopping_service, start, end)
    items = build_or_400(shopping_service, window, statuses, class_id)
    return ShoppingListCategoriesResponse(
        categories={
            category: {label: entry.to_dict() for label, entry in entries.items()}
            for category, entries in group_by_category(items).items()
        }
    )


@router.get("/restock", response_model=list[RestockAlert])
def get_restock_alerts(
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
    start: datetime | None = None,
    end: datetime | None = None,
    class_id: int | None = None,
    statuses: StatusFilter = None,
):
    """Ingredients whose stock does not cover upcoming demand."""
    window = resolve_window(shopping_service, start, end)
    items = build_or_400(shopping_service, window, statuses, class_id)
    return shopping_service.restock_alerts(items)


@router.post("/snapshots", response_model=SnapshotResponse, status_code=status.HTTP_201_CREATED)
def create_snapshot(
    snapshot_data: SnapshotCreate,
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
):
    """Generate and store a shopping list now, as the weekly job would."""
    window = resolve_window(shopping_service, snapshot_data.window_start, snapshot_data.window_end)
    try:
        return shopping_service.create_snapshot(
            window,
            snapshot_data.statuses,
            snapshot_data.class_id,
            generated_by=f"user:{current_user.id}",
        )
    except ShoppingListConfigError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None


@router.get("/snapshots", response_model=list[SnapshotSummary])
def list_snapshots(
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
    limit: int = Query(20, ge=1, le=100),
):
    """List recent shopping list snapshots."""
    return [
        SnapshotSummary(
            id=snapshot.id,
            window_start=snapshot.window_start,
            window_end=snapshot.window_end,
            class_id=snapshot.class_id,
            status=snapshot.status,
            generated_by=snapshot.generated_by,
            created_at=snapshot.created_at,
            item_count=len(snapshot.items or {}),
        )
        for snapshot in shopping_service.list_snapshots(limit)
    ]


@router.get("/snapshots/{snapshot_id}", response_model=SnapshotResponse)
def get_snapshot(
    snapshot_id: int,
    current_user: Annotated[User, Depends(get_current_teacher)],
    shopping_service: Annotated[ShoppingService, Depends(get_shopping_service)],
):
    """Get a stored shopping list snapshot."""
    snapshot = shopping_service.get_snapshot(snapshot_id)
    if not snapshot:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Snapshot not found")
    return snapshot
