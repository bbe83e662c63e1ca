"""Tests for the database-backed shopping service."""

from datetime import UTC, datetime, timedelta

import pytest

from foodtech.config import Settings
from foodtech.models import Notification, ShoppingListSnapshot
from foodtech.models.enums import OrderStatus, UserRole
from foodtech.services.aggregation import (
    InvalidWindowError,
    ShoppingListEntry,
    ShoppingWindow,
)
from foodtech.services.shopping_service import (
    DEFAULT_CATEGORY,
    ShoppingService,
    categorize,
    group_by_category,
    restock_alerts,
)


def entry(name, required, in_stock, unit="g"):
    return ShoppingListEntry(
        name=name,
        unit=unit,
        required=required,
        in_stock=in_stock,
        to_order=max(0, required - in_stock),
    )


class TestCategorize:
    """Keyword categories for the dashboard."""

    @pytest.mark.parametrize(
        "name,category",
        [
            ("Plain Flour", "Dry Goods"),
            ("Caster sugar", "Dry Goods"),
            ("Arborio Rice", "Dry Goods"),
            ("Whole Milk", "Dairy"),
            ("Cheddar cheese", "Dairy"),
            ("Unsalted butter", "Dairy"),
            ("Black pepper", "Spices"),
            ("Sea Salt", "Spices"),
            ("Olive Oil", "Oils"),
            ("Eggs", DEFAULT_CATEGORY),
            ("", DEFAULT_CATEGORY),
        ],
    )
    def test_categorize(self, name, category):
        assert categorize(name) == category

    def test_first_matching_category_wins(self):
        # "butter" is checked before "salt"
        assert categorize("Salted butter") == "Dairy"

    def test_group_by_category_skips_covered_entries(self):
        shopping_list = {
            "Flour": entry("Flour", 500, 100),
            "Milk": entry("Milk", 1, 5, unit="l"),
            "Eggs": entry("Eggs", 6, 0, unit=""),
        }
        grouped = group_by_category(shopping_list)
        assert set(grouped) == {"Dry Goods", DEFAULT_CATEGORY}
        assert list(grouped["Dry Goods"]) == ["Flour"]
        assert grouped[DEFAULT_CATEGORY]["Eggs"].to_order == 6


class TestRestockAlerts:
    """Severity tiers for stock that does not cover demand."""

    @pytest.mark.parametrize(
        "in_stock,severity",
        [
            (0, "Very Low"),
            (25, "Very Low"),
            (26, "Low"),
            (50, "Low"),
            (51, "Medium"),
            (100, "Medium"),
        ],
    )
    def test_tiers(self, in_stock, severity):
        alerts = restock_alerts({"Flour": entry("Flour", 100, in_stock)})
        assert len(alerts) == 1
        assert alerts[0]["severity"] == severity
        assert alerts[0]["label"] == "Flour"
        assert alerts[0]["required"] == 100
        assert alerts[0]["in_stock"] == in_stock

    def test_surplus_is_not_flagged(self):
        assert restock_alerts({"Flour": entry("Flour", 100, 101)}) == []

    def test_custom_ratios(self):
        alerts = restock_alerts(
            {"Flour": entry("Flour", 100, 40)}, low_ratio=0.8, very_low_ratio=0.4
        )
        assert alerts[0]["severity"] == "Very Low"

    def test_service_uses_configured_ratios(self, db):
        settings = Settings(restock_low_ratio=0.9, restock_very_low_ratio=0.1)
        service = ShoppingService(db, settings=settings)
        alerts = service.restock_alerts({"Flour": entry("Flour", 100, 80)})
        assert alerts[0]["severity"] == "Low"


class TestShoppingService:
    """Shopping lists built from stored orders and inventory."""

    def test_build_from_database(
        self, db, school_class, make_student, make_order, make_inventory
    ):
        student = make_student("amy@example.com", school_class)
        make_order(student, school_class, [{"name": "Flour", "amount": "2", "unit": "cups"}])
        make_order(
            student,
            school_class,
            [
                {"name": "flour", "amount": "1", "unit": "cups"},
                {"name": "Butter", "amount": "a knob", "unit": "g"},
            ],
        )
        make_inventory("Flour", 1, "cups")

        result = ShoppingService(db).build()

        assert set(result) == {"Flour"}
        assert result["Flour"].required == 3
        assert result["Flour"].in_stock == 1
        assert result["Flour"].to_order == 2

    def test_default_statuses_exclude_later_states(
        self, db, school_class, make_student, make_order
    ):
        student = make_student("amy@example.com", school_class)
        line = [{"name": "Rice", "amount": "1", "unit": "cups"}]
        make_order(student, school_class, line, status=OrderStatus.PENDING)
        make_order(student, school_class, line, status=OrderStatus.APPROVED)
        make_order(student, school_class, line, status=OrderStatus.REJECTED)
        make_order(student, school_class, line, status=OrderStatus.PREPARED)

        result = ShoppingService(db).build()

        assert result["Rice"].required == 2

    def test_explicit_statuses(self, db, school_class, make_student, make_order):
        student = make_student("amy@example.com", school_class)
        line = [{"name": "Rice", "amount": "1", "unit": "cups"}]
        make_order(student, school_class, line, status=OrderStatus.PENDING)
        make_order(student, school_class, line, status=OrderStatus.PREPARED)

        result = ShoppingService(db).build(statuses=[OrderStatus.PREPARED])

        assert result["Rice"].required == 1

    def test_orders_outside_default_window_are_excluded(
        self, db, school_class, make_student, make_order
    ):
        student = make_student("amy@example.com", school_class)
        line = [{"name": "Rice", "amount": "1", "unit": "cups"}]
        make_order(student, school_class, line, days_ahead=-1)
        make_order(student, school_class, line, days_ahead=3)
        make_order(student, school_class, line, days_ahead=8)

        result = ShoppingService(db).build()

        assert result["Rice"].required == 1

    def test_class_filter(self, db, school_class, make_student, make_order):
        from foodtech.models import SchoolClass

        other = SchoolClass(name="Year 10 Food Tech", students=1)
        db.add(other)
        db.commit()
        amy = make_student("amy@example.com", school_class)
        ben = make_student("ben@example.com", other)
        make_order(amy, school_class, [{"name": "Oil", "amount": "1", "unit": "l"}])
        make_order(ben, other, [{"name": "Oil", "amount": "2", "unit": "l"}])

        service = ShoppingService(db)

        assert service.build(class_id=other.id)["Oil"].required == 2
        assert service.build()["Oil"].required == 3

    def test_invalid_window_raises(self, db):
        now = datetime.now(UTC)
        window = ShoppingWindow(start=now, end=now - timedelta(days=1))
        with pytest.raises(InvalidWindowError):
            ShoppingService(db).build(window=window)

    def test_default_window_uses_settings(self, db):
        service = ShoppingService(db, settings=Settings(shopping_window_days=14))
        now = datetime(2026, 10, 19, tzinfo=UTC)
        window = service.default_window(now)
        assert window.start == now
        assert window.end == now + timedelta(days=14)


class TestSnapshots:
    """Stored shopping lists."""

    def test_create_snapshot_notifies_teachers(
        self, db, school_class, make_student, make_order, make_inventory
    ):
        from foodtech.models import User

        teacher = User(
            email="teacher@example.com",
            password_hash="fake",
            name="Teacher",
            role=UserRole.TEACHER,
        )
        db.add(teacher)
        db.commit()
        student = make_student("amy@example.com", school_class)
        make_order(student, school_class, [{"name": "Milk", "amount": "500", "unit": "ml"}])
        make_inventory("Milk", 200, "ml")

        snapshot = ShoppingService(db).create_snapshot(generated_by="system")

        assert snapshot.id is not None
        assert snapshot.status == "pending"
        assert snapshot.generated_by == "system"
        assert snapshot.statuses == ["approved", "pending"]
        assert snapshot.items["Milk"]["to_order"] == 300

        notifications = db.query(Notification).all()
        assert len(notifications) == 1
        assert notifications[0].user_id == teacher.id
        assert notifications[0].title == "Weekly Shopping List Generated"
        assert notifications[0].link == f"/shopping-lists/{snapshot.id}"

    def test_create_snapshot_without_notifications(self, db):
        snapshot = ShoppingService(db).create_snapshot(notify=False)
        assert snapshot.items == {}
        assert db.query(Notification).count() == 0

    def test_list_and_get_snapshots(self, db):
        service = ShoppingService(db)
        first = service.create_snapshot(notify=False)
        second = service.create_snapshot(notify=False)

        assert [s.id for s in service.list_snapshots()] == [second.id, first.id]
        assert len(service.list_snapshots(limit=1)) == 1
        assert service.get_snapshot(first.id).id == first.id
        assert service.get_snapshot(first.id + second.id + 100) is None
        assert db.query(ShoppingListSnapshot).count() == 2
