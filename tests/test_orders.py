"""Order API tests."""

from datetime import UTC, datetime, timedelta

import pytest

from foodtech.models import Notification, SchoolClass


def next_week() -> str:
    return (datetime.now(UTC) + timedelta(days=3)).isoformat()


@pytest.fixture
def recipe(client, teacher_headers):
    """A recipe with three ingredient lines."""
    response = client.post(
        "/api/v1/recipes",
        headers=teacher_headers,
        json={
            "name": "Scones",
            "ingredients": [
                {"name": "Flour", "amount": "500", "unit": "g"},
                {"name": "Butter", "amount": "125", "unit": "g"},
                {"name": "Milk", "amount": "a splash", "unit": "ml"},
            ],
        },
    )
    return response.json()


@pytest.fixture
def order(client, student_headers, school_class, recipe):
    """A pending order for the recipe."""
    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={"class_id": school_class.id, "date": next_week(), "recipe_id": recipe["id"]},
    )
    assert response.status_code == 201, response.text
    return response.json()


def set_status(client, headers, order_id, status):
    return client.patch(
        f"/api/v1/orders/{order_id}/status", headers=headers, json={"status": status}
    )


def test_create_order_from_recipe(order, recipe, student_headers):
    """Test that an order copies the recipe's ingredients."""
    assert order["status"] == "pending"
    assert order["student_id"] == student_headers.user_id
    assert order["recipe_name"] == "Scones"
    assert order["ingredients"] == [
        {"name": "Flour", "amount": "500", "unit": "g"},
        {"name": "Butter", "amount": "125", "unit": "g"},
        {"name": "Milk", "amount": "a splash", "unit": "ml"},
    ]


def test_create_order_with_own_ingredients(client, student_headers, school_class):
    """Test ordering a custom ingredient list."""
    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={
            "class_id": school_class.id,
            "date": next_week(),
            "ingredients": [{"name": "Rice", "amount": "1.5", "unit": "cups"}],
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["recipe_id"] is None
    assert data["ingredients"] == [{"name": "Rice", "amount": "1.5", "unit": "cups"}]


def test_create_order_needs_recipe_or_ingredients(client, student_headers, school_class):
    """Test that an empty order is rejected."""
    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={"class_id": school_class.id, "date": next_week()},
    )
    assert response.status_code == 400


def test_create_order_unknown_recipe(client, student_headers, school_class):
    """Test ordering a recipe that does not exist."""
    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={"class_id": school_class.id, "date": next_week(), "recipe_id": 9999},
    )
    assert response.status_code == 404


def test_create_order_for_other_class(client, db, student_headers):
    """Test that students can only order for their own class."""
    other = SchoolClass(name="Year 11 Catering", students=10)
    db.add(other)
    db.commit()

    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={
            "class_id": other.id,
            "date": next_week(),
            "ingredients": [{"name": "Rice", "amount": "1", "unit": "cups"}],
        },
    )
    assert response.status_code == 403


def test_list_orders(client, order, teacher_headers, school_class):
    """Test that students see their own orders and teachers see everyone's."""
    other = client.post(
        "/api/v1/auth/register",
        json={
            "email": "other@example.com",
            "password": "testpass123",
            "class_id": school_class.id,
        },
    ).json()
    other_headers = {"Authorization": f"Bearer {other['access_token']}"}

    assert client.get("/api/v1/orders", headers=other_headers).json() == []
    response = client.get(f"/api/v1/orders/{order['id']}", headers=other_headers)
    assert response.status_code == 404

    response = client.get("/api/v1/orders", headers=teacher_headers)
    assert [o["id"] for o in response.json()] == [order["id"]]

    response = client.get(
        "/api/v1/orders", headers=teacher_headers, params={"order_status": "approved"}
    )
    assert response.json() == []


def test_approve_order_notifies_student(client, order, teacher_headers, student_headers):
    """Test approving an order."""
    response = set_status(client, teacher_headers, order["id"], "approved")
    assert response.status_code == 200
    assert response.json()["status"] == "approved"

    notifications = client.get("/api/v1/notifications", headers=student_headers).json()
    assert len(notifications) == 1
    assert notifications[0]["title"] == "Order Update"
    assert "approved" in notifications[0]["message"]
    assert notifications[0]["read"] is False


def test_student_cannot_change_status(client, order, student_headers):
    """Test that only teachers change order status."""
    response = set_status(client, student_headers, order["id"], "approved")
    assert response.status_code == 403


@pytest.mark.parametrize("target", ["prepared", "collected", "pending"])
def test_invalid_transition_from_pending(client, order, teacher_headers, target):
    """Test that pending orders must be approved or rejected first."""
    response = set_status(client, teacher_headers, order["id"], target)
    assert response.status_code == 409


def test_rejected_order_is_final(client, order, teacher_headers):
    """Test that rejected orders cannot move on."""
    assert set_status(client, teacher_headers, order["id"], "rejected").status_code == 200
    assert set_status(client, teacher_headers, order["id"], "approved").status_code == 409


def test_prepare_order_consumes_stock(client, db, order, teacher_headers, make_inventory):
    """Test that preparing an order decrements the storeroom."""
    flour = make_inventory("flour", 2000, "g")
    butter = make_inventory("Butter", 100, "g")
    milk = make_inventory("Milk", 1000, "ml")

    set_status(client, teacher_headers, order["id"], "approved")
    response = set_status(client, teacher_headers, order["id"], "prepared")
    assert response.status_code == 200
    assert response.json()["status"] == "prepared"

    db.refresh(flour)
    db.refresh(butter)
    db.refresh(milk)
    assert flour.current_stock == 1500
    assert butter.current_stock == 0
    assert milk.current_stock == 1000

    response = set_status(client, teacher_headers, order["id"], "collected")
    assert response.status_code == 200
    db.refresh(flour)
    assert flour.current_stock == 1500


def test_full_lifecycle_notifications(client, db, order, teacher_headers, student_headers):
    """Test that every status change notifies the student."""
    for target in ["approved", "prepared", "collected"]:
        assert set_status(client, teacher_headers, order["id"], target).status_code == 200

    assert (
        db.query(Notification).filter(Notification.user_id == student_headers.user_id).count()
        == 3
    )


def test_mark_notification_read(client, order, teacher_headers, student_headers):
    """Test reading a notification."""
    set_status(client, teacher_headers, order["id"], "approved")
    notification = client.get("/api/v1/notifications", headers=student_headers).json()[0]

    # Another user cannot mark it
    response = client.post(
        f"/api/v1/notifications/{notification['id']}/read", headers=teacher_headers
    )
    assert response.status_code == 404

    response = client.post(
        f"/api/v1/notifications/{notification['id']}/read", headers=student_headers
    )
    assert response.status_code == 200
    assert response.json()["read"] is True

    response = client.get(
        "/api/v1/notifications", headers=student_headers, params={"unread_only": True}
    )
    assert response.json() == []


def test_withdraw_pending_order(client, order, student_headers):
    """Test that a student can withdraw a pending order."""
    response = client.delete(f"/api/v1/orders/{order['id']}", headers=student_headers)
    assert response.status_code == 204
    assert client.get("/api/v1/orders", headers=student_headers).json() == []


def test_cannot_withdraw_approved_order(client, order, teacher_headers, student_headers):
    """Test that approved orders stay put."""
    set_status(client, teacher_headers, order["id"], "approved")
    response = client.delete(f"/api/v1/orders/{order['id']}", headers=student_headers)
    assert response.status_code == 409


def test_delete_class_with_orders(client, order, teacher_headers, school_class):
    """Test that classes with orders cannot be deleted."""
    response = client.delete(f"/api/v1/classes/{school_class.id}", headers=teacher_headers)
    assert response.status_code == 409


def test_deleted_recipe_keeps_its_orders(client, order, recipe, teacher_headers, student_headers):
    """Test that withdrawing a recipe hides it but leaves existing orders alone."""
    response = client.delete(f"/api/v1/recipes/{recipe['id']}", headers=teacher_headers)
    assert response.status_code == 204

    response = client.get(f"/api/v1/orders/{order['id']}", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["recipe_id"] == recipe["id"]
    assert response.json()["recipe_name"] == "Scones"

    response = client.post(
        "/api/v1/orders",
        headers=student_headers,
        json={"class_id": order["class_id"], "date": next_week(), "recipe_id": recipe["id"]},
    )
    assert response.status_code == 404
