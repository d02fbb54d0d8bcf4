from datetime import datetime, timezone

import pytest

from app.api.orders.models import OrderItemModel, OrderModel, OrderTrackingModel
from app.api.orders.services.service_customer import customer_label

ORDERS = "/api/orders/admin/orders"
RIDERS = "/api/riders/admin/riders"
CUSTOMER_A = "a1b2c3d4-1111-4000-8000-00000000000a"
CUSTOMER_B = "b1b2c3d4-2222-4000-8000-00000000000b"


def _add_order(db, restaurant_id, number, user_id=CUSTOMER_A, created_at=None, **extra):
    order = OrderModel(
        user_id=user_id,
        restaurant_id=restaurant_id,
        order_number=number,
        subtotal=20,
        delivery_fee=2.5,
        total=22.5,
        created_at=created_at or datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc),
        **extra,
    )
    db.add(order)
    db.commit()
    return order.id


@pytest.fixture
def order_id(db, restaurant):
    return _add_order(db, restaurant["id"], "ORD-0001")


@pytest.fixture
def rider(auth_client):
    resp = auth_client.post(RIDERS, json={"name": "Marco", "phone": "+39 333 000"})
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_get_order_with_display_total(auth_client, order_id):
    resp = auth_client.get(f"{ORDERS}/{order_id}")
    assert resp.status_code == 200, resp.text
    order = resp.json()
    assert order["restaurant_name"] == "Trattoria Roma"
    assert order["status"] == "pending"
    assert order["total"] == 22.5
    assert order["total_display"] == "€22.50"
    assert order["rider_name"] is None


def test_status_change_is_tracked(auth_client, db, order_id):
    resp = auth_client.patch(f"{ORDERS}/{order_id}/status", json={"status": "preparing", "notes": " Kitchen busy "})
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "preparing"

    [entry] = auth_client.get(f"{ORDERS}/{order_id}/tracking").json()
    assert entry["status"] == "preparing"
    assert entry["notes"] == "Kitchen busy"

    resp = auth_client.patch(f"{ORDERS}/{order_id}/status", json={"status": "shipped"})
    assert resp.status_code == 422
    assert db.query(OrderTrackingModel).count() == 1


def test_status_filter(auth_client, db, restaurant, order_id):
    _add_order(db, restaurant["id"], "ORD-0002", status="delivered")
    delivered = auth_client.get(ORDERS, params={"status": "delivered"}).json()
    assert [o["order_number"] for o in delivered] == ["ORD-0002"]


def test_assign_and_unassign_rider(auth_client, order_id, rider):
    resp = auth_client.patch(f"{ORDERS}/{order_id}/rider", json={"rider_id": rider["id"]})
    assert resp.status_code == 200, resp.text
    assert resp.json()["rider_name"] == "Marco"

    resp = auth_client.patch(f"{ORDERS}/{order_id}/rider", json={"rider_id": None})
    assert resp.status_code == 200
    assert resp.json()["rider_id"] is None


def test_assign_unknown_rider_is_400(auth_client, order_id):
    resp = auth_client.patch(f"{ORDERS}/{order_id}/rider", json={"rider_id": "ghost"})
    assert resp.status_code == 400


def test_assignable_riders(auth_client, rider):
    auth_client.post(RIDERS, json={"name": "Busy", "phone": "1", "is_available": False})
    auth_client.post(RIDERS, json={"name": "Retired", "phone": "2", "is_active": False})
    auth_client.post(RIDERS, json={"name": "Anna", "phone": "3"})
    riders = auth_client.get(f"{ORDERS}/assignable-riders").json()
    assert [r["name"] for r in riders] == ["Anna", "Marco"]


def test_items_fall_back_to_snapshot_name(auth_client, db, restaurant, order_id):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Lasagna", "image_url": "http://cdn.test/l.jpg"},
    ).json()
    db.add(OrderItemModel(order_id=order_id, menu_item_id=item["id"], menu_item_name="Old name", quantity=2, unit_price=9, subtotal=18))
    db.add(OrderItemModel(order_id=order_id, menu_item_id=None, menu_item_name="Removed dish", unit_price=2, subtotal=2))
    db.commit()

    items = {i["name"]: i for i in auth_client.get(f"{ORDERS}/{order_id}/items").json()}
    assert set(items) == {"Lasagna", "Removed dish"}
    assert items["Lasagna"]["image_url"] == "http://cdn.test/l.jpg"
    assert items["Lasagna"]["quantity"] == 2
    assert items["Removed dish"]["image_url"] is None


def test_delete_removes_items_and_tracking(auth_client, db, order_id):
    db.add(OrderItemModel(order_id=order_id, menu_item_name="Pizza", unit_price=8, subtotal=8))
    db.commit()
    auth_client.patch(f"{ORDERS}/{order_id}/status", json={"status": "cancelled"})

    resp = auth_client.delete(f"{ORDERS}/{order_id}")
    assert resp.status_code == 200, resp.text
    assert db.query(OrderModel).count() == 0
    assert db.query(OrderItemModel).count() == 0
    assert db.query(OrderTrackingModel).count() == 0
    assert auth_client.get(f"{ORDERS}/{order_id}").status_code == 404


def test_customers_are_derived_from_orders(auth_client, db, restaurant):
    _add_order(db, restaurant["id"], "ORD-1", user_id=CUSTOMER_A, created_at=datetime(2026, 9, 1, tzinfo=timezone.utc))
    _add_order(db, restaurant["id"], "ORD-2", user_id=CUSTOMER_A, created_at=datetime(2026, 9, 5, tzinfo=timezone.utc))
    _add_order(db, restaurant["id"], "ORD-3", user_id=CUSTOMER_B, created_at=datetime(2026, 9, 3, tzinfo=timezone.utc))

    resp = auth_client.get("/api/orders/admin/customers")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["totals"] == {"total": 2, "active": 2}
    first, second = body["customers"]
    assert first["id"] == CUSTOMER_A
    assert first["label"] == "user-a1b2c3d4..."
    assert first["order_count"] == 2
    assert first["last_order_at"].startswith("2026-09-05")
    assert second["id"] == CUSTOMER_B


def test_customer_label():
    assert customer_label("0123456789abcdef") == "user-01234567..."


def test_deleting_assigned_rider_unassigns_orders(auth_client, order_id, rider):
    auth_client.patch(f"{ORDERS}/{order_id}/rider", json={"rider_id": rider["id"]})
    assert auth_client.delete(f"{RIDERS}/{rider['id']}").status_code == 200

    order = auth_client.get(f"{ORDERS}/{order_id}").json()
    assert order["rider_id"] is None
    assert order["rider_name"] is None


def test_deleting_menu_item_keeps_order_line(auth_client, db, restaurant, order_id):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Gnocchi"},
    ).json()
    db.add(OrderItemModel(order_id=order_id, menu_item_id=item["id"], menu_item_name="Gnocchi", unit_price=7, subtotal=7))
    db.commit()

    assert auth_client.delete(f"/api/catalog/admin/menu-items/{item['id']}").status_code == 200
    [line] = auth_client.get(f"{ORDERS}/{order_id}/items").json()
    assert line["menu_item_id"] is None
    assert line["name"] == "Gnocchi"
    assert line["image_url"] is None
