def test_category_slug_from_name_and_conflict(auth_client):
    resp = auth_client.post("/api/catalog/admin/categories", json={"name": "Pizza Bianca"})
    assert resp.status_code == 201, resp.text
    assert resp.json()["slug"] == "pizza-bianca"

    resp = auth_client.post("/api/catalog/admin/categories", json={"name": "Other", "slug": "pizza-bianca"})
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Category slug is already in use"}


def test_category_lookup_is_sorted_by_name(auth_client):
    for name in ("Sushi", "Burger", "Pasta"):
        auth_client.post("/api/catalog/admin/categories", json={"name": name})
    lookup = auth_client.get("/api/catalog/admin/categories/lookup").json()
    assert [c["name"] for c in lookup] == ["Burger", "Pasta", "Sushi"]


def test_menu_item_numbers_are_coerced(auth_client, restaurant):
    resp = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={
            "restaurant_id": restaurant["id"],
            "name": " Margherita ",
            "price": "8.50",
            "calories": "abc",
            "order_index": "",
            "description": "  ",
        },
    )
    assert resp.status_code == 201, resp.text
    item = resp.json()
    assert item["name"] == "Margherita"
    assert item["price"] == 8.5
    assert item["calories"] == 0
    assert item["order_index"] == 0
    assert item["category"] == ""
    assert item["description"] is None
    assert item["restaurant_name"] == "Trattoria Roma"


def test_menu_item_category_is_trimmed_and_filterable(auth_client, restaurant):
    auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Diavola", "category": "  Pizze "},
    )
    auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Tiramisu", "category": "Dolci"},
    )
    pizzas = auth_client.get("/api/catalog/admin/menu-items", params={"category": "Pizze"}).json()
    assert [i["name"] for i in pizzas] == ["Diavola"]


def test_menu_item_update_keeps_unsent_fields(auth_client, restaurant):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Carbonara", "price": 12, "category": "Pasta"},
    ).json()
    resp = auth_client.put(f"/api/catalog/admin/menu-items/{item['id']}", json={"price": "13.5"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["price"] == 13.5
    assert resp.json()["category"] == "Pasta"


def test_menu_item_unknown_restaurant_is_400(auth_client):
    resp = auth_client.post("/api/catalog/admin/menu-items", json={"restaurant_id": "nope", "name": "X"})
    assert resp.status_code == 400


def test_addon_with_options(auth_client, restaurant):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Burger"},
    ).json()
    addon = auth_client.post(
        "/api/catalog/admin/addons",
        json={"menu_item_id": item["id"], "name": "Sauces", "max_selections": 2},
    )
    assert addon.status_code == 201, addon.text
    addon = addon.json()
    assert addon["menu_item_name"] == "Burger"
    assert addon["restaurant_name"] == "Trattoria Roma"

    base = f"/api/catalog/admin/addons/{addon['id']}/options"
    ketchup = auth_client.post(base, json={"name": "Ketchup", "order_index": 2}).json()
    auth_client.post(base, json={"name": "Mayo", "price": 0.5, "order_index": 1})
    assert [o["name"] for o in auth_client.get(base).json()] == ["Mayo", "Ketchup"]

    resp = auth_client.put(f"/api/catalog/admin/addons/options/{ketchup['id']}", json={"price": 0.3})
    assert resp.status_code == 200, resp.text
    assert resp.json()["price"] == 0.3
    assert resp.json()["name"] == "Ketchup"

    full = auth_client.get(f"/api/catalog/admin/addons/{addon['id']}").json()
    assert len(full["options"]) == 2

    assert auth_client.delete(f"/api/catalog/admin/addons/options/{ketchup['id']}").status_code == 200
    assert len(auth_client.get(base).json()) == 1


def test_addon_for_missing_menu_item_is_400(auth_client):
    resp = auth_client.post("/api/catalog/admin/addons", json={"menu_item_id": "missing", "name": "Sauces"})
    assert resp.status_code == 400


def test_category_update_ignores_nulls_for_required_columns(auth_client):
    cat = auth_client.post(
        "/api/catalog/admin/categories",
        json={"name": "Dolci", "order_index": 3, "icon": "cake"},
    ).json()
    resp = auth_client.put(
        f"/api/catalog/admin/categories/{cat['id']}",
        json={"name": None, "order_index": None, "is_active": None, "icon": None},
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["name"] == "Dolci"
    assert updated["order_index"] == 3
    assert updated["is_active"] is True
    assert updated["icon"] is None


def test_menu_item_update_ignores_nulls_for_required_columns(auth_client, restaurant):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Tiramisu", "price": 6, "description": "Classic"},
    ).json()
    resp = auth_client.put(
        f"/api/catalog/admin/menu-items/{item['id']}",
        json={"is_available": None, "name": None, "price": None, "description": None},
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["is_available"] is True
    assert updated["name"] == "Tiramisu"
    assert updated["price"] == 6
    assert updated["description"] is None


def test_addon_update_ignores_nulls_for_required_columns(auth_client, restaurant):
    item = auth_client.post(
        "/api/catalog/admin/menu-items",
        json={"restaurant_id": restaurant["id"], "name": "Burger"},
    ).json()
    addon = auth_client.post(
        "/api/catalog/admin/addons",
        json={"menu_item_id": item["id"], "name": "Sauces", "is_required": True, "max_selections": 2},
    ).json()
    resp = auth_client.put(
        f"/api/catalog/admin/addons/{addon['id']}",
        json={"is_required": None, "name": None, "max_selections": None},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["is_required"] is True
    assert resp.json()["name"] == "Sauces"
    assert resp.json()["max_selections"] is None

    option = auth_client.post(
        f"/api/catalog/admin/addons/{addon['id']}/options",
        json={"name": "Ketchup", "price": 0.2},
    ).json()
    resp = auth_client.put(
        f"/api/catalog/admin/addons/options/{option['id']}",
        json={"name": None, "price": None, "is_active": None},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Ketchup"
    assert resp.json()["price"] == 0.2
    assert resp.json()["is_active"] is True
