RIDERS = "/api/riders/admin/riders"


def test_create_rider_defaults(auth_client):
    resp = auth_client.post(
        RIDERS,
        json={"name": " Luigi ", "phone": "333", "user_id": "  ", "vehicle_number": ""},
    )
    assert resp.status_code == 201, resp.text
    rider = resp.json()
    assert rider["name"] == "Luigi"
    assert rider["user_id"] is None
    assert rider["vehicle_number"] is None
    assert rider["vehicle_type"] == "bike"
    assert rider["is_available"] is True


def test_name_and_phone_required(auth_client):
    assert auth_client.post(RIDERS, json={"name": "No phone"}).status_code == 422


def test_unknown_vehicle_type_is_rejected(auth_client):
    resp = auth_client.post(RIDERS, json={"name": "X", "phone": "1", "vehicle_type": "helicopter"})
    assert resp.status_code == 422


def test_linked_users(auth_client):
    auth_client.post(RIDERS, json={"name": "Zoe", "phone": "1", "user_id": "user-2"})
    auth_client.post(RIDERS, json={"name": "Ada", "phone": "2", "user_id": "user-1"})
    auth_client.post(RIDERS, json={"name": "Walk-in", "phone": "3"})
    resp = auth_client.get(f"{RIDERS}/linked-users")
    assert resp.status_code == 200, resp.text
    assert resp.json() == [
        {"user_id": "user-1", "name": "Ada"},
        {"user_id": "user-2", "name": "Zoe"},
    ]


def test_update_and_unlink(auth_client):
    rider = auth_client.post(RIDERS, json={"name": "Piero", "phone": "1", "user_id": "user-9"}).json()
    resp = auth_client.put(f"{RIDERS}/{rider['id']}", json={"user_id": "", "vehicle_type": "scooter"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["user_id"] is None
    assert resp.json()["vehicle_type"] == "scooter"
    assert resp.json()["name"] == "Piero"


def test_delete_rider(auth_client):
    rider = auth_client.post(RIDERS, json={"name": "Gone", "phone": "1"}).json()
    assert auth_client.delete(f"{RIDERS}/{rider['id']}").status_code == 200
    assert auth_client.get(f"{RIDERS}/{rider['id']}").status_code == 404


def test_update_ignores_nulls_for_required_columns(auth_client):
    rider = auth_client.post(
        RIDERS,
        json={"name": "Bruno", "phone": "5", "vehicle_type": "car", "vehicle_number": "AB123"},
    ).json()
    resp = auth_client.put(
        f"{RIDERS}/{rider['id']}",
        json={"name": None, "phone": None, "vehicle_type": None, "is_active": None, "vehicle_number": None},
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["name"] == "Bruno"
    assert updated["phone"] == "5"
    assert updated["vehicle_type"] == "car"
    assert updated["is_active"] is True
    assert updated["vehicle_number"] is None
