CONFIG = "/api/content/admin/config"
CONTENT = "/api/content/admin/content"


def test_config_value_text_is_parsed_as_json(auth_client):
    resp = auth_client.post(CONFIG, json={"key": "delivery", "value": '{"radius_km": 5, "open": true}'})
    assert resp.status_code == 201, resp.text
    assert resp.json()["value"] == {"radius_km": 5, "open": True}

    resp = auth_client.post(CONFIG, json={"key": "banner", "value": ["a", "b"], "description": " Home "})
    assert resp.json()["value"] == ["a", "b"]
    assert resp.json()["description"] == "Home"

    keys = [c["key"] for c in auth_client.get(CONFIG).json()]
    assert keys == ["banner", "delivery"]


def test_config_invalid_json_is_400(auth_client):
    resp = auth_client.post(CONFIG, json={"key": "broken", "value": "{not json"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Value must be valid JSON")
    assert auth_client.get(CONFIG).json() == []


def test_config_duplicate_key_is_409(auth_client):
    auth_client.post(CONFIG, json={"key": "theme", "value": '"dark"'})
    resp = auth_client.post(CONFIG, json={"key": "theme", "value": '"light"'})
    assert resp.status_code == 409


def test_config_update_and_delete(auth_client):
    entry = auth_client.post(CONFIG, json={"key": "min_order", "value": "10"}).json()
    assert entry["value"] == 10

    resp = auth_client.put(f"{CONFIG}/{entry['id']}", json={"value": "12.5"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["value"] == 12.5

    assert auth_client.delete(f"{CONFIG}/{entry['id']}").status_code == 200
    assert auth_client.put(f"{CONFIG}/{entry['id']}", json={"value": "1"}).status_code == 404


def test_content_defaults(auth_client):
    resp = auth_client.post(CONTENT, json={"title": "Welcome"})
    assert resp.status_code == 201, resp.text
    block = resp.json()
    assert block["page"] == "home"
    assert block["section"] == "default"
    assert block["content"] == {}
    assert block["is_active"] is True


def test_content_filter_and_order(auth_client):
    auth_client.post(CONTENT, json={"page": "about", "section": "team", "order_index": 2})
    auth_client.post(CONTENT, json={"page": "about", "section": "story", "order_index": 1})
    auth_client.post(CONTENT, json={"page": "home", "section": "hero"})

    about = auth_client.get(CONTENT, params={"page": "about"}).json()
    assert [b["section"] for b in about] == ["story", "team"]
    assert len(auth_client.get(CONTENT).json()) == 3


def test_content_update_keeps_page_when_blank(auth_client):
    block = auth_client.post(CONTENT, json={"page": "faq", "content": {"q": "Delivery?"}}).json()
    resp = auth_client.put(f"{CONTENT}/{block['id']}", json={"page": "", "content": {"q": "Pickup?"}})
    assert resp.status_code == 200, resp.text
    assert resp.json()["page"] == "faq"
    assert resp.json()["content"] == {"q": "Pickup?"}


def test_content_update_ignores_nulls_for_required_columns(auth_client):
    block = auth_client.post(
        CONTENT,
        json={"page": "home", "section": "hero", "title": "Hi", "order_index": 4},
    ).json()
    resp = auth_client.put(
        f"{CONTENT}/{block['id']}",
        json={"is_active": None, "order_index": None, "section": None, "title": None},
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["is_active"] is True
    assert updated["order_index"] == 4
    assert updated["section"] == "hero"
    assert updated["title"] is None
