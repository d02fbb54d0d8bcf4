import pytest

from app.config.settings import LANGUAGE_COOKIE
from app.i18n.config import language_from_header, resolve_language, translate


def test_translate_falls_back_to_english_then_key():
    assert translate("nav.orders", "it") == "Ordini"
    assert translate("nav.orders", "de") == "Orders"
    assert translate("nav.unknown", "it") == "nav.unknown"


@pytest.mark.parametrize(
    "header, expected",
    [
        ("it-IT,it;q=0.9,en;q=0.8", "it"),
        ("de-DE,en;q=0.5", "en"),
        ("fr", None),
        (None, None),
    ],
)
def test_language_from_header(header, expected):
    assert language_from_header(header) == expected


def test_cookie_wins_over_header():
    assert resolve_language("en", "it-IT") == "en"
    assert resolve_language("xx", "it-IT") == "it"
    assert resolve_language(None, None) == "en"


def test_language_endpoint_is_public(client):
    resp = client.get("/api/i18n/language", headers={"Accept-Language": "it-IT,it;q=0.9"})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"language": "it", "supported": ["en", "it"]}


def test_set_language_stores_cookie(client):
    resp = client.put("/api/i18n/language", json={"language": "IT"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["language"] == "it"
    assert resp.cookies.get(LANGUAGE_COOKIE) == "it"

    resp = client.get("/api/i18n/language", headers={"Accept-Language": "en"})
    assert resp.json()["language"] == "it"


def test_set_unsupported_language(client):
    resp = client.put("/api/i18n/language", json={"language": "de"})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Unsupported language 'de'")


def test_navigation_is_translated(auth_client):
    auth_client.cookies.set(LANGUAGE_COOKIE, "it")
    resp = auth_client.get("/api/dashboard/navigation")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["language"] == "it"
    assert body["currency_symbol"] == "€"
    assert body["currency_code"] == "EUR"
    labels = {item["href"]: item["label"] for item in body["items"]}
    assert labels["/dashboard"] == "Panoramica"
    assert labels["/dashboard/orders"] == "Ordini"
    assert len(body["items"]) == 14


def test_overview_counts(auth_client, restaurant):
    auth_client.post("/api/catalog/admin/menu-items", json={"restaurant_id": restaurant["id"], "name": "Pizza"})
    resp = auth_client.get("/api/dashboard/overview")
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"restaurants": 1, "products": 1, "orders": 0, "customers": 0}
