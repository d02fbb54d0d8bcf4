from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from app.api.offers.services.service_special_offer import REQUIRED_FIELDS_MESSAGE, parse_instant

OFFERS = "/api/offers/admin/offers"


def _offer_form(**overrides):
    form = {
        "title": "Summer deal",
        "discount_type": "percentage",
        "discount_value": 10,
        "start_date": "2026-07-01T00:00",
        "end_date": "2026-07-31T23:59",
    }
    form.update(overrides)
    return form


def test_parse_instant():
    assert parse_instant("2026-07-01T12:00", "start date") == datetime(2026, 7, 1, 10, 0, tzinfo=timezone.utc)
    assert parse_instant("2026-07-01T12:00+00:00", "start date") == datetime(2026, 7, 1, 12, 0, tzinfo=timezone.utc)
    with pytest.raises(HTTPException) as exc:
        parse_instant("tomorrow", "end date")
    assert exc.value.detail == "Invalid end date"


def test_parse_instant_accepts_utc_designator():
    expected = datetime(2026, 7, 1, 12, 0, tzinfo=timezone.utc)
    assert parse_instant("2026-07-01T12:00:00.000Z", "start date") == expected
    assert parse_instant(" 2026-07-01T12:00:00Z ", "start date") == expected


def test_create_with_browser_iso_dates(auth_client):
    resp = auth_client.post(
        OFFERS,
        json=_offer_form(start_date="2026-07-01T08:00:00.000Z", end_date="2026-07-31T21:59:00.000Z"),
    )
    assert resp.status_code == 201, resp.text
    assert resp.json()["start_date"].startswith("2026-07-01T08:00")


def test_create_global_offer(auth_client):
    resp = auth_client.post(OFFERS, json=_offer_form(code=" SUMMER10 ", description=""))
    assert resp.status_code == 201, resp.text
    offer = resp.json()
    assert offer["restaurant_id"] is None
    assert offer["restaurant_name"] is None
    assert offer["code"] == "SUMMER10"
    assert offer["description"] is None
    assert offer["usage_count"] == 0
    assert offer["is_active"] is True
    assert offer["start_date"].startswith("2026-06-30T22:00")


def test_required_fields(auth_client):
    resp = auth_client.post(OFFERS, json=_offer_form(end_date=""))
    assert resp.status_code == 400
    assert resp.json() == {"detail": REQUIRED_FIELDS_MESSAGE}


def test_end_must_follow_start(auth_client):
    resp = auth_client.post(OFFERS, json=_offer_form(end_date="2026-07-01T00:00"))
    assert resp.status_code == 400
    assert resp.json() == {"detail": "End date must be after start date"}


def test_duplicate_code_is_409(auth_client):
    auth_client.post(OFFERS, json=_offer_form(code="WELCOME"))
    resp = auth_client.post(OFFERS, json=_offer_form(title="Again", code="WELCOME"))
    assert resp.status_code == 409
    assert resp.json() == {"detail": "Offer code is already in use"}


def test_update_replaces_every_field(auth_client, restaurant):
    offer = auth_client.post(OFFERS, json=_offer_form(restaurant_id=restaurant["id"], code="ROMA")).json()
    assert offer["restaurant_name"] == "Trattoria Roma"

    resp = auth_client.put(f"{OFFERS}/{offer['id']}", json=_offer_form(discount_type="fixed", discount_value=5))
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["restaurant_id"] is None
    assert updated["code"] is None
    assert updated["discount_type"] == "fixed"
    assert updated["discount_value"] == 5


def test_unknown_restaurant_is_400(auth_client):
    resp = auth_client.post(OFFERS, json=_offer_form(restaurant_id="missing"))
    assert resp.status_code == 400


def test_delete_offer(auth_client):
    offer = auth_client.post(OFFERS, json=_offer_form()).json()
    assert auth_client.delete(f"{OFFERS}/{offer['id']}").status_code == 200
    assert auth_client.get(OFFERS).json() == []
