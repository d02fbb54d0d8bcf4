from datetime import datetime, time, timezone

from app.api.events.services.service_event import REQUIRED_FIELDS_MESSAGE, combine_event_date

EVENTS = "/api/events/admin/events"


def _event_form(restaurant_id, **overrides):
    form = {
        "restaurant_id": restaurant_id,
        "title": "Jazz Night",
        "event_date": "2026-05-01",
        "start_time": "20:00",
        "end_time": "23:30",
    }
    form.update(overrides)
    return form


def test_combine_event_date_uses_app_timezone():
    # Europe/Rome is UTC+2 in May and UTC+1 in January
    assert combine_event_date("2026-05-01", time(20, 0)) == datetime(2026, 5, 1, 18, 0, tzinfo=timezone.utc)
    assert combine_event_date("2026-01-10", time(20, 0)) == datetime(2026, 1, 10, 19, 0, tzinfo=timezone.utc)


def test_create_event(auth_client, restaurant):
    resp = auth_client.post(EVENTS, json=_event_form(restaurant["id"], max_attendees="0", ticket_price="15"))
    assert resp.status_code == 201, resp.text
    event = resp.json()
    assert event["event_date"].startswith("2026-05-01T18:00")
    assert event["start_time"] == "20:00"
    assert event["end_time"] == "23:30"
    assert event["max_attendees"] is None
    assert event["ticket_price"] == 15
    assert event["has_dj"] is False
    assert event["is_active"] is True
    assert event["restaurant_name"] == "Trattoria Roma"


def test_missing_required_fields(auth_client, restaurant):
    resp = auth_client.post(EVENTS, json=_event_form(restaurant["id"], start_time="  "))
    assert resp.status_code == 400
    assert resp.json() == {"detail": REQUIRED_FIELDS_MESSAGE}


def test_invalid_time_format(auth_client, restaurant):
    resp = auth_client.post(EVENTS, json=_event_form(restaurant["id"], start_time="8pm"))
    assert resp.status_code == 400
    assert resp.json() == {"detail": "Invalid date or time format"}


def test_update_writes_flags_but_keeps_blank_text(auth_client, restaurant):
    event = auth_client.post(
        EVENTS,
        json=_event_form(restaurant["id"], has_dj=True, dj_name="DJ Luca", description="Live set"),
    ).json()

    resp = auth_client.put(
        f"{EVENTS}/{event['id']}",
        json=_event_form(restaurant["id"], title="Jazz & Wine", has_dj=False, dj_name="", description=""),
    )
    assert resp.status_code == 200, resp.text
    updated = resp.json()
    assert updated["title"] == "Jazz & Wine"
    assert updated["has_dj"] is False
    assert updated["dj_name"] == "DJ Luca"
    assert updated["description"] == "Live set"


def test_list_newest_event_date_first(auth_client, restaurant):
    auth_client.post(EVENTS, json=_event_form(restaurant["id"], title="Early", event_date="2026-03-01"))
    auth_client.post(EVENTS, json=_event_form(restaurant["id"], title="Late", event_date="2026-09-01"))
    titles = [e["title"] for e in auth_client.get(EVENTS).json()]
    assert titles == ["Late", "Early"]


def test_delete_event(auth_client, restaurant):
    event = auth_client.post(EVENTS, json=_event_form(restaurant["id"])).json()
    assert auth_client.delete(f"{EVENTS}/{event['id']}").status_code == 200
    assert auth_client.get(f"{EVENTS}/{event['id']}").status_code == 404
