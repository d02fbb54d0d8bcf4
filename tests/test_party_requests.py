from datetime import date

import pytest

from app.api.events.models.model_notification import NotificationModel
from app.api.events.models.model_party_request import PartyRequestModel
from app.api.events.models.model_user_profile import UserProfileModel

PARTY_REQUESTS = "/api/events/admin/party-requests"
USER_ID = "6f1c2a34-0000-4000-8000-000000000001"


@pytest.fixture
def party_request(db, restaurant):
    db.add(UserProfileModel(id=USER_ID, email="giulia@example.com", full_name="Giulia"))
    request = PartyRequestModel(
        user_id=USER_ID,
        restaurant_id=restaurant["id"],
        event_name="Birthday",
        event_date=date(2026, 6, 12),
        expected_attendees=25,
    )
    db.add(request)
    db.commit()
    return request.id


def test_list_includes_requester_email(auth_client, party_request):
    resp = auth_client.get(PARTY_REQUESTS)
    assert resp.status_code == 200, resp.text
    [item] = resp.json()
    assert item["id"] == party_request
    assert item["user_email"] == "giulia@example.com"
    assert item["restaurant_name"] == "Trattoria Roma"
    assert item["status"] == "pending"


def test_request_without_profile_has_no_email(auth_client, db, restaurant):
    db.add(PartyRequestModel(
        user_id="no-profile",
        restaurant_id=restaurant["id"],
        event_name="Dinner",
        event_date=date(2026, 7, 1),
    ))
    db.commit()
    [item] = auth_client.get(PARTY_REQUESTS).json()
    assert item["user_email"] is None


def test_approve_notifies_requester(auth_client, db, party_request):
    resp = auth_client.patch(
        f"{PARTY_REQUESTS}/{party_request}/status",
        json={"status": "approved", "admin_notes": " Bring ID "},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["status"] == "approved"
    assert resp.json()["admin_notes"] == "Bring ID"

    [notification] = db.query(NotificationModel).all()
    assert notification.user_id == USER_ID
    assert notification.type == "party_request"
    assert notification.title == "Party Request Approved"
    assert notification.message == 'Your party request "Birthday" has been approved. Notes: Bring ID'
    assert notification.related_id == party_request
    assert notification.is_read is False


def test_reject_without_notes(auth_client, db, party_request):
    auth_client.patch(f"{PARTY_REQUESTS}/{party_request}/status", json={"status": "rejected"})
    [notification] = db.query(NotificationModel).all()
    assert notification.title == "Party Request Rejected"
    assert notification.message == 'Your party request "Birthday" has been rejected.'


def test_back_to_pending_sends_nothing(auth_client, db, party_request):
    resp = auth_client.patch(f"{PARTY_REQUESTS}/{party_request}/status", json={"status": "pending"})
    assert resp.status_code == 200
    assert db.query(NotificationModel).count() == 0


def test_status_filter_and_invalid_status(auth_client, party_request):
    assert auth_client.get(PARTY_REQUESTS, params={"status": "approved"}).json() == []
    resp = auth_client.patch(f"{PARTY_REQUESTS}/{party_request}/status", json={"status": "maybe"})
    assert resp.status_code == 422
