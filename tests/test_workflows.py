# tests/test_workflows.py

"""
Route tests for member request workflows: membership renewals,
foundation class registrations, event signups, cell group join
requests and admin notifications.
"""

import pytest
from unittest.mock import patch

from core.config import settings
from core.date_utils import DATE_UNAVAILABLE


RENEWAL = {
    "fullName": "John Doe",
    "email": "john@example.com",
    "phone": "1234567890",
    "birthday": "1990-01-01",
    "memberSince": "2020",
    "agreeToTerms": True,
}

REGISTRATION = {
    "fullName": "Mary Banda",
    "email": "mary@example.com",
    "phone": "0977123456",
    "preferredSession": "June 2024",
}


# -----------------------------------------------------
# Membership renewals
# -----------------------------------------------------
def test_submit_renewal(client, fake_db, no_smtp):
    response = client.post("/api/membership/renew", json=RENEWAL)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Membership renewal submitted successfully"
    assert body["data"]["status"] == "pending"
    assert body["data"]["type"] == "membership-renewal"

    stored = fake_db.tables["membership_renewals"][0]
    assert stored["birthday"] == "1990-01-01T00:00:00"
    assert stored["renewalDate"] == stored["createdAt"]

    recipients = [call.kwargs["to"] for call in no_smtp.call_args_list]
    assert recipients == ["john@example.com", settings.ADMIN_EMAIL]


def test_submit_renewal_validation_errors(client, fake_db):
    response = client.post("/api/membership/renew", json=dict(RENEWAL, addressChange=True, newAddress=""))

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Validation failed",
        "errors": {"newAddress": "New Address is required when address change is selected"},
    }
    assert "membership_renewals" not in fake_db.tables


def test_submit_renewal_empty_body(client):
    response = client.post("/api/membership/renew")
    assert response.status_code == 400
    assert "fullName" in response.json()["errors"]


def test_submit_renewal_rejects_weekday_birthday(client, fake_db):
    response = client.post("/api/membership/renew", json=dict(RENEWAL, birthday="Sunday"))

    assert response.status_code == 400
    assert response.json()["errors"] == {"birthday": "Birthday must be a valid date"}
    assert "membership_renewals" not in fake_db.tables


def test_renewal_succeeds_when_email_fails(client, fake_db, no_smtp):
    no_smtp.side_effect = ConnectionError("smtp down")

    response = client.post("/api/membership/renew", json=RENEWAL)

    assert response.status_code == 201
    assert len(fake_db.tables["membership_renewals"]) == 1


def test_renewal_admin_routes_require_admin(client, editor_headers):
    assert client.get("/api/membership/renewals").status_code == 401
    assert client.get("/api/membership/renewals", headers=editor_headers).status_code == 403


def test_list_renewals_newest_first(client, fake_db, admin_headers):
    fake_db.seed(
        "membership_renewals",
        dict(RENEWAL, fullName="Older", renewalDate="2024-01-01T00:00:00+00:00"),
        dict(RENEWAL, fullName="Newer", renewalDate="2024-05-01T00:00:00+00:00", birthday={"imageUrl": "/x.png"}),
    )

    data = client.get("/api/membership/renewals", headers=admin_headers).json()

    assert [r["fullName"] for r in data] == ["Newer", "Older"]
    assert data[0]["birthday"] == DATE_UNAVAILABLE


def test_approve_renewal_sends_email(client, fake_db, admin_headers, no_smtp):
    renewal = fake_db.seed("membership_renewals", dict(RENEWAL, status="pending"))[0]

    response = client.put(
        f"/api/membership/renewals/{renewal['id']}",
        headers=admin_headers,
        json={"status": "approved"},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Membership renewal approved"
    assert response.json()["data"]["status"] == "approved"
    assert no_smtp.call_args.kwargs["subject"].startswith("Your Membership Renewal Has Been Approved")


def test_decline_renewal_sends_nothing(client, fake_db, admin_headers, no_smtp):
    renewal = fake_db.seed("membership_renewals", dict(RENEWAL, status="pending"))[0]

    response = client.put(
        f"/api/membership/renewals/{renewal['id']}",
        headers=admin_headers,
        json={"status": "declined"},
    )

    assert response.json()["message"] == "Membership renewal declined"
    no_smtp.assert_not_called()


def test_renewal_invalid_status(client, fake_db, admin_headers):
    renewal = fake_db.seed("membership_renewals", dict(RENEWAL, status="pending"))[0]

    response = client.put(
        f"/api/membership/renewals/{renewal['id']}",
        headers=admin_headers,
        json={"status": "graduated"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid status value. Must be 'pending', 'approved', or 'declined'.",
    }
    assert fake_db.tables["membership_renewals"][0]["status"] == "pending"


def test_renewal_status_missing_row(client, admin_headers):
    response = client.put("/api/membership/renewals/missing", headers=admin_headers, json={"status": "approved"})
    assert response.status_code == 404
    assert response.json()["error"] == "Membership renewal not found"


def test_delete_renewal(client, fake_db, admin_headers):
    renewal = fake_db.seed("membership_renewals", RENEWAL)[0]
    response = client.delete(f"/api/membership/renewals/{renewal['id']}", headers=admin_headers)
    assert response.json() == {"success": True, "message": "Membership renewal deleted successfully"}


# -----------------------------------------------------
# Foundation class registrations
# -----------------------------------------------------
def test_register_for_foundation_classes(client, fake_db, no_smtp):
    response = client.post("/api/foundation-classes/register", json=REGISTRATION)

    assert response.status_code == 201
    assert response.json()["message"] == "Foundation classes registration submitted successfully"
    assert fake_db.tables["foundation_class_registrations"][0]["status"] == "registered"
    assert no_smtp.call_count == 2


def test_register_missing_session(client):
    response = client.post("/api/foundation-classes/register", json=dict(REGISTRATION, preferredSession=""))
    assert response.status_code == 400
    assert response.json()["errors"] == {"preferredSession": "Preferred Session is required"}


def test_complete_registration(client, fake_db, admin_headers, no_smtp):
    registration = fake_db.seed("foundation_class_registrations", dict(REGISTRATION, status="attending"))[0]

    response = client.put(
        f"/api/foundation-classes/registrations/{registration['id']}",
        headers=admin_headers,
        json={"status": "completed"},
    )

    assert response.json()["message"] == "Foundation class registration completed"
    assert no_smtp.call_args.kwargs["to"] == "mary@example.com"


def test_registration_invalid_status_lists_allowed(client, fake_db, admin_headers):
    registration = fake_db.seed("foundation_class_registrations", REGISTRATION)[0]

    response = client.put(
        f"/api/foundation-classes/registrations/{registration['id']}",
        headers=admin_headers,
        json={"status": "graduated"},
    )

    assert response.status_code == 400
    assert response.json()["allowedValues"] == ["registered", "attending", "completed", "cancelled"]


# -----------------------------------------------------
# Event signup requests
# -----------------------------------------------------
def _event(fake_db):
    return fake_db.seed("events", {
        "title": "Baptism Sunday",
        "startDate": "2024-06-02T09:00:00+00:00",
    })[0]


def test_submit_baptism_signup(client, fake_db):
    event = _event(fake_db)

    response = client.post("/api/event-signup-requests", json={
        "eventId": event["id"],
        "eventType": "baptism",
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0977123456",
        "testimony": "Saved in 2019",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["eventType"] == "baptism"
    assert data["type"] == "event-signup"
    assert data["event"]["title"] == "Baptism Sunday"
    assert data["event"]["date"] == "June 2, 2024"


def test_baby_dedication_requires_child(client, fake_db):
    event = _event(fake_db)

    response = client.post("/api/event-signup-requests", json={
        "eventId": event["id"],
        "eventType": "babyDedication",
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0977123456",
    })

    assert response.status_code == 400
    assert set(response.json()["errors"]) == {"childName", "childDateOfBirth", "parentNames"}


def test_signup_for_unknown_event(client):
    response = client.post("/api/event-signup-requests", json={
        "eventId": "missing",
        "eventType": "other",
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phone": "0977123456",
    })
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Event not found"}


def test_signup_listings(client, fake_db, admin_headers):
    event = _event(fake_db)
    fake_db.seed(
        "event_signup_requests",
        {"eventId": event["id"], "eventType": "baptism", "fullName": "A", "submittedAt": "2024-05-01T00:00:00"},
        {"eventId": event["id"], "eventType": "other", "fullName": "B", "submittedAt": "2024-05-02T00:00:00"},
        {"eventId": "elsewhere", "eventType": "other", "fullName": "C", "submittedAt": "2024-05-03T00:00:00"},
    )

    everything = client.get("/api/event-signup-requests", headers=admin_headers).json()
    assert [r["fullName"] for r in everything] == ["C", "B", "A"]
    assert everything[0]["event"] is None

    by_type = client.get("/api/event-signup-requests/type/baptism", headers=admin_headers).json()
    assert [r["fullName"] for r in by_type] == ["A"]

    by_event = client.get(f"/api/event-signup-requests/event/{event['id']}", headers=admin_headers).json()
    assert [r["fullName"] for r in by_event] == ["B", "A"]


def test_signup_status_update(client, fake_db, admin_headers):
    event = _event(fake_db)
    signup = fake_db.seed("event_signup_requests", {
        "eventId": event["id"], "eventType": "other", "fullName": "A", "status": "pending",
    })[0]

    ok = client.put(f"/api/event-signup-requests/{signup['id']}", headers=admin_headers, json={"status": "approved"})
    assert ok.json()["status"] == "approved"

    bad = client.put(f"/api/event-signup-requests/{signup['id']}", headers=admin_headers, json={"status": "maybe"})
    assert bad.status_code == 400
    assert bad.json() == {
        "success": False,
        "error": "Invalid status value",
        "allowedValues": ["pending", "approved", "declined"],
    }

    missing = client.put("/api/event-signup-requests/missing", headers=admin_headers, json={"status": "approved"})
    assert missing.json()["error"] == "Signup request not found"


# -----------------------------------------------------
# Cell group join requests
# -----------------------------------------------------
def _cell_group(fake_db, **extra):
    zone = fake_db.seed("zones", {"name": "Central Zone"})[0]
    return fake_db.seed("cell_groups", dict({
        "name": "Faith Builders",
        "leader": "David Mwale",
        "leaderContact": "david@example.com",
        "zoneId": zone["id"],
    }, **extra))[0]


def test_submit_join_request(client, fake_db, no_smtp):
    group = _cell_group(fake_db)

    response = client.post("/api/cell-group-join-requests", json={
        "cellGroupId": group["id"],
        "name": "Jane",
        "email": "jane@example.com",
        "phone": "0977123456",
    })

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Join request submitted successfully"
    assert body["request"]["status"] == "pending"

    recipients = [call.kwargs["to"] for call in no_smtp.call_args_list]
    assert recipients == ["jane@example.com", "david@example.com"]


def test_join_request_missing_fields(client):
    response = client.post("/api/cell-group-join-requests", json={"name": "Jane"})
    assert response.status_code == 400
    assert response.json()["error"] == "Please provide all required fields: cellGroupId, name, email, phone"


def test_join_request_unknown_group(client):
    response = client.post("/api/cell-group-join-requests", json={
        "cellGroupId": "missing",
        "name": "Jane",
        "email": "jane@example.com",
        "phone": "0977123456",
    })
    assert response.status_code == 404
    assert response.json()["error"] == "Cell group not found"


def test_join_request_listing_embeds_group_and_zone(client, fake_db, admin_headers):
    group = _cell_group(fake_db)
    fake_db.seed("cell_group_join_requests", {
        "cellGroupId": group["id"], "name": "Jane", "status": "pending", "createdAt": "2024-05-01T00:00:00",
    })

    data = client.get("/api/cell-group-join-requests", headers=admin_headers).json()

    assert data[0]["cellGroup"]["name"] == "Faith Builders"
    assert data[0]["cellGroup"]["zone"]["name"] == "Central Zone"

    by_group = client.get(f"/api/cell-group-join-requests/cell-group/{group['id']}", headers=admin_headers).json()
    assert len(by_group) == 1


def test_join_request_status(client, fake_db, admin_headers):
    group = _cell_group(fake_db)
    join = fake_db.seed("cell_group_join_requests", {"cellGroupId": group["id"], "name": "Jane", "status": "pending"})[0]

    bad = client.put(f"/api/cell-group-join-requests/{join['id']}", headers=admin_headers, json={"status": "declined"})
    assert bad.status_code == 400
    assert bad.json()["error"] == "Please provide a valid status: pending, approved, or rejected"

    ok = client.put(f"/api/cell-group-join-requests/{join['id']}", headers=admin_headers, json={"status": "rejected"})
    assert ok.json()["status"] == "rejected"

    deleted = client.delete(f"/api/cell-group-join-requests/{join['id']}", headers=admin_headers)
    assert deleted.json() == {"message": "Join request deleted successfully"}


# -----------------------------------------------------
# Admin notifications
# -----------------------------------------------------
def test_send_notification(client, admin_headers):
    with patch("routers.notifications.send_notification_email", return_value=True) as send:
        response = client.post("/api/notifications/send", headers=admin_headers, json={
            "type": "membership_renewal_approved",
            "recipient": {"email": "john@example.com", "name": "John"},
            "data": {"memberSince": "2020"},
        })

    assert response.status_code == 200
    assert response.json() == {"message": "Notification sent successfully", "delivered": True}
    send.assert_called_once_with(
        "membership_renewal_approved",
        {"email": "john@example.com", "name": "John", "phone": None},
        {"memberSince": "2020"},
    )


def test_notification_without_smtp_reports_not_delivered(client, admin_headers):
    response = client.post("/api/notifications/send", headers=admin_headers, json={
        "type": "foundation_class_completed",
        "recipient": {"email": "mary@example.com"},
    })
    assert response.json()["delivered"] is False


def test_notification_missing_fields(client, admin_headers):
    response = client.post("/api/notifications/send", headers=admin_headers, json={"type": "x", "recipient": {}})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields"


def test_notification_delivery_failure(client, admin_headers):
    with patch("routers.notifications.send_notification_email", side_effect=ConnectionError("smtp down")):
        response = client.post("/api/notifications/send", headers=admin_headers, json={
            "type": "membership_renewal_declined",
            "recipient": {"email": "john@example.com"},
        })

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to send email notification: smtp down"


def test_notification_requires_admin(client, editor_headers):
    response = client.post("/api/notifications/send", headers=editor_headers, json={})
    assert response.status_code == 403


@pytest.mark.parametrize("table,url", [
    ("membership_renewals", "/api/membership/renewals"),
    ("foundation_class_registrations", "/api/foundation-classes/registrations"),
    ("event_signup_requests", "/api/event-signup-requests"),
    ("cell_group_join_requests", "/api/cell-group-join-requests"),
])
@pytest.mark.parametrize("status", [5, ["approved"], {"value": "approved"}])
def test_non_string_status_is_a_400(client, fake_db, admin_headers, table, url, status):
    row = fake_db.seed(table, {"fullName": "Jane Doe", "status": "pending"})[0]

    response = client.put(f"{url}/{row['id']}", headers=admin_headers, json={"status": status})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert fake_db.tables[table][0]["status"] == "pending"
