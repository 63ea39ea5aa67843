"""Tests for contact form endpoints."""

from sqlalchemy import select

from notifications.model import EmailLog


def test_submit_contact_form(client, contact_payload):
    response = client.post("/api/contact/submit", json=contact_payload)

    assert response.status_code == 201
    assert response.json() == {
        "success": True,
        "message": "Contact form submitted successfully",
        "data": {"id": 1},
        "statusCode": 201,
    }

    contact = client.get("/api/contact/1").json()["data"]["contact"]
    assert contact["id"] == 1
    assert contact["status"] == "new"
    assert contact["name"] == "Jo"
    assert contact["package"] is None


def test_submit_sends_and_logs_reply(client, contact_payload, transport, db):
    client.post("/api/contact/submit", json=contact_payload)

    assert len(transport.sent) == 1
    assert transport.sent[0]["To"] == "jo@x.com"
    log = db.fetch_one(select(EmailLog.__table__))
    assert log["email_type"] == "contact_reply"
    assert log["status"] == "sent"


def test_submit_succeeds_when_email_fails(client, contact_payload, transport, db):
    transport.error = TimeoutError("smtp timed out")

    response = client.post("/api/contact/submit", json=contact_payload)

    assert response.status_code == 201
    log = db.fetch_one(select(EmailLog.__table__))
    assert log["status"] == "failed"
    assert log["error_message"] == "smtp timed out"


def test_submit_sanitizes_and_lowercases(client):
    response = client.post("/api/contact/submit", json={
        "name": "  <Jo>  ",
        "email": "Jo@X.com",
        "event_name": "<Wedding>",
        "package": " elite ",
        "details": "Need a full bar setup for 100 guests",
    })

    contact_id = response.json()["data"]["id"]
    contact = client.get(f"/api/contact/{contact_id}").json()["data"]["contact"]
    assert contact["name"] == "Jo"
    assert contact["email"] == "jo@x.com"
    assert contact["event_name"] == "Wedding"
    assert contact["package"] == "elite"


def test_submit_reports_all_violations(client, transport):
    response = client.post("/api/contact/submit", json={"name": "J", "email": "bad", "event_name": "W", "details": "x"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["statusCode"] == 400
    assert len(body["errors"]) == 4
    assert transport.sent == []
    assert client.get("/api/contact/list").json()["data"]["count"] == 0


def test_submit_with_empty_body(client):
    response = client.post("/api/contact/submit", json={})

    assert response.status_code == 400
    assert len(response.json()["errors"]) == 4


def test_get_missing_contact(client):
    response = client.get("/api/contact/42")

    assert response.status_code == 404
    assert response.json() == {"success": False, "errors": ["Contact not found"], "statusCode": 404}


def test_list_contacts_filters_and_limits(client, contact_payload):
    for _ in range(3):
        client.post("/api/contact/submit", json=contact_payload)
    client.put("/api/contact/2/status", json={"status": "viewed"})

    all_contacts = client.get("/api/contact/list").json()["data"]
    assert all_contacts["count"] == 3
    # Newest first
    assert [c["id"] for c in all_contacts["contacts"]] == [3, 2, 1]

    viewed = client.get("/api/contact/list", params={"status": "viewed"}).json()["data"]
    assert viewed["count"] == 1
    assert viewed["contacts"][0]["id"] == 2

    limited = client.get("/api/contact/list", params={"limit": 2}).json()["data"]
    assert limited["count"] == 2


def test_update_contact_status_with_notes(client, contact_id):
    response = client.put(f"/api/contact/{contact_id}/status", json={"status": "responded", "notes": " <called> back "})

    assert response.status_code == 200
    contact = response.json()["data"]["contact"]
    assert contact["status"] == "responded"
    assert contact["notes"] == "called back"


def test_update_without_notes_keeps_existing_notes(client, contact_id):
    client.put(f"/api/contact/{contact_id}/status", json={"status": "viewed", "notes": "first call"})

    contact = client.put(f"/api/contact/{contact_id}/status", json={"status": "new"}).json()["data"]["contact"]

    assert contact["status"] == "new"
    assert contact["notes"] == "first call"


def test_update_contact_rejects_unknown_status(client, contact_id):
    response = client.put(f"/api/contact/{contact_id}/status", json={"status": "archived"})

    assert response.status_code == 400
    assert response.json()["errors"] == ["Invalid status"]
    assert client.get(f"/api/contact/{contact_id}").json()["data"]["contact"]["status"] == "new"


def test_update_missing_contact(client):
    response = client.put("/api/contact/9/status", json={"status": "viewed"})

    assert response.status_code == 404
