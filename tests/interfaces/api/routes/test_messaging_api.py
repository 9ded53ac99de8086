"""Integration tests for the messaging endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def admin(auth_headers):
    return auth_headers("admin-uid", is_admin=True)


def test_broadcast_flow(client: TestClient, make_organizer, auth_headers, admin) -> None:
    make_organizer("alice")
    user = auth_headers("reader")

    response = client.post(
        "/admin/messages",
        json={"body": "Maintenance at 10pm", "type": "broadcast"},
        headers=admin,
    )
    assert response.status_code == 201
    payload = response.json()
    assert payload["success"] is True
    assert payload["data"]["type"] == "broadcast"
    assert payload["data"]["recipients_count"] == 1

    feed = client.get("/notifications/broadcast").json()["data"]
    assert len(feed) == 1
    assert feed[0]["is_read"] is False
    assert feed[0]["body"] == "Maintenance at 10pm"

    unread = client.get("/notifications/unread-count", headers=user)
    assert unread.json()["data"] == {"unread_count": 1}

    notification_url = f"/notifications/{feed[0]['id']}/read"
    assert client.post(notification_url, headers=user).status_code == 200
    assert client.post(notification_url, headers=user).status_code == 200

    personal = client.get("/notifications/broadcast", headers=user).json()["data"]
    assert personal[0]["is_read"] is True
    unread = client.get("/notifications/unread-count", headers=user)
    assert unread.json()["data"] == {"unread_count": 0}


def test_mark_all_broadcasts_read(client: TestClient, auth_headers, admin) -> None:
    user = auth_headers("reader")
    empty = client.post("/notifications/read-all", headers=user)
    assert empty.status_code == 200
    assert empty.json()["data"]["processed"] == 0

    for body in ("One", "Two"):
        client.post(
            "/admin/messages", json={"body": body, "type": "broadcast"}, headers=admin
        )

    response = client.post("/notifications/read-all", headers=user)
    assert response.json()["data"]["processed"] == 2
    unread = client.get("/notifications/unread-count", headers=user)
    assert unread.json()["data"]["unread_count"] == 0


def test_unknown_broadcast_returns_404(client: TestClient, auth_headers) -> None:
    response = client.post(
        "/notifications/eeeeeeeeeeeeeeeeeeeeeeee/read", headers=auth_headers("reader")
    )
    assert response.status_code == 404


def test_individual_message_flow(
    client: TestClient, make_organizer, auth_headers, admin
) -> None:
    alice = make_organizer("alice")
    make_organizer("bob")

    response = client.post(
        "/admin/messages",
        json={
            "body": "Your event was approved",
            "title": "Approved",
            "type": "individual",
            "recipient_ids": [alice.id, "not-an-id"],
        },
        headers=admin,
    )
    assert response.status_code == 201
    message_id = response.json()["data"]["id"]
    assert response.json()["data"]["recipients_count"] == 1

    inbox = client.get("/organizer/messages", headers=auth_headers("alice")).json()["data"]
    assert [item["id"] for item in inbox] == [message_id]
    assert inbox[0]["read"] is False
    other_inbox = client.get("/organizer/messages", headers=auth_headers("bob"))
    assert other_inbox.json()["data"] == []

    read_url = f"/organizer/messages/{message_id}/read"
    assert client.put(read_url, headers=auth_headers("bob")).status_code == 403

    marked = client.put(read_url, headers=auth_headers("alice"))
    assert marked.status_code == 200
    assert marked.json()["data"]["read"] is True
    assert marked.json()["data"]["read_at"] is not None

    unread = client.get("/organizer/messages/unread-count", headers=auth_headers("alice"))
    assert unread.json()["data"]["unread_count"] == 0

    history = client.get("/admin/messages?page=1&limit=10", headers=admin).json()["data"]
    assert history["total"] == 1
    assert history["items"][0]["recipients_count"] == 1
    assert history["items"][0]["read_count"] == 1

    assert client.delete(f"/admin/messages/{message_id}", headers=admin).status_code == 200
    assert client.delete(f"/admin/messages/{message_id}", headers=admin).status_code == 404


def test_inbox_mark_all_read(client: TestClient, make_organizer, auth_headers, admin) -> None:
    alice = make_organizer("alice")
    for body in ("First", "Second"):
        client.post(
            "/admin/messages",
            json={"body": body, "recipient_ids": [alice.id]},
            headers=admin,
        )

    response = client.put("/organizer/messages/read-all", headers=auth_headers("alice"))

    assert response.status_code == 200
    assert response.json()["data"]["processed"] == 2
    inbox = client.get("/organizer/messages", headers=auth_headers("alice")).json()["data"]
    assert all(item["read"] for item in inbox)


def test_invalid_inputs_map_to_http_errors(
    client: TestClient, make_organizer, auth_headers, admin
) -> None:
    make_organizer("alice")

    no_recipients = client.post(
        "/admin/messages",
        json={"body": "Hello", "type": "individual", "recipient_ids": ["not-an-id"]},
        headers=admin,
    )
    assert no_recipients.status_code == 400
    assert "no valid recipient IDs" in no_recipients.json()["detail"]

    blank = client.post(
        "/admin/messages", json={"body": "  ", "type": "broadcast"}, headers=admin
    )
    assert blank.status_code == 400

    bad_id = client.put("/organizer/messages/xyz/read", headers=auth_headers("alice"))
    assert bad_id.status_code == 400

    not_organizer = client.get("/organizer/messages", headers=auth_headers("stranger"))
    assert not_organizer.status_code == 404


def test_authentication_and_authorization(client: TestClient, auth_headers) -> None:
    garbage = {"Authorization": "Bearer garbage"}

    assert client.get("/notifications/unread-count").status_code == 401
    assert client.get("/notifications/unread-count", headers=garbage).status_code == 401
    assert client.get("/notifications/broadcast", headers=garbage).status_code == 200
    assert client.get("/admin/messages").status_code == 401

    as_organizer = client.post(
        "/admin/messages",
        json={"body": "Hi", "type": "broadcast"},
        headers=auth_headers("organizer"),
    )
    assert as_organizer.status_code == 403


def test_support_submissions_reach_admin_history(client: TestClient, admin) -> None:
    response = client.post(
        "/support/bug-report",
        json={"title": "Crash", "description": "Closes on start", "category": "crash"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["category"] == "crash"

    missing = client.post("/support/feature-request", json={"description": "No title"})
    assert missing.status_code == 400

    history = client.get("/admin/messages", headers=admin).json()["data"]
    assert history["total"] == 1
    assert history["items"][0]["type"] == "admin"
    assert history["items"][0]["title"] == "Bug Report: Crash"
    assert history["items"][0]["metadata"]["category"] == "crash"


def test_admin_can_remove_broadcast_from_feed(client: TestClient, admin) -> None:
    client.post("/admin/messages", json={"body": "Oops", "type": "broadcast"}, headers=admin)
    feed_id = client.get("/notifications/broadcast").json()["data"][0]["id"]

    assert client.delete(f"/admin/notifications/{feed_id}", headers=admin).status_code == 200
    assert client.get("/notifications/broadcast").json()["data"] == []
    assert client.get("/admin/messages", headers=admin).json()["data"]["total"] == 1
