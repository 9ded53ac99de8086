"""Database failures on reads surface as ``StoreError``."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from app.application.use_cases.messages import (
    count_unread_messages,
    list_message_history,
)
from app.application.use_cases.notifications import (
    count_unread_broadcasts,
    list_broadcasts,
    mark_broadcast_read,
)
from app.application.use_cases.support import list_support_requests
from app.domain.exceptions import StoreError
from app.infrastructure.database import get_db


def _fail(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("database is down"))


@pytest.fixture()
def broken_session(session, monkeypatch):
    monkeypatch.setattr(session, "execute", _fail)
    return session


@pytest.mark.parametrize(
    "call",
    [
        lambda s: count_unread_broadcasts(s, user_id="user-1"),
        lambda s: list_broadcasts(s, user_id="user-1"),
        lambda s: mark_broadcast_read(
            s, notification_id="cccccccccccccccccccccccc", user_id="user-1"
        ),
        lambda s: list_message_history(s, page=1, limit=10),
        lambda s: count_unread_messages(s, identity_id="alice"),
        lambda s: list_support_requests(s),
    ],
    ids=[
        "unread-broadcasts",
        "broadcast-feed",
        "mark-broadcast",
        "message-history",
        "unread-messages",
        "support-requests",
    ],
)
def test_failed_reads_raise_store_error(broken_session, call):
    with pytest.raises(StoreError) as excinfo:
        call(broken_session)

    assert excinfo.value.status_code == 500
    assert "operation" in excinfo.value.details


def test_failed_read_returns_500_through_the_api(broken_session, auth_headers):
    pytest.importorskip("fastapi")
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()

    def _broken_db():
        yield broken_session

    app.dependency_overrides[get_db] = _broken_db
    with TestClient(app) as client:
        response = client.get(
            "/notifications/unread-count", headers=auth_headers("user-1")
        )

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to count broadcast notifications"
