"""Tests for support submissions, their listing and status triage."""

from __future__ import annotations

import pytest

from app.application.use_cases.messages import (
    list_message_history,
    list_messages_for_organizer,
)
from app.application.use_cases.support import (
    list_support_requests,
    normalize_category,
    submit_support_request,
    update_support_request_status,
)
from app.domain.entities import (
    SUPPORT_REQUEST_BUG,
    SUPPORT_REQUEST_FEATURE,
    Identity,
)
from app.domain.exceptions import MessageValidationError, NotFoundError
from app.infrastructure.repositories import SupportRequestRepository


def _submit(session, request_type=SUPPORT_REQUEST_BUG, **overrides):
    values = {"title": "Crash on launch", "description": "The app closes on start"}
    values.update(overrides)
    return submit_support_request(session, request_type=request_type, **values)


def test_submission_is_stored_and_copied_to_admin_history(session, make_organizer):
    make_organizer("alice")
    submitter = Identity(id="user-9", email="reporter@example.com")

    request = submit_support_request(
        session,
        request_type=SUPPORT_REQUEST_FEATURE,
        title="  Dark mode ",
        description="Please add a dark theme",
        email=" Reporter@Example.com ",
        category="unknown",
        platform="ios",
        submitter=submitter,
    )

    stored = SupportRequestRepository(session).get(request.id)
    assert stored.type == "feature"
    assert stored.title == "Dark mode"
    assert stored.status == "pending"
    assert stored.category == "general"
    assert stored.email == "reporter@example.com"
    assert stored.platform == "ios"
    assert stored.submitted_by.identity == "user-9"

    history = list_message_history(session, page=1, limit=10)
    assert history.total == 1
    message = history.items[0]
    assert message.type == "admin"
    assert message.recipients == []
    assert message.title == "Feature Request: Dark mode"
    assert "Category: General" in message.body
    assert "Email: reporter@example.com" in message.body
    assert "User: reporter@example.com" in message.body
    assert message.body.endswith("Please add a dark theme")
    assert message.metadata == {
        "support_request_id": request.id,
        "request_type": "feature",
        "category": "general",
        "submitted_by": "reporter@example.com",
    }
    assert list_messages_for_organizer(session, identity_id="alice") == []


def test_anonymous_submission_is_labelled(session):
    _submit(session)

    message = list_message_history(session, page=1, limit=10).items[0]
    assert "User: Anonymous user" in message.body
    assert message.metadata["submitted_by"] == "Anonymous"


@pytest.mark.parametrize(
    ("title", "description"), [("", "Something broke"), ("Crash", "   "), (None, "x")]
)
def test_title_and_description_are_required(session, title, description):
    with pytest.raises(MessageValidationError):
        _submit(session, title=title, description=description)

    assert SupportRequestRepository(session).count() == 0
    assert list_message_history(session, page=1, limit=10).total == 0


def test_description_is_limited_to_500_characters(session):
    _submit(session, description="x" * 500)

    with pytest.raises(MessageValidationError):
        _submit(session, description="x" * 501)

    assert SupportRequestRepository(session).count() == 1


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("crash", "crash"),
        (" UI ", "ui"),
        ("feature", "feature"),
        ("other", "general"),
        (None, "general"),
    ],
)
def test_categories_fall_back_to_general(raw, expected):
    assert normalize_category(raw) == expected


def test_listing_filters_by_type_status_and_category(session):
    crash = _submit(session, category="crash")
    ui_bug = _submit(session, title="Button hidden", category="ui")
    feature = _submit(session, SUPPORT_REQUEST_FEATURE, title="Export", category="feature")
    update_support_request_status(session, request_id=ui_bug.id, status="resolved")

    bugs = list_support_requests(session, request_type="bug")
    assert {item.id for item in bugs.items} == {crash.id, ui_bug.id}
    assert bugs.total == 2

    resolved = list_support_requests(session, status="resolved")
    assert [item.id for item in resolved.items] == [ui_bug.id]

    features = list_support_requests(session, category="feature")
    assert [item.id for item in features.items] == [feature.id]

    pending_crashes = list_support_requests(
        session, request_type="bug", status="pending", category="crash"
    )
    assert [item.id for item in pending_crashes.items] == [crash.id]


def test_unknown_filter_values_are_ignored(session):
    _submit(session)
    _submit(session, SUPPORT_REQUEST_FEATURE, title="Export")

    result = list_support_requests(
        session, request_type="question", status="archived", category="billing"
    )

    assert result.total == 2


def test_listing_paginates_newest_first(session):
    for index in range(5):
        _submit(session, title=f"Report {index}")

    first = list_support_requests(session, page=1, limit=2)
    last = list_support_requests(session, page=3, limit=2)

    assert first.total == 5
    assert first.pages == 3
    assert len(first.items) == 2
    assert len(last.items) == 1
    assert first.items[0].created_at >= first.items[1].created_at
    seen = {item.id for item in first.items} | {item.id for item in last.items}
    assert len(seen) == 3


@pytest.mark.parametrize(
    ("page", "limit", "expected_page", "expected_limit"),
    [(0, 0, 1, 20), (-3, None, 1, 20), (2, 500, 2, 100), (None, 5, 1, 5)],
)
def test_listing_clamps_paging(session, page, limit, expected_page, expected_limit):
    result = list_support_requests(session, page=page, limit=limit)

    assert result.page == expected_page
    assert result.limit == expected_limit


def test_status_update_moves_the_request(session):
    request = _submit(session)

    updated = update_support_request_status(
        session, request_id=request.id, status="in-progress"
    )

    assert updated.status == "in-progress"
    assert updated.updated_at >= request.updated_at
    assert SupportRequestRepository(session).get(request.id).status == "in-progress"


@pytest.mark.parametrize("status", ["done", "", None, "PENDING"])
def test_status_update_rejects_unknown_status(session, status):
    request = _submit(session)

    with pytest.raises(MessageValidationError):
        update_support_request_status(session, request_id=request.id, status=status)

    assert SupportRequestRepository(session).get(request.id).status == "pending"


@pytest.mark.parametrize("request_id", ["ffffffffffffffffffffffff", "not-an-id"])
def test_status_update_for_unknown_request_fails(session, request_id):
    with pytest.raises(NotFoundError):
        update_support_request_status(session, request_id=request_id, status="closed")
