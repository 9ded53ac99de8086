"""Shared fixtures: a throwaway SQLite database and token helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "organizer_messaging_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.domain.entities import Identity, Organizer  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from app.infrastructure.repositories import OrganizerRepository  # noqa: E402
from app.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_organizer(session):
    """Register an organizer in the directory and return it."""

    def _make(identity_id: str, *, is_active: bool = True) -> Organizer:
        return OrganizerRepository(session).create(
            Organizer(
                id=None,
                identity_id=identity_id,
                name=identity_id.title(),
                email=f"{identity_id}@example.com",
                is_active=is_active,
            )
        )

    return _make


@pytest.fixture()
def admin_identity() -> Identity:
    return Identity(id="admin-uid", email="admin@example.com", is_admin=True)


@pytest.fixture()
def auth_headers():
    """Return a builder of ``Authorization`` headers for an identity."""

    def _headers(identity_id: str, *, is_admin: bool = False) -> dict[str, str]:
        token = create_access_token(
            identity_id, email=f"{identity_id}@example.com", is_admin=is_admin
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
