"""Utility script to register an organizer and print an access token for it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.domain.entities import Organizer  # noqa: E402
from app.domain.exceptions import StoreError  # noqa: E402
from app.infrastructure.database import SessionLocal, initialize_database  # noqa: E402
from app.infrastructure.repositories import OrganizerRepository  # noqa: E402
from app.infrastructure.security import create_access_token  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for organizer registration."""

    parser = argparse.ArgumentParser(
        description="Register an organizer so it can receive messages.",
    )
    parser.add_argument("--identity", required=True, help="Identity id of the organizer")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--email", required=True, help="Contact email")
    parser.add_argument(
        "--inactive",
        action="store_true",
        help="Register the organizer as inactive (excluded from broadcasts).",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Issue an administrator token for the identity.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> Organizer:
    """Create the organizer described by ``argv`` and print its token."""

    args = parse_args(argv)
    initialize_database()

    session = SessionLocal()
    try:
        organizer = OrganizerRepository(session).create(
            Organizer(
                id=None,
                identity_id=args.identity,
                name=args.name,
                email=args.email,
                is_active=not args.inactive,
            )
        )
    except (StoreError, SQLAlchemyError) as exc:
        session.rollback()
        raise SystemExit(f"Could not register the organizer: {exc}") from exc
    finally:
        session.close()

    token = create_access_token(
        organizer.identity_id, email=organizer.email, is_admin=args.admin
    )
    print(
        "Organizer registered:\n"
        f"  ID: {organizer.id}\n"
        f"  Identity: {organizer.identity_id}\n"
        f"  Active: {organizer.is_active}\n"
        f"  Token: {token}"
    )
    return organizer


if __name__ == "__main__":
    main()
