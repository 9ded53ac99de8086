"""Domain entities describing who performs an action."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller resolved from an access token."""

    id: str
    email: str | None = None
    is_admin: bool = False


@dataclass(frozen=True)
class Creator:
    """Author snapshot stored alongside messages and broadcasts."""

    identity: str | None = None
    email: str | None = None

    @classmethod
    def from_identity(cls, identity: Identity | None) -> "Creator":
        if identity is None:
            return cls()
        return cls(identity=identity.id, email=identity.email)


__all__ = ["Creator", "Identity"]
