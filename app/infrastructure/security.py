"""Security helpers for issuing and verifying identity tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.config import get_settings
from app.domain.entities import Identity

ALGORITHM = "HS256"


def create_access_token(
    identity_id: str,
    *,
    email: str | None = None,
    is_admin: bool = False,
    expires_delta: timedelta | None = None,
) -> str:
    """Return a signed token identifying ``identity_id``."""

    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims: dict[str, object] = {"sub": identity_id, "exp": expire}
    if email:
        claims["email"] = email
    if is_admin:
        claims["admin"] = True
    return jwt.encode(claims, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        return jwt.decode(token, get_settings().secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def resolve_identity(token: str) -> Identity:
    """Map an opaque credential to the stable identity it was issued for."""

    payload = decode_access_token(token)
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.strip():
        raise ValueError("Token does not carry a subject")
    email = payload.get("email")
    return Identity(
        id=subject.strip(),
        email=email.strip().lower() if isinstance(email, str) and email.strip() else None,
        is_admin=payload.get("admin") is True,
    )


__all__ = ["create_access_token", "decode_access_token", "resolve_identity"]
