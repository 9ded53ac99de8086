"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.domain.entities import Identity
from app.infrastructure.security import resolve_identity

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(token: str = Depends(oauth2_scheme)) -> Identity:
    """Return the identity the bearer token was issued for."""

    try:
        return resolve_identity(token)
    except ValueError as exc:
        raise _credentials_exception() from exc


def get_optional_identity(
    token: str | None = Depends(optional_oauth2_scheme),
) -> Identity | None:
    """Return the caller identity when a valid token is supplied.

    Invalid or missing tokens fall back to anonymous access.
    """

    if not token:
        return None
    try:
        return resolve_identity(token)
    except ValueError:
        return None


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """Ensure the authenticated caller has administrator privileges."""

    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required",
        )
    return identity
