"""Request gate: resolve the session claim for protected routes."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import get_settings
from app.core.errors import AuthenticationRequired
from app.core.security import verify_session_token
from app.schemas.auth import SessionClaim

security = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Return the session token from the cookie, falling back to a Bearer header."""
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if token:
        return token
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return None


def get_current_user(
    token: Annotated[str | None, Depends(get_session_token)],
) -> SessionClaim:
    """
    Dependency: require a valid session and return its claim.

    Raises AuthenticationRequired (401) when no token is present and
    InvalidTokenError (403) when the token is invalid or expired.
    """
    if token is None:
        raise AuthenticationRequired()
    return verify_session_token(token)


CurrentUser = Annotated[SessionClaim, Depends(get_current_user)]
