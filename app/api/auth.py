"""Registration, login, logout and current-session endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import CurrentUser
from app.core.config import get_settings
from app.core.database import get_db
from app.core.errors import ConflictError, InvalidCredentialsError
from app.core.security import SESSION_TTL, hash_password, issue_session_token, verify_password
from app.models import User
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UserPublic,
)
from app.services.users import create_user, find_user_by_email

logger = logging.getLogger(__name__)
router = APIRouter()


def _set_session_cookie(response: Response, user: User) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=issue_session_token(user.id, user.email),
        max_age=int(SESSION_TTL.total_seconds()),
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.COOKIE_SAMESITE,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create an account and start a session.

    Sets the session cookie. Returns 400 if the email is already registered.
    """
    # Skip the bcrypt work for emails that are already taken; create_user still enforces uniqueness.
    if find_user_by_email(db, body.email) is not None:
        logger.info("Registration rejected: email already registered")
        raise ConflictError()

    user = create_user(db, body.email, hash_password(body.password))
    _set_session_cookie(response, user)
    logger.info("User registered", extra={"user_id": user.id})
    return AuthResponse(message="Registration successful", user=UserPublic.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with email and password and start a session.

    The session token is set as an HTTP-only cookie; non-browser clients can
    send the same value as Authorization: Bearer <token>.
    """
    user = find_user_by_email(db, body.email)
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login failed")
        raise InvalidCredentialsError()

    _set_session_cookie(response, user)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return AuthResponse(message="Login successful", user=UserPublic.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Clear the session cookie. Always succeeds."""
    settings = get_settings()
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.COOKIE_SAMESITE,
    )
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=MeResponse)
def me(user: CurrentUser) -> MeResponse:
    """Return the verified session claim."""
    return MeResponse(user=user)
