"""Credential store: lookup and creation of user accounts."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models import User

logger = logging.getLogger(__name__)


def find_user_by_email(session: Session, email: str) -> User | None:
    """Return the user with exactly this email, or None."""
    return session.query(User).filter(User.email == email).first()


def get_user_by_id(session: Session, user_id: int) -> User | None:
    return session.get(User, user_id)


def create_user(session: Session, email: str, password_hash: str) -> User:
    """
    Insert a new user and commit.

    Raises ConflictError if the email is taken. The unique index on users.email
    is authoritative, so two concurrent registrations cannot both succeed even
    when both pass the pre-check.
    """
    if find_user_by_email(session, email) is not None:
        raise ConflictError()

    user = User(email=email, password_hash=password_hash)
    session.add(user)
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise ConflictError() from e
    session.refresh(user)
    logger.info("User created", extra={"user_id": user.id})
    return user
