"""ORM model for application users (email/password authentication)."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    User account for session authentication.

    email is unique at the database level; password_hash is a bcrypt hash.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    decisions = relationship(
        "Decision",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
