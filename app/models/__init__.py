"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.decision import Decision
from app.models.user import User

__all__ = ["Base", "Decision", "User"]
