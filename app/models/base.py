"""SQLAlchemy declarative Base shared by the users and decisions tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for all ORM models; Base.metadata feeds init_db and alembic."""
