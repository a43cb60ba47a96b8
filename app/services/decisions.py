"""Record store: decisions scoped to their owning user.

Every mutation matches on both decision id and user id, so an id alone never
reaches another user's record.
"""

import logging
from typing import Any

from sqlalchemy.orm import Session

from app.models import Decision

logger = logging.getLogger(__name__)

# Columns a caller may change through update_decision.
UPDATABLE_FIELDS: frozenset[str] = frozenset({"title", "description", "category"})

# Integer primary keys are 32-bit on PostgreSQL; ids outside this range never match a row.
MAX_DECISION_ID = 2**31 - 1


def _valid_id(decision_id: int) -> bool:
    return 1 <= decision_id <= MAX_DECISION_ID


def list_decisions(session: Session, user_id: int) -> list[Decision]:
    """Return the user's decisions, newest first."""
    return (
        session.query(Decision)
        .filter(Decision.user_id == user_id)
        .order_by(Decision.created_at.desc(), Decision.id.desc())
        .all()
    )


def get_decision(session: Session, decision_id: int) -> Decision | None:
    if not _valid_id(decision_id):
        return None
    return session.query(Decision).filter(Decision.id == decision_id).first()


def _get_owned(session: Session, decision_id: int, user_id: int) -> Decision | None:
    if not _valid_id(decision_id):
        return None
    return (
        session.query(Decision)
        .filter(Decision.id == decision_id, Decision.user_id == user_id)
        .first()
    )


def create_decision(
    session: Session,
    user_id: int,
    title: str,
    description: str | None,
    category: str,
) -> Decision:
    """Insert a decision for user_id and commit; id and created_at are assigned here."""
    decision = Decision(
        user_id=user_id,
        title=title,
        description=description or "",
        category=category,
    )
    session.add(decision)
    session.commit()
    session.refresh(decision)
    logger.info("Decision created", extra={"decision_id": decision.id, "user_id": user_id})
    return decision


def update_decision(
    session: Session,
    decision_id: int,
    user_id: int,
    fields: dict[str, Any],
) -> Decision | None:
    """
    Apply the supplied fields to the decision if (and only if) user_id owns it.

    Returns the updated decision, or None when no row matches both ids.
    Unknown keys and None values are ignored.
    """
    values = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS and v is not None}
    if not values:
        return _get_owned(session, decision_id, user_id)
    if not _valid_id(decision_id):
        return None

    updated = (
        session.query(Decision)
        .filter(Decision.id == decision_id, Decision.user_id == user_id)
        .update(values, synchronize_session=False)
    )
    session.commit()
    if updated == 0:
        return None

    logger.info(
        "Decision updated",
        extra={"decision_id": decision_id, "user_id": user_id, "fields": sorted(values)},
    )
    decision = get_decision(session, decision_id)
    if decision is not None:
        session.refresh(decision)
    return decision


def delete_decision(session: Session, decision_id: int, user_id: int) -> bool:
    """Delete the decision if user_id owns it. Returns True iff a row was removed."""
    if not _valid_id(decision_id):
        return False
    deleted = (
        session.query(Decision)
        .filter(Decision.id == decision_id, Decision.user_id == user_id)
        .delete(synchronize_session=False)
    )
    session.commit()
    if deleted:
        logger.info("Decision deleted", extra={"decision_id": decision_id, "user_id": user_id})
    return deleted > 0
