"""Decision endpoints. Every store call is scoped by the session's user id, never by client input."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import CurrentUser
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.schemas.auth import MessageResponse
from app.schemas.decision import DecisionCreate, DecisionRead, DecisionUpdate
from app.services.decisions import (
    create_decision,
    delete_decision,
    list_decisions,
    update_decision,
)

router = APIRouter()


@router.get("", response_model=list[DecisionRead])
def get_decisions(
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> list[DecisionRead]:
    """List the caller's decisions, newest first."""
    return [DecisionRead.model_validate(d) for d in list_decisions(db, user.user_id)]


@router.post("", response_model=DecisionRead, status_code=status.HTTP_201_CREATED)
def post_decision(
    body: DecisionCreate,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> DecisionRead:
    """Create a decision owned by the caller."""
    decision = create_decision(
        db,
        user_id=user.user_id,
        title=body.title,
        description=body.description,
        category=body.category,
    )
    return DecisionRead.model_validate(decision)


@router.put("/{decision_id}", response_model=DecisionRead)
def put_decision(
    decision_id: int,
    body: DecisionUpdate,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> DecisionRead:
    """
    Partially update a decision; only supplied fields change.

    Returns 404 when the decision does not exist or belongs to someone else.
    """
    decision = update_decision(db, decision_id, user.user_id, body.changes())
    if decision is None:
        raise NotFoundError()
    return DecisionRead.model_validate(decision)


@router.delete("/{decision_id}", response_model=MessageResponse)
def remove_decision(
    decision_id: int,
    user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a decision; 404 when it does not exist or belongs to someone else."""
    if not delete_decision(db, decision_id, user.user_id):
        raise NotFoundError("Decision not found or unauthorized")
    return MessageResponse(message="Decision deleted successfully")
