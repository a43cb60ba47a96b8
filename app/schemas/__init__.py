"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    SessionClaim,
    UserPublic,
)
from app.schemas.decision import (
    CATEGORY_VALUES,
    DecisionCategory,
    DecisionCreate,
    DecisionRead,
    DecisionUpdate,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AuthResponse",
    "CATEGORY_VALUES",
    "DecisionCategory",
    "DecisionCreate",
    "DecisionRead",
    "DecisionUpdate",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "RegisterRequest",
    "SessionClaim",
    "UserPublic",
]
