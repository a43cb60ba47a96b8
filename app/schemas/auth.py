"""Request/response schemas for auth endpoints and the session claim."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Credentials for a new account."""

    email: EmailStr = Field(..., description="Email address (unique)")
    password: str = Field(..., min_length=6, max_length=128, description="Password (6-128 chars)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class UserPublic(BaseModel):
    """User as returned to clients (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class AuthResponse(BaseModel):
    """Response for register and login; the session token travels in a cookie."""

    message: str
    user: UserPublic


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class SessionClaim(BaseModel):
    """Identity payload carried by a verified session token."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_id: int = Field(..., alias="id")
    email: str
    issued_at: datetime
    expires_at: datetime


class MeResponse(BaseModel):
    """Response for GET /me: the verified session claim."""

    user: SessionClaim
