"""Password hashing and session token issue/verification for authentication."""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.core.errors import InvalidTokenError
from app.schemas.auth import SessionClaim

# Sessions are valid for exactly 24 hours; there is no refresh.
SESSION_TTL = timedelta(hours=24)

# Min/max lengths for password validation.
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _secret(secret: str | None) -> str:
    return secret if secret is not None else settings.JWT_SECRET.get_secret_value()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def issue_session_token(
    user_id: int,
    email: str,
    *,
    secret: str | None = None,
    now: datetime | None = None,
) -> str:
    """
    Create a signed session token carrying user id (sub), email, iat and exp.

    Times are truncated to whole seconds so exp is exactly iat + 24h.
    """
    issued_at = (now or _utcnow()).replace(microsecond=0)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + SESSION_TTL,
    }
    return jwt.encode(payload, _secret(secret), algorithm=settings.JWT_ALGORITHM)


def verify_session_token(
    token: str,
    *,
    secret: str | None = None,
    now: datetime | None = None,
) -> SessionClaim:
    """
    Verify signature and expiry of a session token and return its claim.

    Raises InvalidTokenError if the token is malformed, the signature does not
    match, a claim is missing, or now >= exp. PyJWT compares HMAC signatures
    with hmac.compare_digest.
    """
    try:
        payload = jwt.decode(
            token,
            _secret(secret),
            algorithms=[settings.JWT_ALGORITHM],
            # Expiry is checked below against an injectable clock: expired when now >= exp.
            options={"require": ["sub", "email", "iat", "exp"], "verify_exp": False, "verify_iat": False},
        )
    except jwt.PyJWTError as e:
        raise InvalidTokenError() from e

    try:
        claim = SessionClaim(
            user_id=int(payload["sub"]),
            email=payload["email"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidTokenError() from e

    if (now or _utcnow()) >= claim.expires_at:
        raise InvalidTokenError()
    return claim
