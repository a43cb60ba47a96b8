"""Typed application errors. Each maps to one HTTP status in app.main's exception handlers."""


class AppError(Exception):
    """Base for errors that are safe to report to the client as-is."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(AppError):
    """Raised when a user with the same email already exists."""

    status_code = 400
    default_message = "User with this email already exists"


class AuthenticationRequired(AppError):
    """Raised when a protected route is called without a session token."""

    status_code = 401
    default_message = "Authentication required"


class InvalidCredentialsError(AppError):
    """Raised on login with an unknown email or a wrong password (indistinguishable)."""

    status_code = 401
    default_message = "Invalid email or password"


class InvalidTokenError(AppError):
    """Raised when a session token is malformed, tampered with, or expired."""

    status_code = 403
    default_message = "Invalid or expired token"


class NotFoundError(AppError):
    """Raised when a decision does not exist or is not owned by the caller."""

    status_code = 404
    default_message = "Decision not found"
