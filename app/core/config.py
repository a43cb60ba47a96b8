"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
    "sqlite://",
    "sqlite+pysqlite://",
)

# Fallback signing secret for local development only.
DEFAULT_JWT_SECRET = "dev-secret-key-change-in-prod"

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    # Postgres for hosted deployments; SQLite for local and single-instance (serverless) runs
    DATABASE_URL: str = "sqlite:///./data/decision_keeper.db"
    # Create missing tables at startup (alembic is the alternative for managed databases)
    DB_AUTO_CREATE: bool = True

    # Session tokens (JWT)
    JWT_SECRET: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"

    # Password hashing work factor
    BCRYPT_ROUNDS: int = 12

    # Session cookie. COOKIE_SECURE unset means "Secure only in prod".
    SESSION_COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool | None = None
    COOKIE_SAMESITE: Literal["strict", "lax", "none"] = "strict"

    # Allowed browser origins in prod (dev allows any origin)
    CORS_ORIGINS: list[str] = []

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return level

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if s and not s.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return s

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL "
                "(e.g. postgresql+psycopg2://... or sqlite:///./data/decision_keeper.db)"
            )
        return v.strip()

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        s = v.strip()
        if not s.startswith("HS"):
            raise ValueError("JWT_ALGORITHM must be an HMAC algorithm (HS256, HS384, HS512)")
        return s

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 16:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 16")
        return v

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @model_validator(mode="after")
    def validate_cookie_policy(self) -> "Settings":
        # Browsers drop SameSite=None cookies that are not Secure.
        if self.COOKIE_SAMESITE == "none" and not self.cookie_secure:
            raise ValueError("COOKIE_SAMESITE=none requires a Secure cookie (COOKIE_SECURE=true)")
        return self

    @property
    def cookie_secure(self) -> bool:
        """Whether the session cookie carries the Secure attribute."""
        if self.COOKIE_SECURE is not None:
            return self.COOKIE_SECURE
        return self.APP_ENV == "prod"

    @property
    def uses_default_secret(self) -> bool:
        return self.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
