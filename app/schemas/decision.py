"""Pydantic schemas for decision records."""

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Closed set of categories; values are case-sensitive.
DecisionCategory = Literal["Career", "Health", "Finance", "Personal", "Other"]

CATEGORY_VALUES: frozenset[str] = frozenset({"Career", "Health", "Finance", "Personal", "Other"})

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 10_000


class DecisionCreate(BaseModel):
    """Body for creating a decision. The owner always comes from the session."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Short title (1-100 chars).",
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Optional free text; stored as an empty string when absent.",
    )
    category: DecisionCategory = Field(..., description="One of Career, Health, Finance, Personal, Other.")


class DecisionUpdate(BaseModel):
    """Partial update: only fields present (and not null) are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    category: DecisionCategory | None = None

    def changes(self) -> dict[str, str]:
        """Return only the supplied, non-null fields."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class DecisionRead(BaseModel):
    """Decision as returned to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    category: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive values for timezone-aware columns; they are stored as UTC.
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
