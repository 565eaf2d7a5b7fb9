"""Pydantic schemas for the story resource.

StoryCreate and StoryUpdate are the validation gate: FastAPI rejects a
request body that does not fit them before any handler code runs.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class StoryCreate(BaseModel):
    """Request body for creating a story."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    url: str | None = Field(default=None, max_length=500, description="Link to the story PDF")
    writing_prompt: str | None = None
    drawing_prompt: str | None = None


class StoryUpdate(BaseModel):
    """Partial update for a story. Only fields sent by the client are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    url: str | None = Field(default=None, max_length=500)
    writing_prompt: str | None = None
    drawing_prompt: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("title cannot be null")
        return value

    @model_validator(mode="after")
    def require_changes(self) -> "StoryUpdate":
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields present in the request body."""
        return self.model_dump(exclude_unset=True)


class StoryRead(BaseModel):
    """A persisted story as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str | None
    writing_prompt: str | None
    drawing_prompt: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StoryCreated(BaseModel):
    """Response body for a created story."""

    ID: int


class StoryNotFoundBody(BaseModel):
    """Response body when no story matches the requested ID."""

    error: str = "StoryNotFound"


class ErrorMessageBody(BaseModel):
    """Response body when the store fails."""

    message: str
