"""Database models and schemas for the Story API.

SQLAlchemy model for stories plus the pydantic request/response schemas.
All models use async SQLAlchemy.
"""

from .database import Base, close_db, get_engine, get_session_factory, init_db
from .schemas import (
    ErrorMessageBody,
    StoryCreate,
    StoryCreated,
    StoryNotFoundBody,
    StoryRead,
    StoryUpdate,
)
from .story import Story

__all__ = [
    # Database
    "Base",
    "init_db",
    "get_engine",
    "get_session_factory",
    "close_db",
    # Story model
    "Story",
    # Schemas
    "StoryCreate",
    "StoryUpdate",
    "StoryRead",
    "StoryCreated",
    "StoryNotFoundBody",
    "ErrorMessageBody",
]
