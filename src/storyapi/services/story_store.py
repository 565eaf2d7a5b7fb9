"""Story Store - data access for the stories table.

Architecture:
    FastAPI route → StoryRequestHandler → StoryStore (this) → SQLAlchemy

The store returns plain results (records, new IDs, affected row counts)
and never builds HTTP responses. Every database failure leaves this module
as a StoreError carrying a human-readable message.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, select, text, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storyapi.models.schemas import StoryCreate, StoryRead, StoryUpdate
from storyapi.models.story import Story

logger = logging.getLogger(__name__)

# stories.id is a 32-bit INTEGER in PostgreSQL
MAX_STORY_ID = 2**31 - 1
_DIGITS = re.compile(r"[0-9]+")


class StoreError(Exception):
    """A store operation failed. ``message`` is safe to show to API clients."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> StoreError:
        """Build a StoreError from a driver/SQLAlchemy exception.

        DBAPI errors are reported with the driver's own message rather than
        SQLAlchemy's wrapper text (which embeds the SQL statement).
        """
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            return cls(str(exc.orig))
        return cls(str(exc) or exc.__class__.__name__)


def parse_story_id(story_id: Any) -> int | None:
    """Parse a raw path ID into a primary key, or None if it can't be one.

    Only plain ASCII digit strings (or ints) within the INTEGER column's
    range are keys; signs, whitespace, underscores and oversized values are not.
    """
    if isinstance(story_id, bool):
        return None
    if isinstance(story_id, int):
        pk = story_id
    elif isinstance(story_id, str) and _DIGITS.fullmatch(story_id):
        pk = int(story_id)
    else:
        return None
    if not 0 <= pk <= MAX_STORY_ID:
        return None
    return pk


class StoryStore:
    """CRUD primitives for stories.

    Constructed once at startup with a session factory; each call opens and
    closes its own session.

    Usage:
        store = StoryStore(session_factory)
        [new_id] = await store.add(StoryCreate(title="The Lost Kite"))
        matches = await store.get_by_id(str(new_id))
        count = await store.update(str(new_id), StoryUpdate(title="Found"))
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        """Open a session, translating database failures into StoreError.

        Uncommitted work is rolled back when the session closes.
        """
        try:
            async with self._session_factory() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            raise StoreError.from_exception(e) from e

    async def get_all(self) -> list[StoryRead]:
        """Return every story ordered by ID."""
        async with self._session() as session:
            result = await session.execute(select(Story).order_by(Story.id))
            return [StoryRead.model_validate(story) for story in result.scalars().all()]

    async def get_by_id(self, story_id: Any) -> list[StoryRead]:
        """Return the stories matching ``story_id`` (zero or one element)."""
        pk = parse_story_id(story_id)
        if pk is None:
            return []

        async with self._session() as session:
            result = await session.execute(select(Story).where(Story.id == pk))
            return [StoryRead.model_validate(story) for story in result.scalars().all()]

    async def add(self, story: StoryCreate) -> list[int]:
        """Insert a story and return a one-element list holding its new ID."""
        async with self._session() as session:
            record = Story(**story.model_dump())
            session.add(record)
            await session.commit()
            logger.debug(f"Inserted story {record.id}")
            return [record.id]

    async def update(self, story_id: Any, changes: StoryUpdate) -> int:
        """Apply the fields set on ``changes``; return the affected row count."""
        pk = parse_story_id(story_id)
        if pk is None:
            return 0

        async with self._session() as session:
            result = await session.execute(
                update(Story)
                .where(Story.id == pk)
                .values(**changes.changes())
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount

    async def remove(self, story_id: Any) -> int:
        """Delete a story; return the affected row count."""
        pk = parse_story_id(story_id)
        if pk is None:
            return 0

        async with self._session() as session:
            result = await session.execute(
                delete(Story)
                .where(Story.id == pk)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount

    async def ping(self) -> None:
        """Run a trivial query; raises StoreError if the database is unreachable."""
        async with self._session() as session:
            await session.execute(text("SELECT 1"))
