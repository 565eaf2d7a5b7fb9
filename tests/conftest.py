"""Shared test fixtures: in-memory SQLite store and an authenticated HTTP client.

Every test gets a fresh database. The app is built with create_app() and
its story handler is attached directly, so the lifespan (and its real
database) never runs.
"""

import os

# Settings are cached on first import; point them at SQLite before that.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from storyapi.api.handlers import StoryRequestHandler
from storyapi.api.main import create_app
from storyapi.core.security import create_access_token
from storyapi.models import Base, StoryCreate, StoryRead, StoryUpdate
from storyapi.services.story_store import StoreError, StoryStore


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def store(session_factory):
    return StoryStore(session_factory)


@pytest.fixture
async def seeded_store(store):
    """Store holding stories 1 and 2."""
    await store.add(StoryCreate(title="The Lost Kite", writing_prompt="Where did it go?"))
    await store.add(StoryCreate(title="Moon Garden", drawing_prompt="Draw the garden at night."))
    return store


@pytest.fixture
async def drop_stories_table(test_engine):
    """Callable that drops every table so the next store call fails."""

    async def _drop() -> None:
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    return _drop


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token('user-1')}"}


def _client_for(store: Any):
    app = create_app()
    app.state.story_handler = StoryRequestHandler(store)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(seeded_store):
    """HTTP client backed by the seeded SQLite store."""
    async with _client_for(seeded_store) as c:
        yield c


class FakeStoryStore:
    """In-memory store double that records calls and can be told to fail.

    Attributes:
        calls: list of (method, args) tuples in call order
        error: StoreError raised by every method when set
    """

    def __init__(self, stories: list[StoryRead] | None = None):
        self.stories: dict[int, StoryRead] = {s.id: s for s in stories or []}
        self.calls: list[tuple[str, tuple]] = []
        self.error: StoreError | None = None
        self.next_id = max(self.stories, default=0) + 1

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if self.error is not None:
            raise self.error

    async def get_all(self) -> list[StoryRead]:
        self._record("get_all")
        return list(self.stories.values())

    async def get_by_id(self, story_id: Any) -> list[StoryRead]:
        self._record("get_by_id", story_id)
        for key, story in self.stories.items():
            if str(key) == story_id:
                return [story]
        return []

    async def add(self, story: StoryCreate) -> list[int]:
        self._record("add", story)
        new_id = self.next_id
        self.next_id += 1
        self.stories[new_id] = StoryRead(id=new_id, **story.model_dump())
        return [new_id]

    async def update(self, story_id: Any, changes: StoryUpdate) -> int:
        self._record("update", story_id, changes)
        for key, story in self.stories.items():
            if str(key) == story_id:
                self.stories[key] = story.model_copy(update=changes.changes())
                return 1
        return 0

    async def ping(self) -> None:
        self._record("ping")

    async def remove(self, story_id: Any) -> int:
        self._record("remove", story_id)
        for key in list(self.stories):
            if str(key) == story_id:
                del self.stories[key]
                return 1
        return 0


@pytest.fixture
def fake_store() -> FakeStoryStore:
    return FakeStoryStore(
        [
            StoryRead(id=1, title="The Lost Kite", url=None, writing_prompt=None, drawing_prompt=None),
            StoryRead(id=2, title="Moon Garden", url=None, writing_prompt=None, drawing_prompt=None),
        ]
    )


@pytest.fixture
async def fake_client(fake_store):
    """HTTP client backed by FakeStoryStore."""
    async with _client_for(fake_store) as c:
        yield c
