"""Async database connection management.

Provides SQLAlchemy async engine and session factory. PostgreSQL (asyncpg)
in deployment, SQLite (aiosqlite) for local runs and tests.
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


# Module-level engine and session factory
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_db(database_url: str, **engine_kwargs: Any) -> async_sessionmaker[AsyncSession]:
    """Initialize database engine and session factory.

    Args:
        database_url: Async connection URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)
        **engine_kwargs: Additional arguments passed to create_async_engine

    Returns:
        The session factory bound to the new engine.
    """
    global _engine, _session_factory

    engine_kwargs.setdefault("echo", False)
    engine_kwargs.setdefault("pool_pre_ping", True)

    _engine = create_async_engine(database_url, **engine_kwargs)
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    return _session_factory


def get_engine() -> AsyncEngine:
    """Get the database engine.

    Returns:
        The async database engine.

    Raises:
        RuntimeError: If database not initialized.
    """
    if _engine is None:
        raise RuntimeError("Database not initialized. Call init_db first.")
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory created by init_db.

    Raises:
        RuntimeError: If database not initialized.
    """
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db first.")
    return _session_factory


async def close_db() -> None:
    """Close database connections.

    Should be called during application shutdown.
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
