"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

The schema is owned by the event catalogue service; this service only reads.

Engine and session factory are created lazily on first use (get_db) so
import does not trigger Settings validation. The engine is disposed by the
application lifespan, never by request handling.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> async_sessionmaker[AsyncSession]:
    """Create engine and AsyncSessionLocal on first use; return the session factory."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return AsyncSessionLocal
    settings = get_settings()
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
    }
    if "postgresql" in settings.database_url:
        command_timeout = (
            settings.db_command_timeout
            if settings.db_command_timeout is not None
            else 30
        )
        engine_kwargs.update(
            pool_size=settings.db_pool_size if settings.db_pool_size is not None else 20,
            max_overflow=(
                settings.db_max_overflow if settings.db_max_overflow is not None else 30
            ),
            pool_timeout=(
                settings.db_pool_timeout if settings.db_pool_timeout is not None else 10
            ),
            pool_recycle=3600,
            # The server cancels the statement first (QueryCanceledError); the
            # client-side command_timeout is a backstop a few seconds later.
            connect_args={
                "command_timeout": command_timeout + 5,
                "server_settings": {"statement_timeout": str(command_timeout * 1000)},
            },
        )
    engine = create_async_engine(settings.database_url, **engine_kwargs)
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )
    return AsyncSessionLocal


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


async def get_db() -> AsyncIterator[AsyncSession]:
    """Database session dependency (read-only; never commits).

    Yields a request-scoped session and closes it on exit.
    """
    session_factory = _ensure_engine()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """Dispose the engine (pool connections). Called from lifespan shutdown."""
    global engine, AsyncSessionLocal
    if engine is None:
        return
    await engine.dispose()
    engine = None
    AsyncSessionLocal = None
    logger.info("Database engine disposed")
