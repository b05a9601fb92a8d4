"""
Engine and session factory for the credential and session store.

Both are built once per process from DatabaseSettings; routes receive a
fresh AsyncSession per request through get_async_db.

Dependencies: sqlalchemy, mentorhub.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mentorhub.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Process-wide engine.

    Pool sizing only applies to PostgreSQL; aiosqlite keeps the dialect's
    own pool. Pre-ping drops connections the server has already closed.
    """
    cfg = get_settings().database
    if cfg.is_sqlite:
        return create_async_engine(cfg.async_database_url, echo=cfg.echo_sql)

    return create_async_engine(
        cfg.async_database_url,
        echo=cfg.echo_sql,
        pool_pre_ping=True,
        pool_size=cfg.pool_size,
        max_overflow=cfg.max_overflow,
        pool_timeout=cfg.pool_timeout,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    # Services commit explicitly; rows stay readable after commit
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; closed once the route returns or raises."""
    async with get_async_session_factory()() as db:
        yield db


async def init_db() -> None:
    """Create all tables that do not exist yet (idempotent)."""
    from mentorhub.boundary.db import models  # noqa: F401  registers models
    from mentorhub.boundary.db.base import Base

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    await get_async_engine().dispose()
