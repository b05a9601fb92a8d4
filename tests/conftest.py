"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, user factories, ledger and settings fixtures
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import uuid

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mentorhub.boundary.db.base import Base
from mentorhub.boundary.db.CRUD.user_crud import user_crud
from mentorhub.configs.session import SessionSettings
from mentorhub.core.conversation_ledger import ConversationLedger
from mentorhub.core.passwords import hash_password
from mentorhub.core.roles import UserRole


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of one test
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the in-memory engine."""
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_async_db(test_session_factory):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    async with test_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def ledger() -> ConversationLedger:
    """Provide an empty conversation ledger."""
    return ConversationLedger(max_turns=50, idle_ttl_seconds=100_000)


@pytest.fixture
def session_settings() -> SessionSettings:
    """Provide default session settings."""
    return SessionSettings()


@pytest.fixture
def make_user(test_async_db):
    """
    Factory that inserts and commits a user.

    Usage:
        mentor = await make_user("m1", UserRole.MENTOR, ["B", "C"])
    """

    async def _make_user(
        username: str,
        role: UserRole,
        courses: list[str],
        password: str = "secret",
        contact: list[str] | None = None,
    ):
        user = await user_crud.create_user(
            test_async_db,
            username=username,
            email=f"{username}@example.com",
            password_hash=hash_password(password),
            role=role,
            courses=courses,
            contact=contact or [f"{username}@example.com"],
        )
        await test_async_db.commit()
        return user

    return _make_user


@pytest.fixture
def sample_session_id() -> uuid.UUID:
    """Provide sample session UUID for testing."""
    return uuid.uuid4()
