"""
Test suite for SessionService.

Covers token resolution, login rotation, logout and expiry, including the
conversation threads that follow session lifetime.

System role: Verification of session lifecycle orchestration
"""

from datetime import timedelta

import pytest
from sqlalchemy import update

from mentorhub.application.services.session_service import SessionService, as_utc
from mentorhub.boundary.db.base import utcnow
from mentorhub.boundary.db.CRUD.session_crud import session_crud
from mentorhub.boundary.db.models.session_model import SessionModel
from mentorhub.core.conversation_ledger import ConversationEntry
from mentorhub.core.roles import UserRole


@pytest.fixture
def session_service(test_async_db, ledger, session_settings) -> SessionService:
    return SessionService(db=test_async_db, ledger=ledger, settings=session_settings)


async def expire(db, session_id) -> None:
    await db.execute(
        update(SessionModel)
        .where(SessionModel.id == session_id)
        .values(expires_at=utcnow() - timedelta(seconds=1))
    )
    await db.commit()


class TestSessionServiceResolve:
    """Test suite for SessionService.resolve()."""

    @pytest.mark.parametrize("token", [None, "", "unknown-token"])
    async def test_resolve_should_be_anonymous_without_valid_token(
        self, session_service, token
    ):
        context = await session_service.resolve(token)

        assert context.authenticated is False
        assert context.session_id is None

    async def test_resolve_should_return_identity_for_live_session(
        self, session_service, make_user
    ):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        session = await session_service.start(user)

        # Act
        context = await session_service.resolve(session.token)

        # Assert
        assert context.authenticated is True
        assert context.session_id == session.id
        assert context.user_id == user.id
        assert context.role is UserRole.STUDENT

    async def test_resolve_should_destroy_expired_session_and_thread(
        self, session_service, make_user, test_async_db, ledger
    ):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        session = await session_service.start(user)
        await ledger.append(session.id, ConversationEntry("user", "hi"))
        await expire(test_async_db, session.id)

        # Act
        context = await session_service.resolve(session.token)

        # Assert
        assert context.authenticated is False
        assert session.id not in ledger
        assert await session_crud.get_by_token(test_async_db, session.token) is None


class TestSessionServiceStart:
    """Test suite for SessionService.start()."""

    async def test_start_should_set_expiry_from_max_age(
        self, session_service, make_user, session_settings
    ):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        before = utcnow()

        # Act
        session = await session_service.start(user)

        # Assert
        lifetime = as_utc(session.expires_at) - before
        assert abs(lifetime.total_seconds() - session_settings.max_age_seconds) < 5

    async def test_start_should_rotate_previous_session(
        self, session_service, make_user, ledger
    ):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        first = await session_service.start(user)
        await ledger.append(first.id, ConversationEntry("user", "hi"))

        # Act
        second = await session_service.start(user, previous_session_id=first.id)

        # Assert
        assert second.token != first.token
        assert (await session_service.resolve(first.token)).authenticated is False
        assert (await session_service.resolve(second.token)).authenticated is True
        assert first.id not in ledger


class TestSessionServiceDestroy:
    """Test suite for destroy() and purge_expired()."""

    async def test_destroy_should_invalidate_token(self, session_service, make_user, ledger):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        session = await session_service.start(user)
        await ledger.append(session.id, ConversationEntry("user", "hi"))

        # Act
        deleted = await session_service.destroy(session.id)

        # Assert
        assert deleted is True
        assert (await session_service.resolve(session.token)).authenticated is False
        assert session.id not in ledger

    async def test_purge_expired_should_keep_live_sessions(
        self, session_service, make_user, test_async_db
    ):
        # Arrange
        user = await make_user("s1", UserRole.STUDENT, ["A"])
        stale = await session_service.start(user)
        live = await session_service.start(user)
        await expire(test_async_db, stale.id)

        # Act
        purged = await session_service.purge_expired()

        # Assert
        assert purged == 1
        assert (await session_service.resolve(live.token)).authenticated is True

    async def test_purge_expired_should_return_zero_when_nothing_expired(self, session_service):
        assert await session_service.purge_expired() == 0
