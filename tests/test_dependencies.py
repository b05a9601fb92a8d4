"""
Test suite for dependency injection container.

Tests service factories, the shared service cache, settings defaults and
the auth gate dependencies.

System role: Verification of DI container
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.api.deps import (
    get_chat_service,
    get_matching_service,
    get_request_context,
    get_service_cache,
    get_session_service,
    get_user_service,
    require_api_user,
    require_page_user,
)
from mentorhub.api.errors import LoginRequired
from mentorhub.application.services import (
    ChatService,
    MatchingService,
    SessionService,
    UserService,
)
from mentorhub.configs import Settings
from mentorhub.core.exceptions import AuthError, UpstreamError
from mentorhub.core.request_context import RequestContext
from mentorhub.core.roles import UserRole


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture(autouse=True)
def fresh_cache():
    get_service_cache().clear()
    yield
    get_service_cache().clear()


class TestServiceFactories:
    """Test suite for the service factory functions."""

    def test_get_user_service_should_bind_db(self, mock_db_session) -> None:
        service = get_user_service(db=mock_db_session)

        assert isinstance(service, UserService)
        assert service.db is mock_db_session

    def test_get_matching_service_should_bind_db(self, mock_db_session) -> None:
        assert isinstance(get_matching_service(db=mock_db_session), MatchingService)

    def test_get_session_service_should_use_session_settings(
        self, mock_db_session, ledger, settings
    ) -> None:
        service = get_session_service(db=mock_db_session, ledger=ledger, settings=settings)

        assert isinstance(service, SessionService)
        assert service.ledger is ledger
        assert service.settings is settings.session

    def test_get_chat_service_should_share_cached_client(self, ledger, settings) -> None:
        first = get_chat_service(ledger=ledger, settings=settings)
        second = get_chat_service(ledger=ledger, settings=settings)

        assert isinstance(first, ChatService)
        assert first.client is second.client
        assert first.record_assistant_turns is False


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_conversation_ledger_should_be_singleton(self) -> None:
        cache = get_service_cache()

        assert cache.conversation_ledger is cache.conversation_ledger

    def test_clear_should_drop_instances(self) -> None:
        cache = get_service_cache()
        ledger = cache.conversation_ledger

        cache.clear()

        assert cache.conversation_ledger is not ledger


class TestSettingsDefaults:
    """Test suite for configuration defaults."""

    def test_session_cookie_defaults(self, settings) -> None:
        assert settings.session.cookie_name == "MENTORHUB_SESSION"
        assert settings.session.max_age_seconds == 100_000
        assert settings.session.same_site == "lax"

    def test_views_dir_should_not_depend_on_working_directory(
        self, tmp_path, monkeypatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        views_dir = Settings().views_dir

        assert views_dir.is_absolute()
        assert (views_dir / "index.html").is_file()

    def test_database_url_override(self) -> None:
        settings = Settings(database={"url": "sqlite+aiosqlite:///:memory:"})

        assert settings.database.async_database_url == "sqlite+aiosqlite:///:memory:"
        assert settings.database.is_sqlite is True


class TestAuthGate:
    """Test suite for request identity and the auth gate."""

    async def test_get_request_context_should_resolve_cookie(self, settings) -> None:
        # Arrange
        request = MagicMock()
        request.cookies = {settings.session.cookie_name: "tok"}
        session_service = AsyncMock()
        session_service.resolve.return_value = RequestContext.anonymous()

        # Act
        await get_request_context(request, session_service=session_service, settings=settings)

        # Assert
        session_service.resolve.assert_awaited_once_with("tok")

    async def test_get_request_context_should_convert_store_failure(self, settings) -> None:
        # Arrange
        request = MagicMock()
        request.cookies = {settings.session.cookie_name: "tok"}
        session_service = AsyncMock()
        session_service.resolve.side_effect = OperationalError("SELECT", {}, Exception("down"))

        # Act / Assert
        with pytest.raises(UpstreamError) as exc_info:
            await get_request_context(request, session_service=session_service, settings=settings)
        assert exc_info.value.message == "Server error"
        assert isinstance(exc_info.value.__cause__, OperationalError)

    async def test_require_api_user_should_reject_anonymous(self) -> None:
        with pytest.raises(AuthError):
            await require_api_user(RequestContext.anonymous())

    async def test_require_page_user_should_redirect_anonymous(self, settings) -> None:
        with pytest.raises(LoginRequired) as exc_info:
            await require_page_user(RequestContext.anonymous(), settings=settings)

        assert exc_info.value.location == "/login.html"

    async def test_gates_should_pass_authenticated_context(self, settings) -> None:
        context = RequestContext(
            session_id=uuid.uuid4(), user_id=uuid.uuid4(), role=UserRole.MENTOR
        )

        assert await require_api_user(context) is context
        assert await require_page_user(context, settings=settings) is context
