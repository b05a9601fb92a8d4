"""
Dependency injection container.

Factory functions for FastAPI dependencies, including the request identity
and the auth gate.

Dependencies: mentorhub.configs, mentorhub.application, mentorhub.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.api.errors import LoginRequired
from mentorhub.application.services import (
    ChatService,
    MatchingService,
    SessionService,
    UserService,
)
from mentorhub.boundary.ai import ChatCompletionClient
from mentorhub.boundary.db import get_async_db
from mentorhub.configs import Settings, get_settings
from mentorhub.core.conversation_ledger import ConversationLedger
from mentorhub.core.exceptions import AuthError, UpstreamError
from mentorhub.core.request_context import RequestContext

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for process-wide service instances."""

    def __init__(self):
        self._conversation_ledger = None
        self._chat_client = None

    @property
    def conversation_ledger(self) -> ConversationLedger:
        """Get cached conversation ledger."""
        if self._conversation_ledger is None:
            settings = get_settings().conversation
            self._conversation_ledger = ConversationLedger(
                max_turns=settings.max_turns,
                idle_ttl_seconds=settings.idle_ttl_seconds,
            )
        return self._conversation_ledger

    @property
    def chat_client(self) -> ChatCompletionClient:
        """Get cached chat-completion client."""
        if self._chat_client is None:
            self._chat_client = ChatCompletionClient(get_settings().ai)
        return self._chat_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._conversation_ledger = None
        self._chat_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_ledger() -> ConversationLedger:
    """Get the process-wide conversation ledger."""
    return get_service_cache().conversation_ledger


def get_user_service(db: AsyncSession = Depends(get_async_db)) -> UserService:
    """
    Get user service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        UserService: User service instance
    """
    return UserService(db=db)


def get_session_service(
    db: AsyncSession = Depends(get_async_db),
    ledger: ConversationLedger = Depends(get_ledger),
    settings: Settings = Depends(get_settings_dependency),
) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)
        ledger: Conversation ledger (injected via Depends)
        settings: Application settings (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db, ledger=ledger, settings=settings.session)


def get_matching_service(db: AsyncSession = Depends(get_async_db)) -> MatchingService:
    """Get matching service instance."""
    return MatchingService(db=db)


def get_chat_service(
    ledger: ConversationLedger = Depends(get_ledger),
    settings: Settings = Depends(get_settings_dependency),
) -> ChatService:
    """
    Get chat service instance with the cached AI client.

    Returns:
        ChatService: Chat service bound to the shared ledger
    """
    return ChatService(
        ledger=ledger,
        client=get_service_cache().chat_client,
        record_assistant_turns=settings.conversation.record_assistant_turns,
    )


async def get_request_context(
    request: Request,
    session_service: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RequestContext:
    """
    Resolve the identity of the current request from its session cookie.

    Runs before the route body, so store failures are converted here.

    Returns:
        RequestContext: Authenticated or anonymous context

    Raises:
        UpstreamError(500): The session store could not be read
    """
    token = request.cookies.get(settings.session.cookie_name)
    try:
        return await session_service.resolve(token)
    except SQLAlchemyError as e:
        logger.exception("Session lookup failed", extra={"path": request.url.path})
        raise UpstreamError("Server error") from e


async def require_api_user(
    context: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """
    Gate for JSON routes.

    Raises:
        AuthError: No authenticated session (401)
    """
    if not context.authenticated:
        raise AuthError("Authentication required")
    return context


async def require_page_user(
    context: RequestContext = Depends(get_request_context),
    settings: Settings = Depends(get_settings_dependency),
) -> RequestContext:
    """
    Gate for page routes.

    Raises:
        LoginRequired: No authenticated session (redirect to the login page)
    """
    if not context.authenticated:
        raise LoginRequired(settings.session.login_page)
    return context
