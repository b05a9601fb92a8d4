"""
Session service orchestrator.

Issues, resolves and destroys server-side sessions. Sessions have a fixed
lifetime from creation; expiry is checked on every resolve.

Dependencies: mentorhub.boundary.db.CRUD, mentorhub.core
System role: Session lifecycle use case orchestration
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.base import utcnow
from mentorhub.boundary.db.CRUD.session_crud import session_crud
from mentorhub.boundary.db.models.session_model import SessionModel
from mentorhub.boundary.db.models.user_model import UserModel
from mentorhub.configs.session import SessionSettings
from mentorhub.core.conversation_ledger import ConversationLedger
from mentorhub.core.request_context import RequestContext

logger = logging.getLogger(__name__)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class SessionService:
    """Session service orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        ledger: ConversationLedger,
        settings: SessionSettings,
    ) -> None:
        """
        Initialize session service.

        Args:
            db: Async SQLAlchemy session
            ledger: Conversation ledger whose threads follow session lifetime
            settings: Session lifetime and cookie policy
        """
        self.db = db
        self.ledger = ledger
        self.settings = settings

    async def resolve(self, token: str | None) -> RequestContext:
        """
        Resolve the session behind a cookie token.

        Missing, unknown and expired tokens resolve to an anonymous context.
        Expired rows are deleted and their conversation thread dropped.

        Args:
            token: Token presented by the client, if any

        Returns:
            RequestContext: Identity for this request
        """
        if not token:
            return RequestContext.anonymous()

        session = await session_crud.get_by_token(self.db, token)
        if session is None:
            return RequestContext.anonymous()

        if as_utc(session.expires_at) <= utcnow():
            logger.info("Session expired", extra={"session_id": str(session.id)})
            await self.destroy(session.id)
            return RequestContext.anonymous()

        if not session.authenticated or session.user_id is None:
            return RequestContext(session_id=session.id)

        return RequestContext(
            session_id=session.id,
            user_id=session.user_id,
            role=session.role,
        )

    async def start(
        self,
        user: UserModel,
        previous_session_id: UUID | None = None,
    ) -> SessionModel:
        """
        Open an authenticated session for ``user``.

        A session the client already held is destroyed first, so every login
        gets a fresh token.

        Args:
            user: Successfully authenticated user
            previous_session_id: Session presented with the login request

        Returns:
            SessionModel: Committed session carrying the new token
        """
        if previous_session_id is not None:
            await session_crud.delete_by_id(self.db, previous_session_id)
            self.ledger.discard(previous_session_id)

        now = utcnow()
        session = await session_crud.create(
            self.db,
            token=new_session_token(),
            authenticated=True,
            user_id=user.id,
            role=user.role,
            created_at=now,
            updated_at=now,
            expires_at=now + timedelta(seconds=self.settings.max_age_seconds),
        )
        await self.db.commit()

        logger.info(
            "Session started",
            extra={"session_id": str(session.id), "user_id": str(user.id)},
        )
        return session

    async def destroy(self, session_id: UUID) -> bool:
        """
        Invalidate a session and drop its conversation thread.

        Args:
            session_id: Session UUID

        Returns:
            bool: True if a row was deleted
        """
        deleted = await session_crud.delete_by_id(self.db, session_id)
        await self.db.commit()
        self.ledger.discard(session_id)
        return deleted

    async def purge_expired(self) -> int:
        """
        Delete every expired session.

        Returns:
            int: Number of sessions removed
        """
        now = utcnow()
        expired_ids = await session_crud.get_expired_ids(self.db, now)
        if not expired_ids:
            return 0
        await session_crud.delete_expired(self.db, now)
        await self.db.commit()
        for session_id in expired_ids:
            self.ledger.discard(session_id)
        logger.info("Purged expired sessions", extra={"count": len(expired_ids)})
        return len(expired_ids)
