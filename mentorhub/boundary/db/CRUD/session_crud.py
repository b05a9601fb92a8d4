"""
Session CRUD operations.

Provides token lookup and expiry housekeeping for SessionModel.

Dependencies: sqlalchemy, mentorhub.boundary.db.models
System role: Session persistence operations
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.CRUD.base_crud import BaseCRUD
from mentorhub.boundary.db.models.session_model import SessionModel


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_token(self, session: AsyncSession, token: str) -> SessionModel | None:
        """
        Retrieve a session by its cookie token.

        Args:
            session: Async database session
            token: Opaque token presented by the client

        Returns:
            SessionModel if found (expired or not), None otherwise
        """
        stmt = select(SessionModel).where(SessionModel.token == token)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_expired_ids(self, session: AsyncSession, now: datetime) -> list[UUID]:
        stmt = select(SessionModel.id).where(SessionModel.expires_at <= now)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def delete_expired(self, session: AsyncSession, now: datetime) -> int:
        """
        Delete every session whose expiry is at or before ``now``.

        Returns:
            int: Number of rows deleted
        """
        stmt = delete(SessionModel).where(SessionModel.expires_at <= now)
        result = await session.execute(stmt)
        return result.rowcount


session_crud = SessionCRUD()
