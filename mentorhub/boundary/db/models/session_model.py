"""
Session ORM model.

Represents a server-side login session identified by an opaque cookie token.

Dependencies: sqlalchemy, mentorhub.boundary.db.base
System role: Session persistence for authentication state
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from mentorhub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from mentorhub.boundary.db.models.user_model import user_role_enum
from mentorhub.core.roles import UserRole


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Server-side session.

    The row id doubles as the conversation ledger key; the token is what the
    client presents. The session holds an identity reference only (user id
    and the role seen at login), never a copy of the profile.

    Attributes:
        id: UUID primary key (ledger key)
        token: Opaque random token carried by the session cookie (unique)
        authenticated: True iff user_id was set by a successful login
        user_id: Authenticated user (cascade delete with the user)
        role: Role captured at login, used by role-gated routes
        expires_at: Fixed expiry, creation time + max age
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "sessions"

    token: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
    )
    authenticated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        default=None,
    )
    role: Mapped[UserRole | None] = mapped_column(user_role_enum, nullable=True, default=None)
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
