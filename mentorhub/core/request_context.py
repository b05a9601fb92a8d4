"""
Per-request identity context.

Built by the session-resolution dependency before any route logic runs and
threaded explicitly through handlers.

Dependencies: None (pure domain layer)
System role: Authenticated identity carrier
"""

from dataclasses import dataclass
from uuid import UUID

from mentorhub.core.roles import UserRole


@dataclass(frozen=True)
class RequestContext:
    """
    Identity resolved from the session cookie.

    Holds only a stable identity reference (user id + role); profile data is
    re-fetched from the store when a route needs it.

    Attributes:
        session_id: Server-side session id, also the conversation ledger key
        user_id: Authenticated user id, None for anonymous requests
        role: Role captured at login, None for anonymous requests
    """

    session_id: UUID | None = None
    user_id: UUID | None = None
    role: UserRole | None = None

    @property
    def authenticated(self) -> bool:
        return self.session_id is not None and self.user_id is not None

    @classmethod
    def anonymous(cls) -> "RequestContext":
        return cls()
