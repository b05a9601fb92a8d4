"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - init_db(), dispose_engine(): Startup/shutdown helpers
  - UserModel, UserCourseModel, SessionModel: Domain entities
  - user_crud, session_crud: CRUD operation singletons

Dependencies: sqlalchemy, mentorhub.configs
System role: Database adapter providing persistent storage for users and
server-side sessions.
"""

from mentorhub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from mentorhub.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    init_db,
)
from mentorhub.boundary.db.models import SessionModel, UserCourseModel, UserModel
from mentorhub.boundary.db.CRUD import (
    BaseCRUD,
    SessionCRUD,
    UserCRUD,
    session_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "init_db",
    # Models
    "SessionModel",
    "UserCourseModel",
    "UserModel",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "UserCRUD",
    # CRUD singletons
    "session_crud",
    "user_crud",
]
