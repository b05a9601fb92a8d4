"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from mentorhub.boundary.db.CRUD import user_crud, session_crud

    user = await user_crud.get_by_username(db, "ada")
"""

from mentorhub.boundary.db.CRUD.base_crud import BaseCRUD
from mentorhub.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from mentorhub.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "UserCRUD",
    "user_crud",
]
