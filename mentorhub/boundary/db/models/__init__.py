"""
Database models package.

Exports:
  - UserModel, UserCourseModel: Credential store rows
  - SessionModel: Server-side session rows

Dependencies: sqlalchemy, mentorhub.boundary.db.base
System role: Database model definitions for domain entities
"""

from mentorhub.boundary.db.models.session_model import SessionModel
from mentorhub.boundary.db.models.user_model import UserCourseModel, UserModel

__all__ = [
    "SessionModel",
    "UserCourseModel",
    "UserModel",
]
