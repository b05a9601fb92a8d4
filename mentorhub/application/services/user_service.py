"""
User service orchestrator.

Coordinates registration, credential verification and profile reads.

Dependencies: mentorhub.boundary.db.CRUD, mentorhub.core
System role: Registration and login use case orchestration
"""

import logging
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.CRUD.user_crud import user_crud
from mentorhub.boundary.db.models.user_model import UserModel
from mentorhub.core.exceptions import (
    AuthError,
    ConflictError,
    UserNotFoundError,
    ValidationError,
)
from mentorhub.core.passwords import hash_password, verify_password
from mentorhub.core.roles import UserRole

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


def split_contact(contact: str) -> list[str]:
    """Split a comma-separated contact field into trimmed, non-blank parts."""
    return [part.strip() for part in contact.split(",") if part.strip()]


def clean_courses(courses: list[str] | None) -> list[str]:
    """Trim course identifiers and drop blanks; order and duplicates are kept."""
    return [course.strip() for course in courses or [] if course and course.strip()]


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize user service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def register(
        self,
        username: str | None,
        email: str | None,
        password: str | None,
        role: str | None,
        courses: list[str] | None,
        contact: str | None,
    ) -> UserModel:
        """
        Register a new user.

        Flow (each step returns early on failure, nothing is persisted before
        all checks pass):
        1. Validate required fields
        2. Check email uniqueness
        3. Check username uniqueness
        4. Hash password
        5. Persist and commit

        Returns:
            UserModel: The committed user

        Raises:
            ValidationError: Missing field, unknown role, or empty course list
            ConflictError: Email or username already registered
        """
        username = (username or "").strip()
        email = (email or "").strip()
        course_list = clean_courses(courses)

        required = {
            "username": username,
            "email": email,
            "password": password,
            "role": role,
            "courses": course_list,
            "contact": contact,
        }
        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ValidationError(
                "Username, email, password, role, courses, and contact are required",
                missing=missing,
            )

        try:
            user_role = UserRole(role.strip().lower())
        except ValueError:
            raise ValidationError("Role must be 'mentor' or 'student'", field="role") from None

        if await user_crud.get_by_email(self.db, email):
            raise ConflictError("Email is already registered", field="email")

        if await user_crud.get_by_username(self.db, username):
            raise ConflictError("Username is already taken", field="username")

        password_hash = await run_in_threadpool(hash_password, password)

        try:
            user = await user_crud.create_user(
                self.db,
                username=username,
                email=email,
                password_hash=password_hash,
                role=user_role,
                courses=course_list,
                contact=split_contact(contact),
            )
            await self.db.commit()
        except IntegrityError as e:
            # A concurrent registration won the unique index
            await self.db.rollback()
            logger.warning(
                "Registration lost uniqueness race",
                extra={"username": username, "error": str(e.orig)},
            )
            raise ConflictError("Username or email is already registered") from e

        logger.info(
            "User registered",
            extra={"user_id": str(user.id), "role": user_role.value},
        )
        return user

    async def authenticate(self, username: str | None, password: str | None) -> UserModel:
        """
        Verify a username/password pair.

        Unknown usernames and wrong passwords raise the same error so the
        response does not reveal which accounts exist.

        Returns:
            UserModel: The authenticated user

        Raises:
            ValidationError: Username or password missing
            AuthError: Unknown user or password mismatch
        """
        if not username or not password:
            raise ValidationError("Username and password required.")

        user = await user_crud.get_by_username(self.db, username.strip())
        if user is None:
            logger.info("Login failed: unknown username")
            raise AuthError(INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            logger.info("Login failed: password mismatch", extra={"user_id": str(user.id)})
            raise AuthError(INVALID_CREDENTIALS)

        return user

    async def get_user(self, user_id: UUID) -> UserModel:
        """
        Fetch the current record for a user.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
