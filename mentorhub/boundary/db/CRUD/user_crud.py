"""
User CRUD operations.

Exact-match lookups by username and email, course-overlap matching, and
case-insensitive substring search for the matching engine.

Dependencies: sqlalchemy, mentorhub.boundary.db.models
System role: Credential store queries
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.CRUD.base_crud import BaseCRUD
from mentorhub.boundary.db.models.user_model import UserCourseModel, UserModel
from mentorhub.core.roles import UserRole


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Course entries are eagerly loaded with every user (selectin), so the
    returned models can be serialized outside the session.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def create_user(
        self,
        session: AsyncSession,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: UserRole,
        courses: list[str],
        contact: list[str],
    ) -> UserModel:
        """
        Add a user together with its ordered course entries.

        Args:
            session: Async database session
            username: Unique login name
            email: Unique email
            password_hash: Already-hashed password
            role: mentor or student
            courses: Course identifiers in order (duplicates kept)
            contact: Contact strings

        Returns:
            UserModel: Flushed (uncommitted) user

        Raises:
            IntegrityError: On flush if username or email already exists
        """
        return await self.create(
            session,
            username=username,
            email=email,
            password_hash=password_hash,
            role=role,
            contact=list(contact),
            course_entries=[
                UserCourseModel(position=position, course=course)
                for position, course in enumerate(courses)
            ],
        )

    async def get_by_username(self, session: AsyncSession, username: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, session: AsyncSession, email: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_role_and_courses(
        self,
        session: AsyncSession,
        role: UserRole,
        courses: Sequence[str],
    ) -> Sequence[UserModel]:
        """
        Users of ``role`` sharing at least one course with ``courses``.

        Args:
            session: Async database session
            role: Role to match
            courses: Requester's course identifiers (exact match)

        Returns:
            Sequence of matching users in registration order
        """
        stmt = (
            select(UserModel)
            .where(
                UserModel.role == role,
                UserModel.course_entries.any(UserCourseModel.course.in_(list(courses))),
            )
            .order_by(UserModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search_by_username(
        self,
        session: AsyncSession,
        role: UserRole,
        query: str,
    ) -> Sequence[UserModel]:
        """Users of ``role`` whose username contains ``query`` (case-insensitive)."""
        stmt = (
            select(UserModel)
            .where(
                UserModel.role == role,
                UserModel.username.icontains(query, autoescape=True),
            )
            .order_by(UserModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def search_by_course(
        self,
        session: AsyncSession,
        role: UserRole,
        query: str,
    ) -> Sequence[UserModel]:
        """Users of ``role`` with any course containing ``query`` (case-insensitive)."""
        stmt = (
            select(UserModel)
            .where(
                UserModel.role == role,
                UserModel.course_entries.any(
                    UserCourseModel.course.icontains(query, autoescape=True)
                ),
            )
            .order_by(UserModel.created_at)
        )
        result = await session.execute(stmt)
        return result.scalars().all()


user_crud = UserCRUD()
