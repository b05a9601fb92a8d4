"""
Matching service.

Finds counterparts (users of the opposite role) by course overlap, and
searches users by username with a course fallback.

Dependencies: mentorhub.boundary.db.CRUD, mentorhub.core
System role: Mentor/student matching engine
"""

import logging
from collections.abc import Iterable
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.CRUD.user_crud import user_crud
from mentorhub.boundary.db.models.user_model import UserModel
from mentorhub.core.exceptions import NoMatchError, ValidationError
from mentorhub.core.roles import UserRole

logger = logging.getLogger(__name__)


class MatchingService:
    """Course-overlap matching and counterpart search."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize matching service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def find_counterparts(
        self,
        requester_courses: Iterable[str] | None,
        counterpart_role: UserRole,
    ) -> Sequence[UserModel]:
        """
        Users of ``counterpart_role`` sharing at least one course.

        Args:
            requester_courses: Requester's courses (treated as a set)
            counterpart_role: Role to search among

        Returns:
            Sequence[UserModel]: Non-empty list of matches

        Raises:
            ValidationError: If no courses are given
            NoMatchError: If nobody matches
        """
        courses = {course for course in requester_courses or [] if course}
        if not courses:
            raise ValidationError("Courses are required and must not be empty", field="courses")

        matches = await user_crud.find_by_role_and_courses(
            self.db,
            counterpart_role,
            sorted(courses),
        )

        logger.info(
            "Counterpart lookup",
            extra={
                "role": counterpart_role.value,
                "course_count": len(courses),
                "match_count": len(matches),
            },
        )

        if not matches:
            raise NoMatchError(f"No {counterpart_role.value}s found for the selected courses.")
        return matches

    async def search_counterparts(
        self,
        query: str | None,
        role: UserRole,
    ) -> Sequence[UserModel]:
        """
        Search users of ``role`` by username, falling back to courses.

        The course search runs only when the username search is empty;
        the two result sets are never combined.

        Args:
            query: Case-insensitive substring
            role: Role to search among

        Returns:
            Sequence[UserModel]: Non-empty list of matches

        Raises:
            ValidationError: If the query is blank
            NoMatchError: If neither search finds anybody
        """
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required", field="searchQuery")

        matches = await user_crud.search_by_username(self.db, role, query)
        matched_on = "username"

        if not matches:
            matches = await user_crud.search_by_course(self.db, role, query)
            matched_on = "course"

        logger.info(
            "Counterpart search",
            extra={"role": role.value, "matched_on": matched_on, "match_count": len(matches)},
        )

        if not matches:
            raise NoMatchError(f"No {role.value}s found matching your search")
        return matches
