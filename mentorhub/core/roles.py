"""User role enumeration shared by the ORM, services and API schemas."""

import enum


class UserRole(str, enum.Enum):
    """
    Platform roles.

    MENTOR: Offers help on the courses listed in the profile
    STUDENT: Looks for mentors on the courses listed in the profile
    """

    MENTOR = "mentor"
    STUDENT = "student"

    @property
    def counterpart(self) -> "UserRole":
        """Role a user of this role is matched against."""
        return UserRole.STUDENT if self is UserRole.MENTOR else UserRole.MENTOR
