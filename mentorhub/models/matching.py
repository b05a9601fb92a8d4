"""
Matching domain models and schemas.

Request/response schemas for counterpart matching and mentor search.

Dependencies: pydantic
System role: Matching API contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from mentorhub.models.user import UserResponse


class FindStudentsRequest(BaseModel):
    """Request schema for /findstudents."""

    courses: list[str] | None = Field(default=None, description="Courses to match on")


class SearchMentorsRequest(BaseModel):
    """Request schema for /search-mentors."""

    model_config = ConfigDict(populate_by_name=True)

    search_query: str | None = Field(
        default=None,
        alias="searchQuery",
        description="Substring matched against mentor usernames, then courses",
    )


class MentorsResponse(BaseModel):
    """Mentors found for the requester."""

    success: bool = True
    message: str | None = None
    mentors: list[UserResponse]


class StudentsResponse(BaseModel):
    """Students found for the requested courses."""

    success: bool = True
    message: str | None = None
    students: list[UserResponse]
