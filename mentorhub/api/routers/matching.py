"""
Matching endpoints.

Routes:
- POST /findmentors - Mentors sharing a course with the session student
- POST /findstudents - Students taking any of the given courses
- POST /search-mentors - Mentors by username, falling back to courses

An empty result is not an error: it renders as 200 with `success: false`.

Dependencies: mentorhub.application.services.matching_service
System role: Mentor/student matching HTTP API
"""

from fastapi import APIRouter, Depends

from mentorhub.api.deps import get_matching_service, get_user_service, require_api_user
from mentorhub.api.errors import handle_route_errors
from mentorhub.application.services import MatchingService, UserService
from mentorhub.core.exceptions import AuthError
from mentorhub.core.request_context import RequestContext
from mentorhub.core.roles import UserRole
from mentorhub.models.matching import (
    FindStudentsRequest,
    MentorsResponse,
    SearchMentorsRequest,
    StudentsResponse,
)
from mentorhub.models.user import UserResponse

router = APIRouter(tags=["matching"])


@router.post("/findmentors", response_model=MentorsResponse)
@handle_route_errors("Server error while finding mentors.")
async def find_mentors(
    context: RequestContext = Depends(require_api_user),
    user_service: UserService = Depends(get_user_service),
    matching_service: MatchingService = Depends(get_matching_service),
) -> MentorsResponse:
    """
    Find mentors for the logged-in student.

    The student's courses are read from the database, not from the request.

    Raises:
        AuthError(401): No session, or the session user is not a student
        ValidationError(400): The student has no courses on record
    """
    if context.role is not UserRole.STUDENT:
        raise AuthError("Authentication required for students")

    student = await user_service.get_user(context.user_id)
    mentors = await matching_service.find_counterparts(student.courses, UserRole.MENTOR)
    return MentorsResponse(
        message="Mentors found matching your interests.",
        mentors=[UserResponse.model_validate(mentor) for mentor in mentors],
    )


@router.post("/findstudents", response_model=StudentsResponse)
@handle_route_errors("Server error while finding students.")
async def find_students(
    request: FindStudentsRequest,
    context: RequestContext = Depends(require_api_user),
    matching_service: MatchingService = Depends(get_matching_service),
) -> StudentsResponse:
    """
    Find students taking any of the requested courses.

    Raises:
        ValidationError(400): Course list missing or empty
    """
    students = await matching_service.find_counterparts(request.courses, UserRole.STUDENT)
    return StudentsResponse(
        message="Students found for the selected courses.",
        students=[UserResponse.model_validate(student) for student in students],
    )


@router.post("/search-mentors", response_model=MentorsResponse)
@handle_route_errors("Server error while searching mentors.")
async def search_mentors(
    request: SearchMentorsRequest,
    context: RequestContext = Depends(require_api_user),
    matching_service: MatchingService = Depends(get_matching_service),
) -> MentorsResponse:
    """
    Search mentors by username, then by course when no username matches.

    Raises:
        ValidationError(400): Blank search query
    """
    mentors = await matching_service.search_counterparts(request.search_query, UserRole.MENTOR)
    return MentorsResponse(mentors=[UserResponse.model_validate(mentor) for mentor in mentors])
