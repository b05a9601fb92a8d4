"""
Profile endpoints.

Routes:
- GET /user/profile - Display name and role of the session user
- GET /api/user/profile - Full profile read fresh from the database

Dependencies: mentorhub.application.services.user_service
System role: Profile HTTP API
"""

from fastapi import APIRouter, Depends

from mentorhub.api.deps import get_user_service, require_api_user
from mentorhub.api.errors import handle_route_errors
from mentorhub.application.services import UserService
from mentorhub.core.request_context import RequestContext
from mentorhub.models.user import ProfileDetail, ProfileResponse, ProfileSummaryResponse

router = APIRouter(tags=["profile"])


@router.get("/user/profile", response_model=ProfileSummaryResponse)
@handle_route_errors("Server error")
async def profile_summary(
    context: RequestContext = Depends(require_api_user),
    user_service: UserService = Depends(get_user_service),
) -> ProfileSummaryResponse:
    user = await user_service.get_user(context.user_id)
    return ProfileSummaryResponse(name=user.username, role=user.role)


@router.get("/api/user/profile", response_model=ProfileResponse)
@handle_route_errors("Server error")
async def profile_detail(
    context: RequestContext = Depends(require_api_user),
    user_service: UserService = Depends(get_user_service),
) -> ProfileResponse:
    """
    Return the stored profile of the session user.

    Raises:
        AuthError(401): No authenticated session
        UserNotFoundError(404): The user row no longer exists
    """
    user = await user_service.get_user(context.user_id)
    return ProfileResponse(user=ProfileDetail.model_validate(user))
