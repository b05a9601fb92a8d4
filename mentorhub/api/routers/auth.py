"""
Registration and authentication endpoints.

Routes:
- POST /register - Create a mentor or student account
- POST /login - Verify credentials and open a session
- GET /logout - Destroy the session and return to the login page

Dependencies: mentorhub.application.services, mentorhub.api.deps
System role: Account and session HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse, RedirectResponse

from mentorhub.api.deps import (
    get_request_context,
    get_session_service,
    get_settings_dependency,
    get_user_service,
)
from mentorhub.api.errors import handle_route_errors
from mentorhub.application.services import SessionService, UserService
from mentorhub.configs import Settings
from mentorhub.core.request_context import RequestContext
from mentorhub.models.common import MessageResponse
from mentorhub.models.user import LoginRequest, LoginResponse, RegisterRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_route_errors("Server error during registration")
async def register(
    request: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Register a new mentor or student.

    Raises:
        ValidationError(400): Missing fields or unknown role
        ConflictError(400): Email or username already registered
    """
    await user_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role,
        courses=request.courses,
        contact=request.contact,
    )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=LoginResponse)
@handle_route_errors("Server error during login.")
async def login(
    request: LoginRequest,
    response: Response,
    context: RequestContext = Depends(get_request_context),
    user_service: UserService = Depends(get_user_service),
    session_service: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LoginResponse:
    """
    Log in and set the session cookie.

    Any session the client already held is replaced by a new one.

    Raises:
        ValidationError(400): Username or password missing
        AuthError(401): Unknown user or wrong password
    """
    user = await user_service.authenticate(request.username, request.password)
    session = await session_service.start(user, previous_session_id=context.session_id)

    response.set_cookie(
        key=settings.session.cookie_name,
        value=session.token,
        max_age=settings.session.max_age_seconds,
        httponly=True,
        samesite=settings.session.same_site,
        secure=settings.is_production,
    )
    return LoginResponse(role=user.role)


@router.get("/logout")
async def logout(
    context: RequestContext = Depends(get_request_context),
    session_service: SessionService = Depends(get_session_service),
    settings: Settings = Depends(get_settings_dependency),
) -> Response:
    """Destroy the current session, clear the cookie and redirect to login."""
    if context.session_id is not None:
        try:
            await session_service.destroy(context.session_id)
        except Exception:
            logger.exception("Logout failed", extra={"session_id": str(context.session_id)})
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Logout failed."},
            )

    redirect = RedirectResponse(url=settings.session.login_page, status_code=status.HTTP_302_FOUND)
    redirect.delete_cookie(
        key=settings.session.cookie_name,
        httponly=True,
        samesite=settings.session.same_site,
        secure=settings.is_production,
    )
    return redirect
