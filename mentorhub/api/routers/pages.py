"""
Page endpoints.

Routes: GET /, GET /dashboard, GET /ai-chat, GET /my-mentors

Gated pages redirect anonymous visitors to the login page instead of
returning 401.

Dependencies: fastapi, mentorhub.api.deps
System role: HTML view delivery
"""

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from mentorhub.api.deps import get_settings_dependency, require_page_user
from mentorhub.configs import Settings
from mentorhub.core.request_context import RequestContext
from mentorhub.core.roles import UserRole

router = APIRouter(tags=["pages"], include_in_schema=False)

DASHBOARD_VIEWS = {
    UserRole.MENTOR: "mentordashboard.html",
    UserRole.STUDENT: "studentdashboard.html",
}


def view_response(views_dir: Path, name: str) -> FileResponse:
    """Serve one HTML file from the views directory."""
    path = views_dir / name
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return FileResponse(path, media_type="text/html")


@router.get("/")
async def index(settings: Settings = Depends(get_settings_dependency)) -> FileResponse:
    return view_response(settings.views_dir, "index.html")


@router.get("/dashboard")
async def dashboard(
    context: RequestContext = Depends(require_page_user),
    settings: Settings = Depends(get_settings_dependency),
) -> FileResponse:
    """Serve the dashboard matching the session role."""
    return view_response(settings.views_dir, DASHBOARD_VIEWS[context.role])


@router.get("/ai-chat")
async def ai_chat_page(
    context: RequestContext = Depends(require_page_user),
    settings: Settings = Depends(get_settings_dependency),
) -> FileResponse:
    return view_response(settings.views_dir, "ai-chat.html")


@router.get("/my-mentors")
async def my_mentors_page(
    context: RequestContext = Depends(require_page_user),
    settings: Settings = Depends(get_settings_dependency),
) -> FileResponse:
    return view_response(settings.views_dir, "mentor-matching.html")
