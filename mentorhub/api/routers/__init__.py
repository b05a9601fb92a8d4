"""API routers."""

from .auth import router as auth_router
from .chat import router as chat_router
from .health import router as health_router
from .matching import router as matching_router
from .pages import router as pages_router
from .profile import router as profile_router

__all__ = [
    "auth_router",
    "chat_router",
    "health_router",
    "matching_router",
    "pages_router",
    "profile_router",
]
