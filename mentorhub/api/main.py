"""
MentorHub ASGI app.

Wires middleware, error handlers, the JSON/page routers and the static
views mount; `python -m mentorhub.api.main` serves it with uvicorn.

Dependencies: fastapi, mentorhub.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from mentorhub import __version__
from mentorhub.api.deps.dependencies import get_service_cache
from mentorhub.api.errors import register_exception_handlers
from mentorhub.application.services import SessionService
from mentorhub.boundary.db import dispose_engine, get_async_session_factory, init_db
from mentorhub.configs import get_settings
from mentorhub.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from .routers import (
    auth_router,
    chat_router,
    health_router,
    matching_router,
    pages_router,
    profile_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ensure tables and drop expired sessions on boot; release resources on exit."""
    settings = get_settings()
    configure_logging(settings.log_level)
    cache = get_service_cache()

    # Startup
    if settings.database.create_tables:
        await init_db()
        logger.info("Database tables ensured")

    async with get_async_session_factory()() as db:
        purged = await SessionService(
            db=db,
            ledger=cache.conversation_ledger,
            settings=settings.session,
        ).purge_expired()
    logger.info("Startup complete", extra={"purged_sessions": purged})

    yield

    # Shutdown
    cache.clear()
    await dispose_engine()
    logger.info("Service cache cleared, engine disposed")


def create_app() -> FastAPI:
    """Build the app; pages are included last so API routes take precedence."""
    settings = get_settings()

    app = FastAPI(
        title="MentorHub API",
        description="Mentor/student matching with session auth and an AI chat proxy",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last runs first: correlation wraps the access log
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(matching_router)
    app.include_router(chat_router)
    app.include_router(pages_router)

    # Remaining views (login.html, signup.html, assets) are served as-is
    if settings.views_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.views_dir, html=True), name="views")
    else:
        logger.warning("Views directory missing", extra={"views_dir": str(settings.views_dir)})

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "mentorhub.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
