"""
API error handling.

Maps domain exceptions onto `{success: false, message}` responses and
provides a decorator that keeps unexpected failures from leaking internal
detail to clients.

Dependencies: fastapi, mentorhub.core.exceptions
System role: HTTP error translation
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse

from mentorhub.core.exceptions import MentorHubException, UpstreamError
from mentorhub.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


class LoginRequired(Exception):
    """Raised by page routes when the visitor has no authenticated session."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(location)


def handle_route_errors(fallback_message: str) -> Callable[[F], F]:
    """
    Decorator for route handlers.

    Domain exceptions and login redirects pass through to the app-level
    handlers. Anything else is logged with its traceback and replaced by an
    `UpstreamError` carrying ``fallback_message``.

    Args:
        fallback_message: Client-safe message for unexpected failures
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except (MentorHubException, LoginRequired):
                raise
            except Exception as e:
                logger.exception(
                    "Unexpected failure in route",
                    extra={"route": func.__name__, "error_type": type(e).__name__},
                )
                raise UpstreamError(fallback_message) from e

        return wrapper  # type: ignore

    return decorator


def _error_body(message: str) -> dict[str, Any]:
    return ErrorResponse(message=message).model_dump()


async def mentorhub_exception_handler(request: Request, exc: MentorHubException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
    else:
        logger.info(
            "Request rejected",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "status_code": exc.status_code,
            },
        )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Malformed request body", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Invalid request body"),
    )


async def login_required_handler(request: Request, exc: LoginRequired) -> RedirectResponse:
    return RedirectResponse(url=exc.location, status_code=status.HTTP_302_FOUND)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's exception handlers."""
    app.add_exception_handler(MentorHubException, mentorhub_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(LoginRequired, login_required_handler)
