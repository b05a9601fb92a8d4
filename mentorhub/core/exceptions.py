"""
Domain errors for MentorHub.

Each class names the HTTP status the API renders it with. ``message`` is
always safe to show a client; keyword context lands in ``details`` and is
only ever logged.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MentorHubException(Exception):
    """Root of every error the API turns into a JSON response."""

    status_code: int = 500

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = {k: v for k, v in details.items() if v is not None}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(MentorHubException):
    """Missing or empty input; ``field`` names it when there is exactly one."""

    status_code = 400


class ConflictError(MentorHubException):
    """Username or email already registered."""

    status_code = 400


class AuthError(MentorHubException):
    """Bad credentials, no session, or the wrong role for the route."""

    status_code = 401


class UserNotFoundError(MentorHubException):
    """The user a session points at has been removed."""

    status_code = 404

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found", user_id=user_id)


class NoMatchError(MentorHubException):
    """
    A counterpart search came back empty.

    Rendered as 200 with ``success: false``: an empty result is an answer,
    not a failure.
    """

    status_code = 200


class UpstreamError(MentorHubException):
    """The AI service or the store failed; the message hides the cause."""

    status_code = 500
