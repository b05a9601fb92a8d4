"""Service orchestrators."""

from .chat_service import ChatService
from .matching_service import MatchingService
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "ChatService",
    "MatchingService",
    "SessionService",
    "UserService",
]
