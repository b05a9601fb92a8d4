"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_ledger,
    get_matching_service,
    get_request_context,
    get_service_cache,
    get_session_service,
    get_settings_dependency,
    get_user_service,
    require_api_user,
    require_page_user,
)

__all__ = [
    "get_chat_service",
    "get_ledger",
    "get_matching_service",
    "get_request_context",
    "get_service_cache",
    "get_session_service",
    "get_settings_dependency",
    "get_user_service",
    "require_api_user",
    "require_page_user",
]
