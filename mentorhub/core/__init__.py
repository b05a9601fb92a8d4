"""Domain core: exceptions, roles, request context, conversation ledger."""

from mentorhub.core.conversation_ledger import (
    ConversationEntry,
    ConversationLedger,
    ConversationThread,
)
from mentorhub.core.request_context import RequestContext
from mentorhub.core.roles import UserRole

__all__ = [
    "ConversationEntry",
    "ConversationLedger",
    "ConversationThread",
    "RequestContext",
    "UserRole",
]
