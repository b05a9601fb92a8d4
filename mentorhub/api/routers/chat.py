"""Chat API endpoints.

Routes:
- POST /ai/chat - Send a message to the AI assistant with session history

Dependencies: mentorhub.application.services.chat_service
System role: AI chat proxy HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from mentorhub.api.deps import get_chat_service, require_api_user
from mentorhub.application.services import ChatService
from mentorhub.core.exceptions import MentorHubException, UpstreamError
from mentorhub.core.request_context import RequestContext
from mentorhub.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["chat"])


FALLBACK_REPLY = "Failed to contact AI."


def _failed_reply(message: str) -> JSONResponse:
    # The chat page reads `response`, not `message`
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "response": message},
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    context: RequestContext = Depends(require_api_user),
    chat_service: ChatService = Depends(get_chat_service),
):
    """Send a chat message in the context of the session's conversation.

    Flow:
    1. Record the message in the session thread
    2. Forward the whole thread to the AI endpoint
    3. Return the reply rendered as HTML

    Returns:
        ChatResponse: Reply HTML

    Raises:
        ValidationError(400): Blank message
        AuthError(401): No authenticated session
    """
    try:
        html = await chat_service.chat(context.session_id, request.message)
    except UpstreamError as e:
        return _failed_reply(e.message)
    except MentorHubException:
        raise
    except Exception as e:
        logger.exception("Chat exchange failed", extra={"error_type": type(e).__name__})
        return _failed_reply(FALLBACK_REPLY)
    return ChatResponse(response=html)
