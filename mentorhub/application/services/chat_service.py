"""
Chat service for the AI proxy.

Orchestrates one chat exchange: record the user turn in the conversation
ledger, send the whole thread to the chat-completion client, and render
the reply from markdown to HTML.

Dependencies: markdown, mentorhub.boundary.ai, mentorhub.core
System role: Chat service orchestration layer
"""

import html
import logging
from uuid import UUID

import markdown

from mentorhub.boundary.ai.chat_completion_client import ChatCompletionClient
from mentorhub.core.conversation_ledger import ConversationEntry, ConversationLedger
from mentorhub.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

EMPTY_REPLY_FALLBACK = "Sorry, I didn't get a response from the AI."


def render_markdown(text: str) -> str:
    """Render markdown to HTML, degrading to an escaped paragraph."""
    try:
        return markdown.markdown(text)
    except Exception:
        logger.exception("Markdown formatting failed")
        return f"<p>{html.escape(text)}</p>"


class ChatService:
    """
    Chat service for the AI proxy.

    The ledger lock for the session is held for the whole exchange, so
    concurrent messages on one session are answered one at a time, each
    with the full preceding history.
    """

    def __init__(
        self,
        ledger: ConversationLedger,
        client: ChatCompletionClient,
        record_assistant_turns: bool = False,
    ) -> None:
        """
        Initialize chat service.

        Args:
            ledger: Per-session conversation history
            client: Chat-completion client
            record_assistant_turns: Also store assistant replies in the ledger
        """
        self.ledger = ledger
        self.client = client
        self.record_assistant_turns = record_assistant_turns

    async def chat(self, session_id: UUID, message: str | None) -> str:
        """
        Process one chat message.

        Flow:
        1. Append the user turn to the session thread
        2. Send the full thread to the AI endpoint
        3. Substitute a fallback when the reply is empty
        4. Render markdown to HTML

        Args:
            session_id: Session UUID (ledger key)
            message: User message

        Returns:
            str: HTML reply

        Raises:
            ValidationError: If the message is blank
            UpstreamError: If the AI call fails or times out
        """
        if not message or not message.strip():
            raise ValidationError("Message is required", field="message")

        async with self.ledger.thread(session_id) as thread:
            thread.append(ConversationEntry(role="user", content=message))
            context = [entry.to_message() for entry in thread.entries()]

            logger.info(
                "Sending chat exchange",
                extra={"session_id": str(session_id), "turns": len(context)},
            )
            reply = await self.client.complete(context)

            if reply is None:
                logger.warning("Empty reply from AI", extra={"session_id": str(session_id)})
                reply = EMPTY_REPLY_FALLBACK
            elif self.record_assistant_turns:
                thread.append(ConversationEntry(role="assistant", content=reply))

        return render_markdown(reply)
