"""External AI service adapters."""

from mentorhub.boundary.ai.chat_completion_client import ChatCompletionClient

__all__ = ["ChatCompletionClient"]
