"""
Chat-completion HTTP client.

Sends a role-tagged message list to an OpenAI-style chat-completions
endpoint and returns the first choice's text.

Dependencies: httpx, mentorhub.configs
System role: Boundary adapter for the external text-generation service
"""

import logging
from typing import Any

import httpx

from mentorhub.configs.ai import AISettings
from mentorhub.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """
    Async client for the chat-completions endpoint.

    Every call is bounded by ``settings.timeout_seconds``. Transport errors,
    timeouts, non-2xx statuses and undecodable bodies all surface as
    UpstreamError so the caller can fall back to a safe reply.
    """

    def __init__(
        self,
        settings: AISettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            settings: Endpoint, model and sampling configuration
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self.settings = settings
        self._transport = transport

    def build_payload(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": messages,
            "n": 1,
            "max_tokens": self.settings.max_tokens,
            "temperature": self.settings.temperature,
            "top_p": self.settings.top_p,
            "stop": [],
            "response_format": {"type": "text"},
        }

    async def complete(self, messages: list[dict[str, str]]) -> str | None:
        """
        Request a completion for the given conversation.

        Args:
            messages: Ordered ``{"role", "content"}`` dicts

        Returns:
            str | None: Text of ``choices[0].message.content``, None if absent

        Raises:
            UpstreamError: If the call fails or times out
        """
        headers = {"Content-Type": "application/json"}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.settings.endpoint,
                    headers=headers,
                    json=self.build_payload(messages),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            logger.error(
                "Chat completion timed out",
                extra={"timeout_s": self.settings.timeout_seconds, "error": str(e)},
            )
            raise UpstreamError("Failed to contact AI.") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                "Chat completion returned error status",
                extra={"status_code": e.response.status_code},
            )
            raise UpstreamError("Failed to contact AI.") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Chat completion request failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise UpstreamError("Failed to contact AI.") from e

        return self.extract_content(data)

    @staticmethod
    def extract_content(data: Any) -> str | None:
        """Pull ``choices[0].message.content`` out of a response body."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) and content else None
