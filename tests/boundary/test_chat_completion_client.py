"""
Test suite for ChatCompletionClient.

Exercises the HTTP contract with httpx.MockTransport: request payload and
auth header, reply extraction, and the failure modes that must surface as
UpstreamError.

System role: Verification of the AI boundary adapter
"""

import json

import httpx
import pytest

from mentorhub.boundary.ai.chat_completion_client import ChatCompletionClient
from mentorhub.configs.ai import AISettings
from mentorhub.core.exceptions import UpstreamError

MESSAGES = [{"role": "user", "content": "Explain recursion"}]


@pytest.fixture
def ai_settings() -> AISettings:
    return AISettings(
        api_key="test-key",
        endpoint="https://ai.example.test/v1/chat/completions",
        model="test-model",
        max_tokens=256,
        temperature=0.4,
        top_p=1.0,
        timeout_seconds=5,
    )


def completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def client_for(settings: AISettings, handler) -> ChatCompletionClient:
    return ChatCompletionClient(settings, transport=httpx.MockTransport(handler))


class TestChatCompletionClientRequest:
    """Test suite for the outgoing request."""

    async def test_complete_should_post_payload_with_bearer_token(self, ai_settings):
        # Arrange
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("Authorization")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion("Recursion is..."))

        client = client_for(ai_settings, handler)

        # Act
        reply = await client.complete(MESSAGES)

        # Assert
        assert reply == "Recursion is..."
        assert captured["url"] == ai_settings.endpoint
        assert captured["auth"] == "Bearer test-key"
        assert captured["body"] == {
            "model": "test-model",
            "messages": MESSAGES,
            "n": 1,
            "max_tokens": 256,
            "temperature": 0.4,
            "top_p": 1.0,
            "stop": [],
            "response_format": {"type": "text"},
        }

    async def test_complete_should_omit_auth_header_without_key(self, ai_settings):
        # Arrange
        settings = ai_settings.model_copy(update={"api_key": None})
        seen: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("Authorization"))
            return httpx.Response(200, json=completion("ok"))

        # Act
        await client_for(settings, handler).complete(MESSAGES)

        # Assert
        assert seen == [None]


class TestChatCompletionClientReplies:
    """Test suite for reply extraction."""

    @pytest.mark.parametrize(
        "body",
        [
            {"choices": []},
            {},
            completion(""),
            completion(None),
        ],
    )
    async def test_complete_should_return_none_for_empty_reply(self, ai_settings, body):
        client = client_for(ai_settings, lambda request: httpx.Response(200, json=body))

        assert await client.complete(MESSAGES) is None


class TestChatCompletionClientFailures:
    """Test suite for upstream failures."""

    async def test_complete_should_raise_on_error_status(self, ai_settings):
        client = client_for(ai_settings, lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamError, match="Failed to contact AI."):
            await client.complete(MESSAGES)

    async def test_complete_should_raise_on_timeout(self, ai_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamError):
            await client_for(ai_settings, handler).complete(MESSAGES)

    async def test_complete_should_raise_on_connection_error(self, ai_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamError):
            await client_for(ai_settings, handler).complete(MESSAGES)

    async def test_complete_should_raise_on_malformed_json(self, ai_settings):
        client = client_for(ai_settings, lambda request: httpx.Response(200, text="not json"))

        with pytest.raises(UpstreamError):
            await client.complete(MESSAGES)
