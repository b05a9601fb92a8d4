"""
AI chat-completion configuration settings.

Settings for the external text-generation endpoint used by the chat proxy.

Dependencies: pydantic_settings
System role: External AI service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mentorhub.configs.base import ENV_FILE_CONFIG


class AISettings(BaseSettings):
    """Settings for the chat-completions endpoint."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="AI_")

    api_key: str | None = Field(default=None, description="Bearer token for the AI endpoint")
    endpoint: str = Field(
        default="https://api.ai21.com/studio/v1/chat/completions",
        description="Chat-completions URL",
    )
    model: str = Field(default="jamba-large-1.6", description="Model identifier")
    max_tokens: int = Field(default=2048, description="Maximum tokens per reply")
    temperature: float = Field(default=0.4, description="Sampling temperature")
    top_p: float = Field(default=1.0, description="Nucleus sampling mass")
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Upper bound on a single chat-completion call",
    )
