"""
Conversation ledger configuration settings.

Dependencies: pydantic_settings
System role: Lifecycle policy for per-session chat history
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mentorhub.configs.base import ENV_FILE_CONFIG


class ConversationSettings(BaseSettings):
    """Cap and expiry policy for in-process conversation history."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="CONVERSATION_")

    max_turns: int = Field(
        default=50,
        gt=0,
        description="Entries kept per session; oldest are dropped first",
    )
    idle_ttl_seconds: float = Field(
        default=100_000,
        gt=0,
        description="Threads untouched for this long are evicted",
    )
    record_assistant_turns: bool = Field(
        default=False,
        description="Also append assistant replies to the history",
    )
