"""
Application settings root.

One `Settings` object per process, composed of the per-concern settings
classes; each of those reads its own env prefix.

Dependencies: pydantic_settings, mentorhub.configs.*
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field

from mentorhub.configs.ai import AISettings
from mentorhub.configs.base import EnvironmentSettings
from mentorhub.configs.conversation import ConversationSettings
from mentorhub.configs.database import DatabaseSettings
from mentorhub.configs.session import SessionSettings

# Repository checkout root: mentorhub/configs/settings.py -> parents[2]
VIEWS_DIR = Path(__file__).resolve().parents[2] / "frontend" / "views"


class Settings(EnvironmentSettings):
    """Everything the app factory and the DI container need."""

    views_dir: Path = Field(
        default=VIEWS_DIR,
        description="Directory holding the HTML views",
    )
    cors_origins: list[str] = Field(default=["*"], description="CORS allow-list")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    session: SessionSettings = Field(default_factory=SessionSettings)
    ai: AISettings = Field(default_factory=AISettings)
    conversation: ConversationSettings = Field(default_factory=ConversationSettings)


@lru_cache
def get_settings() -> Settings:
    """Build settings once; later calls return the cached instance."""
    return Settings()
