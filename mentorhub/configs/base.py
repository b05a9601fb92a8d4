"""
Shared settings source and runtime environment.

Every settings class reads the process environment first and `.env`
second; `ENV_FILE_CONFIG` is the common part of their model_config and each
class adds its own env prefix.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_CONFIG = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    case_sensitive=False,
    extra="ignore",
)


class EnvironmentSettings(BaseSettings):
    """Deployment environment and log verbosity (unprefixed env vars)."""

    model_config = ENV_FILE_CONFIG

    environment: str = Field(
        default="development",
        description="development, test or production; production enables Secure cookies",
    )
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("environment")
    @classmethod
    def _normalize_environment(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
