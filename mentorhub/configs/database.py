"""
Database settings (POSTGRES_* environment variables).

POSTGRES_URL, when set, wins over the individual host/port/credential
fields; that is how local runs and tests point at sqlite+aiosqlite.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mentorhub.configs.base import ENV_FILE_CONFIG


class DatabaseSettings(BaseSettings):
    """Where the credential and session tables live."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="POSTGRES_")

    url: str | None = None
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = "mentorhub"

    # Ignored for SQLite URLs
    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, ge=1, description="Seconds to wait for a pooled connection")

    echo_sql: bool = False
    create_tables: bool = Field(default=True, description="Run create_all during app startup")

    @property
    def async_database_url(self) -> str:
        if self.url:
            return self.url
        credentials = f"{self.user}:{self.password}"
        return f"postgresql+asyncpg://{credentials}@{self.host}:{self.port}/{self.db}"

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")
