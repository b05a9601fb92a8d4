"""
Session cookie configuration settings.

Dependencies: pydantic_settings
System role: Server-side session and cookie policy
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mentorhub.configs.base import ENV_FILE_CONFIG


class SessionSettings(BaseSettings):
    """Settings for server-side sessions and the session cookie."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="SESSION_")

    cookie_name: str = Field(
        default="MENTORHUB_SESSION",
        description="Name of the cookie carrying the session token",
    )
    max_age_seconds: int = Field(
        default=100_000,
        gt=0,
        description="Fixed session lifetime from creation (not sliding)",
    )
    same_site: Literal["lax", "strict", "none"] = Field(
        default="lax",
        description="SameSite attribute of the session cookie",
    )
    login_page: str = Field(
        default="/login.html",
        description="Where unauthenticated page requests are redirected",
    )
