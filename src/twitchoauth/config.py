# Settings - credentials and logging options from the environment.
# Created: 2026-10-18

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from ``TWITCHOAUTH_*`` env vars or a .env file.

    The authorization server URLs are fixed and not part of the settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="TWITCHOAUTH_",
        env_file=".env",
        extra="ignore",
        hide_input_in_errors=True,
    )

    client_id: str | None = None
    client_secret: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
