"""Application settings and environment loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized application settings."""

    app_name: str = "Flow Coaching API"
    app_env: Literal["development", "test", "production"] = "development"
    app_debug: bool = False
    log_level: str = "INFO"
    secret_key: str = Field(
        default="change-me",
        validation_alias=AliasChoices("secret_key", "session_secret"),
    )

    database_url: str = "sqlite:///./flow_coaching.db"

    token_ttl_hours: int = 24

    recaptcha_secret_key: str | None = None
    recaptcha_min_score: float = 0.5
    verification_fail_open: bool = True

    resend_api_key: str | None = None
    resend_from_email: str = "Flow Coaching <bilgi@in-flowtr.com>"

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"

    http_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
