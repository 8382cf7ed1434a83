"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

TotalsStrategy = Literal["recompute", "increment"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    openai_api_key: str
    openai_model: str = "gpt-4o"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    timezone: str = "UTC"
    history_window_days: int = 7
    totals_strategy: TotalsStrategy = "recompute"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
