"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    auth_delay_seconds: float = 1.5
    profile_delay_seconds: float = 1.0
    upload_tick_seconds: float = 0.3
    upload_base_url: str = "https://cdn.pixnode.example.com/uploads"
    demo_photographer_id: str = "user-1"
    demo_client_id: str = "user-2"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
