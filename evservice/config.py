"""
Configuration settings for the EV Service Center client.
Uses Pydantic for type-safe configuration management.
"""
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_API_URL = "http://localhost:3000"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVSERVICE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "EV Service Center"
    app_version: str = "1.0.0"
    debug: bool = False
    production: bool = False
    log_level: str = "INFO"

    # API
    api_url: Optional[str] = None
    request_timeout: float = 10.0
    login_path: str = "/login"
    page_size: int = 20

    # Session
    token_file: Path = Path.home() / ".evservice" / "token"

    # Notifications
    error_throttle_seconds: float = 5.0

    @property
    def base_url(self) -> str:
        """
        Resolve the API base URL.

        An explicit api_url always wins, even when empty. Otherwise production
        talks to the same origin and development to the local backend.
        """
        if self.api_url is not None:
            return self.api_url.rstrip("/")
        return "" if self.production else DEV_API_URL


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
