"""Configuration settings for the HTTP request client."""
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from http_request.debug import DebugLevel


class Settings(BaseSettings):
    """Library settings, overridable through HTTP_REQUEST_* variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HTTP_REQUEST_",
        extra="ignore",
    )

    # Application
    app_name: str = "http-request"
    app_version: str = "1.0.0"
    log_level: str = "INFO"
    log_json: bool = True

    # Client defaults
    default_timeout: float = 4.0  # seconds
    default_debug_level: DebugLevel = DebugLevel.MIN
    default_max_attempts: int = 1

    # Retry
    retry_delay: float = 2.0  # seconds between attempts

    @field_validator("default_debug_level", mode="before")
    @classmethod
    def _debug_level_upper(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


settings = Settings()
