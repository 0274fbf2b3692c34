"""
Module: settings.py
Description: Action configuration using pydantic-settings.

Loads the Zekt API endpoint and the delivery limits from environment
variables once per run. The endpoint is injected into the action's
environment at deployment time and is not a user-facing input.
Supports .env files for local runs.
"""

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from zekt_action.exceptions import ConfigurationError

MAX_PAYLOAD_SIZE_BYTES = 512 * 1024
# 80% of the maximum, truncated to whole bytes
PAYLOAD_SIZE_WARNING_THRESHOLD_BYTES = int(MAX_PAYLOAD_SIZE_BYTES * 0.8)


class LoggingSettings(BaseSettings):
    """Logging settings, readable before the rest of the configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="github",
        pattern=r"^(github|json)$",
        description="Log output format"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class Settings(LoggingSettings):
    """Action settings loaded from environment variables."""

    # Zekt API settings
    zekt_api_url: str = Field(
        ...,
        description="Base URL of the Zekt API"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="HTTP timeout in seconds for each registration attempt"
    )

    # Payload limits
    max_payload_size_bytes: int = Field(
        default=MAX_PAYLOAD_SIZE_BYTES,
        ge=1,
        description="Maximum payload size in bytes"
    )
    payload_size_warning_threshold_bytes: int = Field(
        default=PAYLOAD_SIZE_WARNING_THRESHOLD_BYTES,
        ge=0,
        description="Payload size above which a warning is emitted"
    )

    # Retry settings
    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Maximum number of delivery attempts, including the first"
    )
    retry_delay_ms: int = Field(
        default=1000,
        ge=0,
        description="Base delay before the first retry, doubled on each retry"
    )

    @field_validator('zekt_api_url')
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate the API URL is an HTTP/HTTPS URL."""
        v = v.strip()
        if not v.startswith(('http://', 'https://')):
            raise ValueError("ZEKT_API_URL must be a valid HTTP/HTTPS URL")
        return v


def load_settings(**overrides: Any) -> Settings:
    """
    Load settings from the environment.

    Keyword overrides take precedence over environment variables.

    Raises:
        ConfigurationError: If ZEKT_API_URL is not set or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = any(
            error["type"] == "missing" and error["loc"] == ("zekt_api_url",)
            for error in e.errors()
        )
        if missing:
            raise ConfigurationError(
                "ZEKT_API_URL environment variable is not set. "
                "This should be configured in the action repository during deployment."
            ) from e

        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid action configuration: {details}") from e
