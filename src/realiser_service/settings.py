"""
Configuration settings for the realization service.

Environment variables:
    REALISER_HOST                 Wire server bind address
    REALISER_PORT                 Wire server port
    REALISER_MAX_WORKERS          Threads running the pipeline
    REALISER_MAX_REQUEST_BYTES    Largest accepted request payload
    REALISER_READ_TIMEOUT_S       Seconds to wait for a complete request
    REALISER_RECORDING_DIR        Default directory for request recordings
    REALISER_API_CORS_ORIGINS     Comma-separated origins allowed by the HTTP API
"""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from realiser_core.errors import ConfigurationError


class ServiceSettings(BaseSettings):
    """Service settings."""

    model_config = SettingsConfigDict(env_prefix="REALISER_", env_file=".env", extra="ignore")

    # Wire server
    host: str = "127.0.0.1"
    port: int = Field(default=50007, ge=0, le=65535)
    max_workers: int = Field(default=8, ge=1)
    max_request_bytes: int = Field(default=1024 * 1024, ge=1)
    read_timeout_s: float = Field(default=30.0, gt=0)

    # Request recording
    recording_dir: str | None = None

    # HTTP API
    api_cors_origins: str = "http://localhost:3000"

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.api_cors_origins.split(",") if origin.strip()]


# Global settings instance
_settings: ServiceSettings | None = None


def get_service_settings() -> ServiceSettings:
    """Get or create global service settings instance.

    Raises:
        ConfigurationError: if the environment holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = ServiceSettings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid service settings: {e}") from e
    return _settings
