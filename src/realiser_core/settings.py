"""
Configuration settings for the realization pipeline.

Environment variables:
    REALISER_COMMA_SEP_PREMODIFIERS   Separate coordinated premodifiers with commas
    REALISER_COMMA_SEP_CUEPHRASE      Put a comma after cue phrases and front modifiers
    REALISER_FORMATTER                Default renderer: text, html or none
    REALISER_DEBUG                    Capture tree dumps after every stage
    REALISER_DEFAULT_CONJUNCTION      Conjunction used by aggregation rules
"""

from __future__ import annotations

from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from realiser_core.errors import ConfigurationError

FormatterName = Literal["text", "html", "none"]


class Settings(BaseSettings):
    """Pipeline settings."""

    model_config = SettingsConfigDict(env_prefix="REALISER_", env_file=".env", extra="ignore")

    # Orthography options
    comma_sep_premodifiers: bool = True
    comma_sep_cuephrase: bool = False

    # Pipeline options
    formatter: FormatterName = "text"
    debug: bool = False

    # Aggregation options
    default_conjunction: str = "and"


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance.

    Raises:
        ConfigurationError: if the environment holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid realiser settings: {e}") from e
    return _settings


def reset_settings() -> None:
    """Forget the global instance so the next call re-reads the environment."""
    global _settings
    _settings = None
