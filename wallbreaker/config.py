"""
Configuration management for Wallbreaker.
Uses pydantic-settings for environment variable parsing.
"""

import logging
from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import SHORT_PAUSE, COLLAPSE_DELAY


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    # Pacing
    short_pause_seconds: float = Field(
        default=SHORT_PAUSE,
        ge=0,
        description="Pause after an attack resolves, before the turn advances"
    )
    collapse_delay_seconds: float = Field(
        default=COLLAPSE_DELAY,
        ge=0,
        description="Pause between wall collapse and the level-complete callback"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Level for the wallbreaker logger hierarchy"
    )

    class Config:
        env_prefix = "WALLBREAKER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Pass an explicit Settings to BattleSimulator to override.
    """
    return Settings()


def configure_logging(settings: Settings = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    settings = settings or get_settings()
    package_logger = logging.getLogger("wallbreaker")
    package_logger.setLevel(settings.log_level.upper())
    return package_logger
