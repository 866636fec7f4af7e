"""
Package settings for versionid.

Settings are loaded from environment variables and only drive the
logging setup; version parsing and encoding are not configurable.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


class VersionIdSettings(BaseSettings):
    """
    Settings loaded from environment variables.

    Environment Variables:
        VERSIONID_LOG_LEVEL: Level of the versionid logger (default: WARNING)
        VERSIONID_LOG_FORMAT: "console" for human-readable lines or "json"
            for structured records (default: console)
    """

    model_config = SettingsConfigDict(env_prefix="VERSIONID_", extra="ignore")

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(
        default="console",
        description="Log output format: console or json"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Valid levels: {', '.join(LOG_LEVELS)}"
            )
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Normalize and validate the log format name."""
        fmt = v.strip().lower()
        if fmt not in LOG_FORMATS:
            raise ValueError(
                f"Invalid log format '{v}'. Valid formats: {', '.join(LOG_FORMATS)}"
            )
        return fmt


@lru_cache()
def get_settings() -> VersionIdSettings:
    """
    Get cached settings instance.

    Call get_settings.cache_clear() after changing the environment.
    """
    return VersionIdSettings()
