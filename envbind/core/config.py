"""Library configuration using Pydantic v2 Settings.

These settings control envbind itself (the metadata key it reads
tags from and how it logs). They are read from ``ENVBIND_*``
environment variables.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """envbind settings loaded from environment variables.

    All settings have defaults and can be overridden with variables
    such as ``ENVBIND_TAG_NAME`` or ``ENVBIND_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVBIND_",
        case_sensitive=False,
        extra="ignore",
    )

    tag_name: str = Field(
        default="conf",
        min_length=1,
        description="Dataclass field metadata key holding the env tag.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_json: bool = Field(
        default=False,
        description="Render log records as JSON instead of console lines.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
    logger.debug("envbind settings cache cleared")
