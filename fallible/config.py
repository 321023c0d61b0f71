"""Logging configuration loaded from the environment."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fallible.logging_config import setup_logging


class Settings(BaseSettings):
    """Settings loaded from FALLIBLE_* environment variables."""

    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def setup_logging_from_settings(settings: Settings | None = None) -> Settings:
    """Configure logging from settings (read from the environment if omitted)."""
    settings = settings or Settings()
    setup_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    return settings
