# querykit/config.py
"""
Application configuration.
Defaults for the HTTP and CLI surfaces, loaded from environment variables or .env.
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

VERSION = "0.1.0"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """App settings. Priority: explicit values > environment variables > .env file."""

    # Query building defaults
    pair_separator: str = "&"
    key_value_separator: str = "="
    include_prefix: bool = True

    # App
    app_title: str = "QueryKit"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "QUERYKIT_"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            logger.warning(f"Unknown log level '{value}', falling back to INFO")
            return "INFO"
        return level


settings = Settings()
