"""Configuration management using Pydantic Settings."""

import logging
import sys
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from ``LTTB_*`` environment variables."""

    # Default target size when callers don't pass one
    default_max_points: int = Field(default=2000, ge=3)

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="LTTB_",
        extra="ignore",
    )


# Global settings instance
settings = Settings()

_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Level name such as "DEBUG"; defaults to ``settings.log_level``
        fmt: Log record format; defaults to ``settings.log_format``

    Returns:
        The configured ``lttb`` logger
    """
    global _handler

    level_name = level or settings.log_level
    formatter = logging.Formatter(fmt or settings.log_format)

    logger = logging.getLogger("lttb")
    logger.setLevel(getattr(logging, level_name.upper(), logging.INFO))

    # Replace the handler from a previous call
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)
    logger.addHandler(_handler)

    return logger
