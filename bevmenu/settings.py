"""
Menu Configuration

Loaded from environment variables (prefix ``BEVMENU_``) or a ``.env`` file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class MenuSettings(BaseSettings):
    """Menu engine settings loaded from environment."""

    # Availability flag value that marks a serving as orderable
    valid_availability_value: str = "✅ Valid"
    show_only_available: bool = False

    # Location id, number or slug rendered when none is requested
    default_location: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_format: str = LOG_FORMAT

    class Config:
        env_prefix = "BEVMENU_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> MenuSettings:
    """Get cached settings instance."""
    return MenuSettings()


def configure_logging(settings: MenuSettings = None):
    """Configure root logging and the bevmenu logger level from settings."""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=settings.log_format)
    logging.getLogger("bevmenu").setLevel(level)
