"""Configuration package."""

from deskapps.config.logging import configure_logging, get_logger
from deskapps.config.settings import Settings, settings

__all__ = ["settings", "Settings", "configure_logging", "get_logger"]
