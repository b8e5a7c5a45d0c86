"""Configuration management for the Checker Framework build plugin."""

from src.core.config.loader import ConfigLoader
from src.core.config.settings import (
    CheckerSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "CheckerSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
