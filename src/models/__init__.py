"""Data models module."""

from src.models.checker import CheckerExtension, ConfigurationSpec, DependencySpec
from src.models.java import JavaVersion, VersionTag

__all__ = [
    "CheckerExtension",
    "ConfigurationSpec",
    "DependencySpec",
    "JavaVersion",
    "VersionTag",
]
