"""Exception definitions module."""

from src.core.exceptions.errors import (
    ArtifactResolutionError,
    BuildGraphError,
    CheckerPluginError,
    ConfigurationError,
    UnresolvedConfigurationError,
    UnsupportedVersionError,
)

__all__ = [
    "CheckerPluginError",
    "UnsupportedVersionError",
    "UnresolvedConfigurationError",
    "ConfigurationError",
    "BuildGraphError",
    "ArtifactResolutionError",
]
