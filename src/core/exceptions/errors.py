"""Custom exception definitions for the Checker Framework build plugin."""

from typing import Any


class CheckerPluginError(Exception):
    """Base exception for all plugin errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class UnsupportedVersionError(CheckerPluginError):
    """Raised when a project targets a Java version without an annotated JDK."""

    def __init__(
        self,
        message: str,
        version: str | None = None,
        project: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unsupported version error.

        Args:
            message: Error message.
            version: The detected source-compatibility version.
            project: Name of the project being configured.
            details: Additional error details.
        """
        details = details or {}
        if version:
            details["version"] = version
        if project:
            details["project"] = project
        super().__init__(message, details)
        self.version = version


class UnresolvedConfigurationError(CheckerPluginError):
    """Raised when a configuration classpath cannot be resolved."""

    def __init__(
        self,
        message: str,
        configuration: str | None = None,
        project: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unresolved configuration error.

        Args:
            message: Error message.
            configuration: Name of the configuration that failed to resolve.
            project: Name of the owning project.
            details: Additional error details.
        """
        details = details or {}
        if configuration:
            details["configuration"] = configuration
        if project:
            details["project"] = project
        super().__init__(message, details)
        self.configuration = configuration


class ConfigurationError(CheckerPluginError):
    """Exception raised for settings and build description errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class BuildGraphError(CheckerPluginError):
    """Exception raised for invalid operations on the build graph."""


class ArtifactResolutionError(BuildGraphError):
    """Exception raised when a dependency coordinate cannot be resolved to files."""

    def __init__(
        self,
        message: str,
        coordinate: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize artifact resolution error.

        Args:
            message: Error message.
            coordinate: Dependency coordinate that failed to resolve.
            details: Additional error details.
        """
        details = details or {}
        if coordinate:
            details["coordinate"] = coordinate
        super().__init__(message, details)
        self.coordinate = coordinate
