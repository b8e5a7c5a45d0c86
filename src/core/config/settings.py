"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.config.loader import ConfigLoader
from src.core.exceptions.errors import ConfigurationError

DEFAULT_SETTINGS_FILES = [
    Path("checker-plugin.local.yaml"),
    Path("checker-plugin.yaml"),
]


class CheckerSettings(BaseSettings):
    """Checker Framework artifact settings."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    group: str = Field(
        default="org.checkerframework",
        description="Maven group of the Checker Framework artifacts",
    )
    library_version: str = Field(
        default="latest.release",
        description="Version (or dynamic selector) of every Checker Framework artifact",
    )
    default_checkers: list[str] = Field(
        default_factory=list,
        description="Checkers enabled on a project unless its extension overrides them",
    )

    @field_validator("group", "library_version")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank coordinate segments."""
        v = v.strip()
        if not v or ":" in v:
            raise ValueError(f"Invalid coordinate segment: {v!r}")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKER_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="INFO",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CHECKER_PLUGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    checker: CheckerSettings = Field(default_factory=CheckerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.

        Raises:
            ConfigurationError: If the file is missing, malformed or invalid.
        """
        loader = ConfigLoader(path)
        loader.load()

        try:
            return cls(
                checker=CheckerSettings(**loader.get_section("checker")),
                logging=LoggingSettings(**loader.get_section("logging")),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings in {path}",
                config_key=str(path),
                details={"errors": e.errors(include_url=False)},
            ) from e

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from default locations.

        The first settings file found is used. Keys it sets take precedence
        over environment variables and .env; keys it leaves out are still
        read from the environment, then fall back to defaults.

        Returns:
            Settings instance.
        """
        for default_path in DEFAULT_SETTINGS_FILES:
            if default_path.exists():
                return cls.from_yaml(default_path)

        return cls()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings singleton.
    """
    return Settings.load()
