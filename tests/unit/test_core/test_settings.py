"""Tests for settings, the YAML loader and the error hierarchy."""

from pathlib import Path

import pytest

from src.core.config.loader import ConfigLoader
from src.core.config.settings import CheckerSettings, LoggingSettings, Settings
from src.core.exceptions.errors import (
    CheckerPluginError,
    ConfigurationError,
    UnresolvedConfigurationError,
    UnsupportedVersionError,
)


class TestCheckerSettings:
    """Tests for CheckerSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default coordinates."""
        monkeypatch.delenv("CHECKER_LIBRARY_VERSION", raising=False)
        settings = CheckerSettings()

        assert settings.group == "org.checkerframework"
        assert settings.library_version == "latest.release"
        assert settings.default_checkers == []

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables override defaults."""
        monkeypatch.setenv("CHECKER_LIBRARY_VERSION", "2.5.0")

        assert CheckerSettings().library_version == "2.5.0"

    @pytest.mark.parametrize("value", ["", "  ", "1:2"])
    def test_invalid_version(self, value: str) -> None:
        """Test blank or colon-containing segments are rejected."""
        with pytest.raises(ValueError):
            CheckerSettings(library_version=value)


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_level_normalized(self) -> None:
        """Test log levels are upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test unknown levels are rejected."""
        with pytest.raises(ValueError):
            LoggingSettings(level="verbose")


class TestSettingsFromYaml:
    """Tests for Settings.from_yaml."""

    def test_sections(self, tmp_path: Path) -> None:
        """Test checker and logging sections are read."""
        path = tmp_path / "checker-plugin.yaml"
        path.write_text(
            "checker:\n"
            "  library_version: 2.4.0\n"
            "  default_checkers: [org.foo.Checker]\n"
            "logging:\n"
            "  level: warning\n",
            encoding="utf-8",
        )

        settings = Settings.from_yaml(path)

        assert settings.checker.library_version == "2.4.0"
        assert settings.checker.default_checkers == ["org.foo.Checker"]
        assert settings.logging.level == "WARNING"

    def test_file_over_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test keys set in the file win; other keys still come from the environment."""
        monkeypatch.setenv("CHECKER_LIBRARY_VERSION", "2.5.0")
        monkeypatch.setenv("CHECKER_GROUP", "org.example")
        path = tmp_path / "checker-plugin.yaml"
        path.write_text("checker:\n  library_version: 2.4.0\n", encoding="utf-8")

        settings = Settings.from_yaml(path)

        assert settings.checker.library_version == "2.4.0"
        assert settings.checker.group == "org.example"

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test validation errors become ConfigurationError."""
        path = tmp_path / "checker-plugin.yaml"
        path.write_text("logging:\n  level: loud\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            Settings.from_yaml(path)


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_sections(self, tmp_path: Path) -> None:
        """Test section lookups."""
        path = tmp_path / "config.yaml"
        path.write_text("checker:\n  group: org.example\nlogging: off\n", encoding="utf-8")
        loader = ConfigLoader(path)
        loader.load()

        assert loader.get_section("checker") == {"group": "org.example"}
        assert loader.get_section("logging") == {}
        assert loader.get_section("missing") == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader(tmp_path / "nope.yaml").load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("checker: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader(path).load()

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader(path).load()

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader(path).load() == {}


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_details_in_str(self) -> None:
        """Test details are appended to the message."""
        error = UnsupportedVersionError("Unsupported", version="11", project="app")

        assert isinstance(error, CheckerPluginError)
        assert str(error) == "Unsupported - Details: {'version': '11', 'project': 'app'}"

    def test_plain_message(self) -> None:
        """Test errors without details print the message only."""
        assert str(CheckerPluginError("boom")) == "boom"

    def test_unresolved_configuration(self) -> None:
        """Test the configuration name is kept."""
        error = UnresolvedConfigurationError("Could not resolve", configuration="checkerFrameworkJavac")

        assert error.configuration == "checkerFrameworkJavac"
        assert error.details == {"configuration": "checkerFrameworkJavac"}
