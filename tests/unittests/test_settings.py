"""ABOUTME: Tests for settings and logging initialization.
ABOUTME: Verifies environment overrides, config paths and logging level overrides."""

import logging
from pathlib import Path

import pytest

from halfdozen.logs import init_logging
from halfdozen.settings import Settings, settings


class TestSettings:
    """Tests for the Settings class."""

    def test_config_paths(self) -> None:
        """Config files live in the configs directory of the project."""
        assert settings.configs_dir == settings.PROJECT_ROOT / "configs"
        assert settings.logging_config_path.exists()
        assert settings.example_roster_path.exists()

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The default generation can be set from the environment."""
        monkeypatch.setenv("HALFDOZEN_DEFAULT_GENERATION", "4")
        assert Settings().DEFAULT_GENERATION == 4


class TestInitLogging:
    """Tests for init_logging."""

    def test_applies_config(self) -> None:
        """The shipped config sets the package logger level."""
        config = init_logging(settings.logging_config_path)
        assert config["loggers"]["halfdozen"]["level"] == "WARNING"
        assert logging.getLogger("halfdozen").level == logging.WARNING

    def test_level_override(self, tmp_path: Path) -> None:
        """An explicit level overrides root and configured loggers."""
        path = tmp_path / "logging.yml"
        path.write_text(settings.logging_config_path.read_text(encoding="utf-8"), encoding="utf-8")

        config = init_logging(path, level="DEBUG")

        assert config["root"]["level"] == "DEBUG"
        assert logging.getLogger("halfdozen").level == logging.DEBUG
        init_logging(settings.logging_config_path)
