# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for application settings."""

import logging

from src.config import Settings, configure_logging


class TestSettings:
    """Tests for settings loading."""

    def test_environment_overrides(self, monkeypatch):
        """Test that environment variables override the defaults."""
        monkeypatch.setenv("ROLE_CATALOG_PATH", "/etc/floorops/roles.json")
        monkeypatch.setenv("SEED_DEMO_USERS", "false")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings()

        assert settings.role_catalog_path == "/etc/floorops/roles.json"
        assert settings.seed_demo_users is False
        assert settings.log_level == "DEBUG"

    def test_catalog_path_defaults_to_built_in(self, monkeypatch):
        """Test that no catalog path is set by default."""
        monkeypatch.delenv("ROLE_CATALOG_PATH", raising=False)
        assert Settings().role_catalog_path is None


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_invalid_level_warns(self, monkeypatch, caplog):
        """Test that an invalid log level falls back with a warning."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with caplog.at_level(logging.WARNING):
            configure_logging(Settings())

        assert "Invalid log level: chatty" in caplog.text
