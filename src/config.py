# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration."""

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings.

    Environment variables take precedence over the .env file.
    """

    app_name: str = "FloorOps Access Control"

    database_url: str = "sqlite:///./floorops.db"

    # Optional JSON file with a role -> permission tags mapping; the built-in
    # mapping is used when unset
    role_catalog_path: str | None = None

    # Add the demo team when the database holds no team members
    seed_demo_users: bool = True

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )


def configure_logging(app_settings: Settings) -> None:
    """Configure root logging from the settings."""
    numeric_level = getattr(logging, app_settings.log_level.upper(), None)
    if not isinstance(numeric_level, int):
        logging.basicConfig(level=logging.INFO)
        logger.warning(f"Invalid log level: {app_settings.log_level}, using INFO")
        return
    logging.basicConfig(level=numeric_level)


settings = Settings()
