"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for hosts embedding the ASE linter.

    Values are read from ``ASELINT_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASELINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Rule table: packaged defaults unless a YAML file is given
    rules_file: Path | None = None
    enabled_rules: list[str] | None = None  # None runs every default rule family
    max_lines_override: dict[str, int] = {}  # e.g. {"spacing": 500}

    show_banner: bool = False


def configure_logging(settings: Settings | None = None) -> None:
    """Set up root logging for a host process at ``settings.log_level``."""
    if settings is None:
        settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
