"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the errauditor and errorlysis commands.

    Values are read from ``ERRAUDITOR_*`` environment variables and from a
    ``.env`` file in the working directory. Command-line flags win over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRAUDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Regular expressions matched against the directory of every target.
    # From the environment this is a JSON list: ERRAUDITOR_EXCLUDE='["vendor"]'
    exclude: list[str] = []

    jobs: int = Field(default=1, ge=1)
    color: bool | None = None  # None: colored only when writing to a terminal
