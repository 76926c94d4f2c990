# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-portal"
    DEBUG: bool = False

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Database (connection settings live in portal_db.config) --
    DB_CREATE_SCHEMA: bool = Field(
        default=False,
        description="Run metadata.create_all on startup (local dev and demos).",
    )

    # -- Auth --
    AUTH_DISABLED: bool = Field(
        default=False,
        description="Bypass JWT validation. Set True for tests and local dev.",
    )
    AUTH_SECRET: str = Field(
        default="change-me",
        description="Shared secret used to verify HS256 session tokens.",
    )
    AUTH_ALGORITHM: str = "HS256"

    # -- Normalization --
    UNRECOGNIZED_CODE_POLICY: Literal["fallback", "flag"] = Field(
        default="fallback",
        description=(
            "How unmapped enumerated input is stored. 'fallback' uses the table's "
            "catch-all code; 'flag' stores 'Unrecognized' instead of 'Other'."
        ),
    )


settings = Settings()
