# backend/applicant_tracker/core/config.py
"""
Central config & environment helpers.
- Loads env (.env) early; real environment variables win over the file
- Exposes an immutable Settings value built once at startup and handed to
  the API, the server entrypoint and the seed command
"""

from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigError

# Load .env once for the whole app
load_dotenv(override=False)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# --- Defaults ---------------------------------------------------------------

DEFAULTS: dict = {
    "ENVIRONMENT": "development",
    "SERVICE_VERSION": "1.0.0",
    "DATABASE_URL": "sqlite:///./applicants.db",
    "DB_ECHO": "false",
    "SERVER_PORT": "8080",
    "CORS_ORIGINS": "*",
    "LOG_LEVEL": "INFO",
}


class Settings(BaseModel):
    """Runtime configuration. Frozen: build a new one instead of mutating."""

    model_config = ConfigDict(frozen=True)

    environment: str = DEFAULTS["ENVIRONMENT"]
    service_version: str = DEFAULTS["SERVICE_VERSION"]
    database_url: str = DEFAULTS["DATABASE_URL"]
    db_echo: bool = False
    server_port: int = Field(default=8080, ge=1, le=65535)
    cors_origins_raw: str = DEFAULTS["CORS_ORIGINS"]
    log_level: str = DEFAULTS["LOG_LEVEL"]

    @field_validator("database_url")
    @classmethod
    def database_url_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "DATABASE_URL is required"
            raise ValueError(msg)
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def cors_origins(self) -> List[str]:
        raw = self.cors_origins_raw.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from a mapping (default: os.environ)."""
        source = os.environ if env is None else env

        def _get(key: str) -> str:
            # unset falls back to the default; set-but-empty is validated as given
            return source.get(key, DEFAULTS[key]).strip()

        try:
            return cls(
                environment=_get("ENVIRONMENT"),
                service_version=_get("SERVICE_VERSION"),
                database_url=_get("DATABASE_URL"),
                db_echo=_get("DB_ECHO").lower() == "true",
                server_port=int(_get("SERVER_PORT")),
                cors_origins_raw=_get("CORS_ORIGINS"),
                log_level=_get("LOG_LEVEL"),
            )
        except ValueError as e:
            # pydantic's ValidationError is a ValueError, so is a bad int()
            raise ConfigError(f"invalid configuration: {e}") from e


def load_settings() -> Settings:
    """Settings from the process environment (plus .env). Raises ConfigError."""
    return Settings.from_env()


__all__ = ["Settings", "load_settings", "DEFAULTS"]
