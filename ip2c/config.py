"""
IP2C — Configuration via Pydantic Settings.

All settings are loaded from environment variables or .env file.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client-wide settings loaded from env / .env."""

    # ── Service ──────────────────────────────────────────────
    base_url: str = Field(
        default="https://ip2c.org",
        description="Base URL of the IP2C lookup service",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Timeout in seconds for the default HTTP client (None = no timeout)",
    )

    # ── Logging ──────────────────────────────────────────────
    log_level: str = "warning"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"debug", "info", "warning", "error", "critical"}
        if v.lower() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.lower()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    model_config = {
        "env_prefix": "IP2C_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton
settings = Settings()
