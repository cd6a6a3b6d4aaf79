"""Centralized configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings from RICHERR_* environment variables.

    All fields are optional with sensible defaults.
    Validation occurs on first get_settings() call.
    """

    model_config = SettingsConfigDict(
        env_prefix="RICHERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Maximum frames captured per stack trace
    stack_depth: int = 32

    sender_thread_name: str = "richerr-send"
    log_level: str = "INFO"

    @field_validator("stack_depth")
    @classmethod
    def validate_stack_depth(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Invalid stack_depth {v}. Must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {', '.join(sorted(valid_levels))}")
        return upper

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "stack_depth": self.stack_depth,
            "sender_thread_name": self.sender_thread_name,
            "log_level": self.log_level,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached Settings singleton.

    The cache ensures only one Settings instance exists per process.

    For testing: override with get_settings.cache_clear() then set env vars.
    """
    return Settings()
