"""Centralized configuration for descriptor chains using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local

The values here only seed defaults (log level, initial chain flags); a chain
never re-reads settings after construction.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    default_active : bool
        Initial `active` flag of new stateful chains; maps from
        `DESCRIPTOR_CHAIN_DEFAULT_ACTIVE`.
    default_enabled : bool
        Initial `enabled` flag of new stateful chains; maps from
        `DESCRIPTOR_CHAIN_DEFAULT_ENABLED`.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    default_active: bool = Field(default=True, alias="DESCRIPTOR_CHAIN_DEFAULT_ACTIVE")
    default_enabled: bool = Field(default=True, alias="DESCRIPTOR_CHAIN_DEFAULT_ENABLED")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "descriptor_chain") -> logging.Logger:
    """Return a process-global logger configured to the current `LOG_LEVEL`."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger


__all__ = ["Settings", "load_settings", "settings", "get_logger"]
