"""
sitelog Configuration Module.

Implements the Nested Settings Pattern: each sub-module is an independent
concern with its own environment variable prefix.

Multi-Environment Support:
    Set `SITELOG_ENV` to one of: debug, development, testing, staging, production
    The system will load .env files in this order (later overrides earlier):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from sitelog.config import settings

    settings.environment.env  # "development"
    settings.logging.root_marker  # "src"
"""

from functools import cached_property
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import EnvironmentSettings
from .logging import LogFormat, LoggingSettings, ReportingBackend


def _get_env_files() -> tuple[str, ...]:
    """
    Determine which .env files to load based on SITELOG_ENV.

    This function is called at module import time to configure the Settings class.
    """
    env = os.getenv("SITELOG_ENV", "development")
    return (
        ".env",
        ".env.local",
        f".env.{env}",
        f".env.{env}.local",
    )


class Settings(BaseSettings):
    """Composite settings aggregating the configuration domains."""

    model_config = SettingsConfigDict(
        env_file=_get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def environment(self) -> EnvironmentSettings:
        return EnvironmentSettings()

    @cached_property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "EnvironmentSettings",
    "LoggingSettings",
    "LogFormat",
    "ReportingBackend",
]
