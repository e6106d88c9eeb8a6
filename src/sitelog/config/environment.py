"""
Environment Configuration.

The environment is determined by the `SITELOG_ENV` environment variable and is
the tag attached to reported errors ("log error at <env>").
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["debug", "development", "testing", "staging", "production"]


class EnvironmentSettings(BaseSettings):
    """
    Environment detection and configuration.

    Reads `SITELOG_ENV` from the process environment or `.env`. The composite
    `Settings` uses the same variable to pick its `.env.{environment}` files.
    """

    model_config = SettingsConfigDict(
        env_prefix="SITELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Environment = Field(
        default="development",
        description="Current environment (debug, development, testing, staging, production)",
    )

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def debug(self) -> bool:
        """Debug mode is enabled in non-production environments by default."""
        return self.env != "production"
