"""
Logging Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class ReportingBackend(str, Enum):
    NONE = "none"
    GCLOUD = "gcloud"


class LoggingSettings(BaseSettings):
    """Console and crash-reporting sink configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SITELOG_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    console_enabled: bool = Field(default=True, description="Print log blocks to stdout")
    format: LogFormat = Field(default=LogFormat.CONSOLE, description="Console output format")
    color: Optional[bool] = Field(default=None, description="Force ANSI colors; unset means auto (TTY only)")
    root_marker: str = Field(default="src", description="Directory where source path breadcrumbs start")
    reporting: ReportingBackend = Field(default=ReportingBackend.NONE, description="Crash reporting backend")
    gcloud_project: Optional[str] = Field(default=None, description="GCP project ID for the gcloud backend")
    gcloud_log_name: str = Field(default="sitelog", description="Log name for the gcloud backend")
    service_name: str = Field(default="sitelog", description="Service name attached to reported errors")
