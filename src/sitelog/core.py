"""
Process-wide logging configuration and module-level entry points.
"""

from __future__ import annotations

import sys
from typing import Any

from .config import ReportingBackend, settings
from .facade import EnvironmentTag, LogFacade
from .records import CallSite
from .sinks import BaseSink, GCloudReportingSink, LogFormat, NullReportingSink, ReportingSink, StdioSink

# =============================================================================
# Global State
# =============================================================================

_facade: LogFacade | None = None


def _current_environment() -> str:
    return settings.environment.env


def _build_reporter(backend: str, gcloud_project: str | None, gcloud_log_name: str, service: str) -> ReportingSink:
    if backend == ReportingBackend.GCLOUD.value:
        return GCloudReportingSink(project_id=gcloud_project, log_name=gcloud_log_name, service=service)
    return NullReportingSink()


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_logging(
    *,
    console: BaseSink | None | bool = True,
    reporter: ReportingSink | None = None,
    fmt: str | None = None,
    root_marker: str | None = None,
    environment: EnvironmentTag | None = None,
    gcloud_project: str | None = None,
    gcloud_log_name: str | None = None,
) -> LogFacade:
    """
    Configure the process-wide logging façade.

    Arguments left unset fall back to ``settings.logging``.

    Args:
        console: A console sink, ``True`` for stdout (honouring settings), or ``False``/``None`` to disable
        reporter: Reporting sink; built from ``settings.logging.reporting`` when omitted
        fmt: Output format for the stdout sink (console, json)
        root_marker: Directory name where breadcrumbs start
        environment: Environment tag or callable; defaults to ``settings.environment.env``,
            validated here and read again on every error call
        gcloud_project: GCP project ID for the gcloud backend
        gcloud_log_name: Log name for the gcloud backend
    """
    global _facade

    log_settings = settings.logging
    if environment is None:
        # Invalid SITELOG_ENV fails here, not in the first logging call.
        _current_environment()

    if _facade is not None:
        _facade.close()

    if console is True:
        if log_settings.console_enabled:
            log_format: LogFormat = "json" if (fmt or log_settings.format.value).lower() == "json" else "console"
            console = StdioSink(fmt=log_format, stream=sys.stdout, color=log_settings.color)
        else:
            console = None
    elif console is False:
        console = None

    if reporter is None:
        reporter = _build_reporter(
            log_settings.reporting.value,
            gcloud_project or log_settings.gcloud_project,
            gcloud_log_name or log_settings.gcloud_log_name,
            log_settings.service_name,
        )

    _facade = LogFacade(
        console=console,
        reporter=reporter,
        root_marker=root_marker or log_settings.root_marker,
        environment=environment or _current_environment,
    )
    return _facade


def get_facade() -> LogFacade:
    """Get the process-wide façade, configuring it from settings on first use."""
    if _facade is None:
        return configure_logging()
    return _facade


def reset_logging() -> None:
    """Close the configured sinks and forget the process-wide façade."""
    global _facade

    if _facade is not None:
        _facade.close()
    _facade = None


# =============================================================================
# Module-level Entry Points
# =============================================================================


def info(payload: Any, *, site: CallSite | None = None, stacklevel: int = 1) -> None:
    get_facade().info(payload, site=site, stacklevel=stacklevel + 1)


def network(
    payload: Any,
    *,
    site: CallSite | None = None,
    print_to_console: bool = False,
    report_as_error: bool = False,
    end: str = "\n",
    stacklevel: int = 1,
) -> None:
    get_facade().network(
        payload,
        site=site,
        print_to_console=print_to_console,
        report_as_error=report_as_error,
        end=end,
        stacklevel=stacklevel + 1,
    )


def error(payload: Any, *, site: CallSite | None = None, stacklevel: int = 1) -> None:
    get_facade().error(payload, site=site, stacklevel=stacklevel + 1)
