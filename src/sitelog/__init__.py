"""
Call-site aware logging for application UI layers.

Provides three leveled entry points over two kinds of sink:
- info: console block + crash-reporter log line
- network: crash-reporter log line, console block on request, optional escalation to error
- error: console block + crash-reporter error event

Design Pattern: Strategy Pattern for sink abstraction.
Library: structlog processors + orjson for payload and JSON rendering.
"""

from .core import configure_logging, error, get_facade, info, network, reset_logging
from .facade import LogFacade
from .lifecycle import ViewLogger, log_view_lifecycle
from .paths import breadcrumb
from .records import CallSite, LogLevel, LogRecord

__all__ = [
    "CallSite",
    "LogFacade",
    "LogLevel",
    "LogRecord",
    "ViewLogger",
    "breadcrumb",
    "configure_logging",
    "error",
    "get_facade",
    "info",
    "log_view_lifecycle",
    "network",
    "reset_logging",
]
