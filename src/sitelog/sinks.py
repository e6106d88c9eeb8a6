"""
Log sink abstractions and concrete implementations.

Two kinds of sink receive a record:
- console sinks (BaseSink): render and print the full block
- reporting sinks (ReportingSink): relay summaries to a remote crash/error backend
"""

from __future__ import annotations

import logging
import sys
import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Literal

import orjson

from .formatters import ConsoleFormatter
from .records import LogRecord

if TYPE_CHECKING:
    from google.cloud.logging import Client as GCloudLoggingClient
    from google.cloud.logging.handlers.transports import BackgroundThreadTransport

LogFormat = Literal["console", "json"]

REPORTED_ERROR_EVENT_TYPE = "type.googleapis.com/google.devtools.clouderrorreporting.v1beta1.ReportedErrorEvent"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


# =============================================================================
# Console Sinks
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for console sinks."""

    @abstractmethod
    def emit(self, record: LogRecord, *, end: str = "\n") -> None:
        """Emit a log record to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard I/O sink with configurable format.

    Args:
        fmt: Output format - "console" (delimited block) or "json" (one line per record)
        stream: Output stream (default: stdout)
        color: Force ANSI colors on or off; ``None`` colors only when the stream is a TTY
    """

    _write_lock = threading.Lock()

    def __init__(self, fmt: LogFormat = "console", stream: Any = None, color: bool | None = None):
        self._fmt = fmt
        self._stream = stream or sys.stdout
        self._color = color

    def _use_color(self) -> bool:
        if self._color is not None:
            return self._color
        return bool(getattr(self._stream, "isatty", lambda: False)())

    def emit(self, record: LogRecord, *, end: str = "\n") -> None:
        if self._fmt == "json":
            output = orjson_dumps(record.to_dict())
            end = "\n"
        else:
            output = ConsoleFormatter.format(record, use_color=self._use_color())

        # One write per record so concurrent blocks never interleave.
        with self._write_lock:
            self._stream.write(output + end)
            self._stream.flush()

    def close(self) -> None:
        pass


# =============================================================================
# Reporting Sinks
# =============================================================================


class ReportingSink(ABC):
    """Abstract base class for remote crash/error reporting backends."""

    @abstractmethod
    def log_message(self, text: str) -> None:
        """Append a breadcrumb line to the backend's log channel."""
        ...

    @abstractmethod
    def record_exception(self, name: str, reason: str) -> None:
        """Record an actionable, non-fatal error event."""
        ...

    def close(self) -> None:
        pass


class NullReportingSink(ReportingSink):
    """Reporting disabled."""

    def log_message(self, text: str) -> None:
        pass

    def record_exception(self, name: str, reason: str) -> None:
        pass


class GCloudReportingSink(ReportingSink):
    """Google Cloud Logging backend.

    Entries are queued on the library's background-thread transport, so
    neither channel waits on the network. Error events are written as
    ``ReportedErrorEvent`` entries so that Cloud Error Reporting groups them
    as errors rather than plain log lines.
    """

    def __init__(self, project_id: str | None = None, log_name: str = "sitelog", service: str = "sitelog"):
        self._log_name = log_name
        self._service = service
        self._client: GCloudLoggingClient | None = None
        self._transport: BackgroundThreadTransport | None = None
        try:
            from google.cloud import logging as gcloud_logging
            from google.cloud.logging.handlers.transports import BackgroundThreadTransport

            self._client = gcloud_logging.Client(project=project_id)
            self._transport = BackgroundThreadTransport(self._client, log_name)
            self._available = True
        except Exception:
            self._available = False

    @property
    def available(self) -> bool:
        return self._available

    def _enqueue(self, level: int, message: str | dict[str, Any]) -> None:
        if not self._available or not self._transport:
            return
        record = logging.makeLogRecord(
            {"name": self._log_name, "levelno": level, "levelname": logging.getLevelName(level)}
        )
        self._transport.send(record, message)

    def log_message(self, text: str) -> None:
        self._enqueue(logging.INFO, text)

    def record_exception(self, name: str, reason: str) -> None:
        self._enqueue(
            logging.ERROR,
            {
                "@type": REPORTED_ERROR_EVENT_TYPE,
                "message": f"{name}: {reason}",
                "serviceContext": {"service": self._service},
            },
        )

    def close(self) -> None:
        if not self._available:
            return
        if self._transport:
            self._transport.flush()
        if self._client:
            self._client.close()
