"""
The leveled logging façade.

Each call renders its payload, attaches the call site and hands the result
to a structlog processor chain whose last step dispatches the record to the
console sink and the reporting sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import error_name, error_reason, info_summary, network_summary
from .paths import breadcrumb
from .records import CallSite, LogLevel, LogRecord, render_payload
from .sinks import BaseSink, NullReportingSink, ReportingSink

EnvironmentTag = str | Callable[[], str]


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


class LogFacade:
    """Call-site aware logger with ``info``, ``network`` and ``error`` levels.

    Args:
        console: Sink receiving the formatted blocks; ``None`` disables console output.
        reporter: Remote crash/error reporting sink; defaults to a no-op sink.
        root_marker: Directory name where source path breadcrumbs start.
        environment: Environment tag, or a callable returning it, used to name
            reported errors. Callables are resolved on every error call, after
            the console write; a failure there only skips the error report.
    """

    def __init__(
        self,
        console: BaseSink | None = None,
        reporter: ReportingSink | None = None,
        *,
        root_marker: str = "src",
        environment: EnvironmentTag = "development",
    ):
        self.console = console
        self.reporter = reporter or NullReportingSink()
        self.root_marker = root_marker
        self._environment = environment
        self._logger = structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[add_timestamp, self._build_record, self._dispatch],
            wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
            context_class=dict,
        )

    @property
    def environment(self) -> str:
        if callable(self._environment):
            return self._environment()
        return self._environment

    # =========================================================================
    # Public API
    # =========================================================================

    def info(self, payload: Any, *, site: CallSite | None = None, stacklevel: int = 1) -> None:
        """General purpose log: console block plus a line on the reporter's log channel."""
        site = site or CallSite.capture(stacklevel)
        self._logger.info(LogLevel.INFO.value, payload=payload, site=site, level=LogLevel.INFO)

    def network(
        self,
        payload: Any,
        *,
        site: CallSite | None = None,
        print_to_console: bool = False,
        report_as_error: bool = False,
        end: str = "\n",
        stacklevel: int = 1,
    ) -> None:
        """Network traffic log.

        Always relayed to the reporter's log channel. Printed only when
        ``print_to_console`` is set; ``report_as_error`` also runs :meth:`error`
        for the same payload and call site.
        """
        site = site or CallSite.capture(stacklevel)
        self._logger.info(
            LogLevel.NETWORK.value,
            payload=payload,
            site=site,
            level=LogLevel.NETWORK,
            console=print_to_console,
            end=end,
        )
        if report_as_error:
            self.error(payload, site=site)

    def error(self, payload: Any, *, site: CallSite | None = None, stacklevel: int = 1) -> None:
        """Error log: console block plus an exception record on the reporter."""
        site = site or CallSite.capture(stacklevel)
        self._logger.error(LogLevel.ERROR.value, payload=payload, site=site, level=LogLevel.ERROR)

    def close(self) -> None:
        if self.console is not None:
            self.console.close()
        self.reporter.close()

    # =========================================================================
    # Processors
    # =========================================================================

    def _build_record(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        site: CallSite = event_dict.pop("site")
        event_dict["record"] = LogRecord(
            level=event_dict.pop("level"),
            message=render_payload(event_dict.pop("payload")),
            site=site,
            breadcrumb=breadcrumb(site.file, self.root_marker),
            timestamp=event_dict.pop("timestamp"),
        )
        return event_dict

    def _dispatch(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        record: LogRecord = event_dict["record"]

        if self.console is not None and event_dict.get("console", True):
            try:
                self.console.emit(record, end=event_dict.get("end", "\n"))
            except Exception:
                pass  # Fail silently to avoid breaking the application

        try:
            if record.level is LogLevel.ERROR:
                self.reporter.record_exception(error_name(self.environment), error_reason(record))
            elif record.level is LogLevel.NETWORK:
                self.reporter.log_message(network_summary(record))
            else:
                self.reporter.log_message(info_summary(record))
        except Exception:
            pass  # Reporting is best-effort
        return ""
