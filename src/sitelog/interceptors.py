"""
Interceptors for routing standard library logging through the façade.
"""

import logging
from typing import Iterable, Optional

from .core import get_facade
from .facade import LogFacade
from .records import CallSite


class SiteLogHandler(logging.Handler):
    """
    Forward standard library log records to the façade.

    The record's own pathname, function and line become the call site, so
    third-party logs keep their origin instead of pointing at this handler.
    ERROR and above go to ``error``; everything else to ``info``.
    """

    def __init__(self, facade: Optional[LogFacade] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._facade = facade

    @property
    def facade(self) -> LogFacade:
        return self._facade or get_facade()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            site = CallSite(file=record.pathname, function=record.funcName, line=record.lineno)
            if record.levelno >= logging.ERROR:
                self.facade.error(msg, site=site)
            else:
                self.facade.info(msg, site=site)
        except Exception:
            self.handleError(record)


def intercept_loggers(names: Iterable[str], facade: Optional[LogFacade] = None) -> SiteLogHandler:
    """Attach a :class:`SiteLogHandler` to each named logger and stop propagation."""
    handler = SiteLogHandler(facade)
    for name in names:
        lg = logging.getLogger(name)
        lg.handlers = [h for h in lg.handlers if not isinstance(h, SiteLogHandler)]
        lg.addHandler(handler)
        lg.propagate = False
    return handler
