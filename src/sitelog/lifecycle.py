"""
View lifecycle logging.

The host UI toolkit calls :meth:`ViewLogger.on_appear` and
:meth:`ViewLogger.on_disappear` from its own show/hide hooks.
"""

from __future__ import annotations

from types import TracebackType

from .core import get_facade
from .facade import LogFacade
from .paths import leaf_name
from .records import CallSite


class ViewLogger:
    """Logs OPENED/CLOSED for a view, attributed to the place the logger was attached."""

    def __init__(self, facade: LogFacade, site: CallSite):
        self.facade = facade
        self.site = site
        self.label = leaf_name(site.file)

    def on_appear(self) -> None:
        self.facade.info(f"{self.label} OPENED>>>", site=self.site)

    def on_disappear(self) -> None:
        self.facade.info(f"{self.label} CLOSED<<<", site=self.site)

    def __enter__(self) -> ViewLogger:
        self.on_appear()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.on_disappear()


def log_view_lifecycle(facade: LogFacade | None = None, *, stacklevel: int = 1) -> ViewLogger:
    """Create a :class:`ViewLogger` for the calling view.

    The call site is captured here, so attach it where the view is built.
    Without an explicit ``facade`` the process-wide one is used.
    """
    if facade is None:
        facade = get_facade()
    return ViewLogger(facade, CallSite.capture(stacklevel))
