"""
Log record types and call-site capture.
"""

from __future__ import annotations

import dataclasses
import itertools
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import CodeType
from typing import Any

import orjson


class LogLevel(str, Enum):
    INFO = "info"
    NETWORK = "network"
    ERROR = "error"


@dataclass(frozen=True)
class CallSite:
    """Where a logging call originated.

    Build one explicitly, or use :meth:`capture` from the function that is
    the public entry point of a logging call.
    """

    file: str
    function: str
    line: int
    column: int | None = None

    @classmethod
    def capture(cls, stacklevel: int = 1) -> CallSite:
        """Capture the call site ``stacklevel`` frames above the caller of ``capture``.

        ``stacklevel=1`` is the function that called the function calling
        ``capture``, matching the ``stacklevel`` convention of :mod:`logging`.
        """
        frame = sys._getframe(stacklevel + 1)
        code = frame.f_code
        return cls(
            file=code.co_filename,
            function=getattr(code, "co_qualname", code.co_name),
            line=frame.f_lineno,
            column=_column_of(code, frame.f_lasti),
        )


def _column_of(code: CodeType, instruction_offset: int) -> int | None:
    positions = getattr(code, "co_positions", None)
    if positions is None or instruction_offset < 0:
        return None
    try:
        _, _, col_offset, _ = next(itertools.islice(positions(), instruction_offset // 2, None))
    except StopIteration:
        return None
    return None if col_offset is None else col_offset + 1


@dataclass(frozen=True)
class LogRecord:
    level: LogLevel
    message: str
    site: CallSite
    breadcrumb: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "level": self.level.value,
            "file": self.breadcrumb,
            "function": self.site.function,
            "line": self.site.line,
            "column": self.site.column,
            "message": self.message,
        }


# =============================================================================
# Payload Rendering
# =============================================================================

_JSON_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_NON_STR_KEYS


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, Mapping):
        return dict(value)
    return _safe_str(value)


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def render_payload(payload: Any) -> str:
    """Render any payload into the text shown in logs."""
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace")
    if isinstance(payload, BaseException):
        return f"{type(payload).__name__}: {_safe_str(payload)}"
    if isinstance(payload, (Mapping, list, tuple, set, frozenset)) or (
        dataclasses.is_dataclass(payload) and not isinstance(payload, type)
    ):
        if isinstance(payload, (set, frozenset)):
            payload = sorted(payload, key=repr)
        elif isinstance(payload, Mapping) and not isinstance(payload, dict):
            payload = dict(payload)
        try:
            return orjson.dumps(payload, default=_json_default, option=_JSON_OPTIONS).decode()
        except TypeError:
            return _safe_str(payload)
    return _safe_str(payload)
