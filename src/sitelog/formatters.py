"""
Log formatters and color utilities.
"""

from __future__ import annotations

from .records import LogLevel, LogRecord

# =============================================================================
# ANSI Colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "info": "\033[32m",
    "network": "\033[36m",
    "error": "\033[31m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


# =============================================================================
# Console Formatter (Delimited Blocks)
# =============================================================================


class ConsoleFormatter:
    """Renders a record as a multi-line block bounded by level-specific delimiters."""

    INFO_BEGIN = "===================== 📬 Begin 📬 ========================="
    INFO_END = "====================== 📪 End 📪 =========================="
    NETWORK_BEGIN = "===================== 📟 ⏳ 📡 ========================="
    NETWORK_END = "======================= 🚀 ⌛️ 📡 ========================="
    ERROR_BEGIN = "===================== ❌ Begin ❌ ========================="
    ERROR_END = "====================== ❌ End ❌ =========================="

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    @classmethod
    def _header(cls, record: LogRecord) -> list[str]:
        site = record.site
        if record.level is LogLevel.ERROR:
            return [
                f"==> ‼️ Error log coming from file: {record.breadcrumb}",
                f"==> ‼️ Function name: {site.function}",
                f"==> ‼️ Line number: {site.line}",
            ]
        if record.level is LogLevel.INFO:
            lines = [
                f"==> ✍️ Log called from file: {record.breadcrumb}",
                f"==> 📝 Function name: {site.function}",
                f"==> 📄 Line number: {site.line}",
            ]
            if site.column is not None:
                lines.append(f"==> 📄 column number: {site.column}")
            return lines
        return []

    @classmethod
    def _delimiters(cls, level: LogLevel) -> tuple[str, str]:
        if level is LogLevel.ERROR:
            return cls.ERROR_BEGIN, cls.ERROR_END
        if level is LogLevel.NETWORK:
            return cls.NETWORK_BEGIN, cls.NETWORK_END
        return cls.INFO_BEGIN, cls.INFO_END

    @classmethod
    def format(cls, record: LogRecord, *, use_color: bool = False) -> str:
        """Format a record into its console block, leading blank line included."""
        color = record.level.value
        begin, end = cls._delimiters(record.level)
        lines = [cls._maybe_color(line, "bold", use_color) for line in cls._header(record)]
        lines.append(cls._maybe_color(begin, color, use_color))
        lines.append(record.message)
        lines.append(cls._maybe_color(end, color, use_color))
        return "\n" + "\n".join(lines)


# =============================================================================
# Reporting Summaries (Single Line)
# =============================================================================


def _single_line(text: str) -> str:
    return " ".join(part.strip() for part in text.splitlines() if part.strip())


def _location(record: LogRecord) -> str:
    return f"file={record.breadcrumb} Function={record.site.function} Line={record.site.line}"


def info_summary(record: LogRecord) -> str:
    return f"log from logger {_location(record)} logger={_single_line(record.message)}"


def network_summary(record: LogRecord) -> str:
    return f"log from network {_location(record)} log={_single_line(record.message)}"


def error_name(environment: str) -> str:
    return f"log error at {environment}"


def error_reason(record: LogRecord) -> str:
    return f"{_location(record)} error={_single_line(record.message)}"
