import io

import pytest

from sitelog import LogFacade, reset_logging
from sitelog.sinks import ReportingSink, StdioSink


class RecordingReporter(ReportingSink):
    """In-memory reporting sink that keeps every call."""

    def __init__(self):
        self.messages: list[str] = []
        self.exceptions: list[tuple[str, str]] = []
        self.closed = False

    def log_message(self, text: str) -> None:
        self.messages.append(text)

    def record_exception(self, name: str, reason: str) -> None:
        self.exceptions.append((name, reason))

    def close(self) -> None:
        self.closed = True


class FailingReporter(ReportingSink):
    """Reporting sink whose backend is unreachable."""

    def log_message(self, text: str) -> None:
        raise ConnectionError("reporting backend unreachable")

    def record_exception(self, name: str, reason: str) -> None:
        raise ConnectionError("reporting backend unreachable")


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def failing_reporter():
    return FailingReporter()


@pytest.fixture
def make_reporter():
    return RecordingReporter


@pytest.fixture
def facade(stream, reporter):
    return LogFacade(
        console=StdioSink(stream=stream, color=False),
        reporter=reporter,
        root_marker="tests",
        environment="testing",
    )


@pytest.fixture(autouse=True)
def reset_process_logging():
    """Each test starts without a process-wide façade."""
    yield
    reset_logging()
