"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Generator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

# Set test environment before importing settings
os.environ["ENV"] = "development"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"

from reqlog.aspect import HandlerRegistry  # noqa: E402
from reqlog.config import EmitMode, RequestLogSettings, Settings  # noqa: E402
from reqlog.models import RequestDescriptor  # noqa: E402


class CapturedLines:
    """Block lines captured from structlog, debug chatter excluded."""

    def __init__(self, entries: list[dict[str, Any]]):
        self.entries = entries

    @property
    def lines(self) -> list[str]:
        return [e["event"] for e in self.entries if e.get("log_level") != "debug"]

    def levels(self, level: str) -> list[str]:
        return [e["event"] for e in self.entries if e.get("log_level") == level]

    def starting_with(self, prefix: str) -> list[str]:
        return [line for line in self.lines if line.startswith(prefix)]


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def captured() -> Generator[CapturedLines, None, None]:
    """Capture every structlog event emitted during the test."""
    with capture_logs() as entries:
        yield CapturedLines(entries)


@pytest.fixture
def sample_request() -> RequestDescriptor:
    """Request descriptor for a plain GET."""
    return RequestDescriptor(url="http://h/a", method="GET", remote_address="10.0.0.1")


@pytest.fixture
def settings() -> Settings:
    """Default settings with buffered emission."""
    return Settings(request_log=RequestLogSettings(mode=EmitMode.BUFFERED))


@pytest.fixture
def registry(settings: Settings) -> HandlerRegistry:
    """Isolated handler registry using the ambient request accessor."""
    return HandlerRegistry(settings=settings)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line(
        "markers", "integration: Integration tests (exercise the ASGI stack)"
    )
