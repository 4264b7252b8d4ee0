"""Test fixtures for the user service."""

import os
from collections.abc import Generator
from typing import Any

import pytest
import structlog
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

os.environ["ENV"] = "development"


class CapturedEvents:
    """Live view over captured structlog entries."""

    def __init__(self, entries: list[dict[str, Any]]):
        self._entries = entries

    @property
    def lines(self) -> list[str]:
        return [e["event"] for e in self._entries if e.get("log_level") != "debug"]


@pytest.fixture(autouse=True)
def clear_store() -> Generator[None, None, None]:
    """Start every test with an empty user store."""
    from app.store import get_store

    get_store().clear()
    yield
    get_store().clear()
    structlog.reset_defaults()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client."""
    from app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def events() -> Generator[CapturedEvents, None, None]:
    """Capture structlog events emitted while the test runs."""
    with capture_logs() as entries:
        yield CapturedEvents(entries)
