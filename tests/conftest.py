"""Shared pytest fixtures for the banking client tests.

Provides:
1. A capturing logger so tests can assert on structured log events
2. A BankingClient pointed at a fake base URL (HTTP mocked by pytest-httpx)
3. Marker registration and automatic asyncio marking
"""

import inspect
from typing import Any

import pytest
import pytest_asyncio

from bankclient.infrastructure.banking import BankingClient

BASE_URL = "http://bank.test"


class CapturingLogger:
    """LoggerProtocol implementation that records events in memory."""

    def __init__(self, events: list[dict[str, Any]] | None = None, **bound: Any) -> None:
        self.events: list[dict[str, Any]] = events if events is not None else []
        self._bound = bound

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.events.append({"level": level, "event": message, **self._bound, **context})

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
        self._record("error", message, context)

    def bind(self, **context: Any) -> "CapturingLogger":
        return CapturingLogger(self.events, **self._bound, **context)

    def names(self) -> list[str]:
        """Event names in the order they were logged."""
        return [entry["event"] for entry in self.events]


@pytest.fixture
def capturing_logger() -> CapturingLogger:
    """Fresh in-memory logger."""
    return CapturingLogger()


@pytest_asyncio.fixture
async def client(capturing_logger: CapturingLogger):
    """BankingClient against BASE_URL, closed after the test."""
    banking_client = BankingClient(BASE_URL, timeout=5.0, logger=capturing_logger)
    yield banking_client
    await banking_client.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
