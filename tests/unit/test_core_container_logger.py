"""Unit tests for get_logger() container function.

Tests cover:
- Renderer selection based on BANKING_ENVIRONMENT
- Log level passed through from settings
- Singleton pattern (same instance returned)
- Protocol compliance

Architecture:
- Unit tests with mocked settings and adapters
- Tests centralized dependency injection pattern
"""

from unittest.mock import MagicMock, patch

import pytest

from bankclient.core.config import BankingSettings
from bankclient.core.container import get_logger
from bankclient.core.enums import Environment


@pytest.fixture(autouse=True)
def clear_logger_cache():
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


def _settings(environment: Environment, log_level: str = "INFO") -> BankingSettings:
    return BankingSettings(environment=environment, log_level=log_level)


@pytest.mark.unit
class TestGetLoggerContainer:
    """Test get_logger() container function."""

    def test_console_renderer_in_development(self):
        """Development gets human-readable output."""
        with patch(
            "bankclient.core.container.get_settings",
            return_value=_settings(Environment.DEVELOPMENT, "DEBUG"),
        ):
            with patch(
                "bankclient.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                mock_adapter = MagicMock()
                mock_console.return_value = mock_adapter

                logger = get_logger()

                mock_console.assert_called_once_with(use_json=False, level="DEBUG")
                assert logger == mock_adapter

    @pytest.mark.parametrize(
        "environment", [Environment.TESTING, Environment.CI, Environment.PRODUCTION]
    )
    def test_json_renderer_elsewhere(self, environment: Environment):
        """Every other environment gets JSON output."""
        with patch(
            "bankclient.core.container.get_settings",
            return_value=_settings(environment),
        ):
            with patch(
                "bankclient.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                get_logger()

                mock_console.assert_called_once_with(use_json=True, level="INFO")

    def test_get_logger_returns_same_instance(self):
        """Test get_logger() is cached."""
        with patch(
            "bankclient.core.container.get_settings",
            return_value=_settings(Environment.TESTING),
        ):
            assert get_logger() is get_logger()

    def test_get_logger_satisfies_protocol(self):
        """Real adapter provides every LoggerProtocol method."""
        with patch(
            "bankclient.core.container.get_settings",
            return_value=_settings(Environment.TESTING),
        ):
            logger = get_logger()

        for method in ("debug", "info", "warning", "error", "bind"):
            assert callable(getattr(logger, method))
        assert isinstance(logger.bind(operation="test"), type(logger))
