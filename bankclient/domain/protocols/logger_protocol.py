"""LoggerProtocol definition for structured logging.

Backend-agnostic contract for the structured logger the banking client
writes to. Logs are event name + key-value context.

Security:
    - NEVER log bearer tokens or full response bodies of authentication calls
    - Account identifiers and amounts are safe to log

Usage:
    from bankclient.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("banking_transfer_started", from_account="ACC1000")

    client_logger = logger.bind(base_url="http://localhost:8123")
    client_logger.info("banking_client_initialized")  # base_url auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the standard levels and context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
