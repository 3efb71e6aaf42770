"""Structured logging adapters."""

from bankclient.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_logging,
)

__all__ = ["ConsoleAdapter", "configure_logging"]
