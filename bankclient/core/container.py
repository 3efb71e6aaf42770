"""Dependency factories (composition root).

Application-scoped singletons shared by every BankingClient that is not
given explicit collaborators:
- Settings (pydantic-settings)
- Logging (structlog console adapter)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from bankclient.core.config import get_settings

if TYPE_CHECKING:
    from bankclient.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from bankclient.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )
