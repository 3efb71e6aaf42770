"""Console logging adapter.

Writes the client's structured events through structlog to stderr:
- Development: colored key=value lines
- Testing/CI/Production: one JSON object per line

structlog configuration is process-global. The adapter only installs its
own pipeline when nothing has configured structlog yet, so an application
embedding the client keeps its processors, renderer and level.

Satisfies LoggerProtocol structurally (PEP 544); no inheritance.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "bankclient"


def configure_logging(*, use_json: bool = False, level: str = "INFO") -> None:
    """Install the bankclient structlog pipeline, replacing any existing one.

    Args:
        use_json: Render JSON lines instead of colored console output.
        level: Minimum level name (e.g., "INFO").
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


class ConsoleAdapter:
    """LoggerProtocol implementation backed by structlog.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name, applied only when this adapter
            installs the pipeline.
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        if not structlog.is_configured():
            configure_logging(use_json=use_json, level=level)
        self._logger = structlog.get_logger(LOGGER_NAME)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, adding ``error_type``/``error_message`` for ``error``."""
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose events all carry ``context``."""
        bound = ConsoleAdapter.__new__(ConsoleAdapter)
        bound._logger = self._logger.bind(**context)
        return bound
