"""structlog-backed LoggerProtocol implementation.

ConsoleAdapter writes through the "utilbox" structlog logger and never touches
structlog's global configuration, so whatever the host application configured
(processors, renderer, level filter) applies to utilbox diagnostics too.

Hosts without their own structlog setup may opt in to utilbox's console
output with configure_console_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOGGER_NAME = "utilbox"


def configure_console_logging(*, use_json: bool = False, level: str = "INFO") -> None:
    """Configure structlog process-wide for stderr console output.

    Args:
        use_json: JSON lines when True, colored key-value output otherwise.
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=True)
    )
    structlog.configure(
        processors=[
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
    """LoggerProtocol methods on the named utilbox structlog logger."""

    def __init__(self, logger: Any = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger(LOGGER_NAME)

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.error(message, **_with_exception(context, error))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        self._logger.critical(message, **_with_exception(context, error))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose logs all carry context."""
        return ConsoleAdapter(self._logger.bind(**context))

    def with_context(self, **context: Any) -> ConsoleAdapter:
        """Alias for bind()."""
        return self.bind(**context)


def _with_exception(context: dict[str, Any], error: Exception | None) -> dict[str, Any]:
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context
