"""Composition root for library-scoped dependencies.

Nothing here runs at import time: settings are read only when
configure_logging() is called, and get_logger() never reconfigures logging.

Usage:
    from utilbox.core.container import configure_logging, get_logger

    configure_logging()  # optional, for hosts without their own structlog setup
    logger = get_logger()
    logger.info("paginated", total_items=42)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utilbox.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the library logger singleton.

    Output follows the host's structlog configuration.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from utilbox.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter()


def configure_logging() -> None:
    """Opt in to utilbox's console logging, driven by the current settings.

    Renderer selection:
    - development/production: human-readable console output
    - testing/ci, or log_json set: JSON output
    """
    from utilbox.core.config import get_settings
    from utilbox.infrastructure.logging.console_adapter import (
        configure_console_logging,
    )

    config = get_settings()
    use_json = config.log_json or config.is_testing or config.is_ci
    configure_console_logging(use_json=use_json, level=config.log_level)
