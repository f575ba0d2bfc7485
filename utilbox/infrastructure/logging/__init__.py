"""Logging adapters implementing LoggerProtocol."""

from utilbox.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    configure_console_logging,
)

__all__ = ["ConsoleAdapter", "configure_console_logging"]
