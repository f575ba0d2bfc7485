"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging: message + key-value context.

Log Levels:
    - DEBUG: Detailed diagnostic info
    - INFO: Normal operational events
    - WARNING: Intercepted failures, degraded behavior
    - ERROR: Operation failed, caller continues
    - CRITICAL: Unrecoverable failure

Usage:
    from utilbox.core.container import get_logger

    logger = get_logger()
    logger.warning("result_attempt_failed", error_type="ValueError")

    scoped = logger.bind(operation="import")
    scoped.info("started")  # operation auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
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
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
