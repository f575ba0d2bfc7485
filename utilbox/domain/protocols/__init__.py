"""Protocol definitions.

Usage:
    from utilbox.domain.protocols import LoggerProtocol
"""

from utilbox.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
