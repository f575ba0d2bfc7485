"""Core enums package.

Usage:
    from utilbox.core.enums import ErrorType, Environment
"""

from utilbox.core.enums.environment import Environment
from utilbox.core.enums.error_type import ErrorType

__all__ = ["ErrorType", "Environment"]
