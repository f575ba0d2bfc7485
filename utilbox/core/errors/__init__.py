"""Core errors package.

Usage:
    from utilbox.core.errors import Error, ResultUsageError
"""

from utilbox.core.errors.error import Error
from utilbox.core.errors.exceptions import ResultUsageError, ResultValueAccessError

__all__ = [
    "Error",
    "ResultUsageError",
    "ResultValueAccessError",
]
