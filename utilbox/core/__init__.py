"""Core shared kernel.

Foundational utilities used across all utilbox packages:
- Result types for railway-oriented programming
- Error value objects and categories
- Validation framework for input validation

Usage:
    from utilbox.core import Error, Result, Success, Failure
"""

from utilbox.core.enums import ErrorType
from utilbox.core.errors import Error, ResultUsageError, ResultValueAccessError
from utilbox.core.result import Failure, Result, Success

__all__ = [
    "Error",
    "ErrorType",
    "Failure",
    "Result",
    "ResultUsageError",
    "ResultValueAccessError",
    "Success",
]
