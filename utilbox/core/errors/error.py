"""Error value object carried by failed Results.

Errors are data, not exceptions. They flow through the system inside
Failure results and are never raised.

Architecture:
- Immutable frozen dataclass (structural equality on code, description, type)
- Category fixed by named factories so code/description cannot be paired
  with the wrong ErrorType by accident
- Error.NONE is the "no error" sentinel; it is never a valid failure

Usage:
    from utilbox.core.errors import Error

    error = Error.not_found("user_not_found", "User 42 does not exist")
    str(error)  # 'user_not_found: User 42 does not exist'
"""

from dataclasses import dataclass, field
from typing import ClassVar

from utilbox.core.enums import ErrorType


@dataclass(frozen=True, slots=True, kw_only=True)
class Error:
    """Structured failure description (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (may be empty).
        description: Human-readable error message.
        type: Failure category.
        cause: Originating exception, kept for diagnostics only. Excluded
            from equality and repr.
    """

    NONE: ClassVar["Error"]

    code: str
    description: str
    type: ErrorType = ErrorType.GENERIC
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code}: {self.description}"

    @classmethod
    def generic(cls, code: str, description: str) -> "Error":
        """Create an uncategorized error."""
        return cls(code=code, description=description, type=ErrorType.GENERIC)

    @classmethod
    def validation(cls, code: str, description: str) -> "Error":
        """Create an input validation error."""
        return cls(code=code, description=description, type=ErrorType.VALIDATION)

    @classmethod
    def not_found(cls, code: str, description: str) -> "Error":
        """Create a resource-not-found error."""
        return cls(code=code, description=description, type=ErrorType.NOT_FOUND)

    @classmethod
    def conflict(cls, code: str, description: str) -> "Error":
        """Create a conflict error (duplicate or state conflict)."""
        return cls(code=code, description=description, type=ErrorType.CONFLICT)

    @classmethod
    def authentication(cls, code: str, description: str) -> "Error":
        """Create an authentication error (caller not identified)."""
        return cls(code=code, description=description, type=ErrorType.AUTHENTICATION)

    @classmethod
    def authorization(cls, code: str, description: str) -> "Error":
        """Create an authorization error (caller not permitted)."""
        return cls(code=code, description=description, type=ErrorType.AUTHORIZATION)

    @classmethod
    def unexpected(
        cls, code: str, description: str, *, cause: BaseException | None = None
    ) -> "Error":
        """Create an unexpected error, optionally keeping the causing exception."""
        return cls(
            code=code,
            description=description,
            type=ErrorType.UNEXPECTED,
            cause=cause,
        )

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Error":
        """Convert a raised exception into an UNEXPECTED error.

        Args:
            exc: Exception to convert.

        Returns:
            Error with the exception class name as code, its message as
            description, and the exception itself as cause.

        Example:
            >>> Error.from_exception(ValueError("boom")).code
            'ValueError'
        """
        return cls.unexpected(type(exc).__name__, str(exc), cause=exc)

    @property
    def is_none(self) -> bool:
        """Check if this error is the "no error" sentinel."""
        return self == Error.NONE


Error.NONE = Error(code="", description="", type=ErrorType.GENERIC)
