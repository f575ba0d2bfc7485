"""Exceptions for Result API misuse.

These are programmer errors, not operation failures. Operation failures
are returned as Failure results; these are raised when a Result is built
or read incorrectly.
"""


class ResultUsageError(ValueError):
    """Raised when a Result is constructed with invalid arguments.

    Examples: a Failure built from Error.NONE, from an empty error list,
    or from something that is not an Error.
    """


class ResultValueAccessError(AttributeError):
    """Raised when reading the value of a failed Result."""

    def __init__(self, errors: tuple) -> None:
        """Initialize access error.

        Args:
            errors: Errors carried by the failed Result.
        """
        primary = errors[0] if errors else None
        super().__init__(f"Cannot access value of a failed result ({primary})")
        self.errors = errors
