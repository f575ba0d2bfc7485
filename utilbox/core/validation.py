"""Validation framework for input validation.

Utility functions for common validation patterns. All validation functions
return Result types for consistent error handling: the input value on
success, a VALIDATION error on failure.

Usage:
    from utilbox.core.validation import validate_email, validate_not_empty
    from utilbox.core.result import Success, Failure

    result = validate_email("user@example.com")
    match result:
        case Success(value=email):
            # Email is valid
            pass
        case Failure(errors=errors):
            # Handle validation errors
            print(errors[0].description)
"""

from typing import Any

from utilbox.core.errors import Error
from utilbox.core.result import Failure, Result, Success
from utilbox.strings.validation import is_valid_email, is_valid_isbn, is_valid_url

VALIDATION_FAILED = "validation_failed"
INVALID_EMAIL = "invalid_email"
INVALID_URL = "invalid_url"
INVALID_ISBN = "invalid_isbn"


def validate_not_empty(value: Any, field_name: str) -> Result[Any]:
    """Validate that a value is not empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if not empty, Failure with a validation error otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            errors=(Error.validation(VALIDATION_FAILED, f"{field_name} cannot be empty"),)
        )
    return Success(value=value)


def validate_email(email: str) -> Result[str]:
    """Validate email format.

    Args:
        email: Email address to validate.

    Returns:
        Success with email if valid, Failure with a validation error otherwise.
    """
    if not is_valid_email(email):
        return Failure(errors=(Error.validation(INVALID_EMAIL, "Invalid email format"),))
    return Success(value=email)


def validate_min_length(value: str, min_length: int, field_name: str) -> Result[str]:
    """Validate minimum string length.

    Args:
        value: String to validate.
        min_length: Minimum required length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with a validation error otherwise.
    """
    if len(value) < min_length:
        return Failure(
            errors=(
                Error.validation(
                    VALIDATION_FAILED,
                    f"{field_name} must be at least {min_length} characters",
                ),
            )
        )
    return Success(value=value)


def validate_max_length(value: str, max_length: int, field_name: str) -> Result[str]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with a validation error otherwise.
    """
    if len(value) > max_length:
        return Failure(
            errors=(
                Error.validation(
                    VALIDATION_FAILED,
                    f"{field_name} must be at most {max_length} characters",
                ),
            )
        )
    return Success(value=value)


def validate_url(url: str) -> Result[str]:
    """Validate an absolute http(s) URL."""
    if not is_valid_url(url):
        return Failure(errors=(Error.validation(INVALID_URL, "Invalid URL format"),))
    return Success(value=url)


def validate_isbn(isbn: str) -> Result[str]:
    """Validate an ISBN-10 or ISBN-13 checksum."""
    if not is_valid_isbn(isbn):
        return Failure(errors=(Error.validation(INVALID_ISBN, "Invalid ISBN"),))
    return Success(value=isbn)


def validate_all(*results: Result[Any]) -> Result[None]:
    """Collect every validation error from several checks.

    Example:
        >>> validate_all(
        ...     validate_not_empty(name, "name"),
        ...     validate_email(email),
        ... )
    """
    return Result.combine(*results)
