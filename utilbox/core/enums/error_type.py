"""Error categories for Result failures.

ErrorType is a pure classification tag. Callers map it to transport-level
codes (HTTP status, exit codes) at their own boundary; see
utilbox.response.api_response.status_for_error_type for the conventional
HTTP mapping.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Closed set of failure categories.

    Examples:
        >>> ErrorType.NOT_FOUND.value
        'not_found'
    """

    GENERIC = "generic"
    """A failure without a specific category (default)."""

    VALIDATION = "validation"
    """Input validation failed. Conventionally HTTP 400."""

    NOT_FOUND = "not_found"
    """Requested resource does not exist. Conventionally HTTP 404."""

    CONFLICT = "conflict"
    """Resource already exists or is in a conflicting state. Conventionally HTTP 409."""

    AUTHENTICATION = "authentication"
    """Caller is not authenticated. Conventionally HTTP 401."""

    AUTHORIZATION = "authorization"
    """Caller is authenticated but not permitted. Conventionally HTTP 403."""

    UNEXPECTED = "unexpected"
    """Unexpected condition, usually a captured exception. Conventionally HTTP 500."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all category values as strings.

        Returns:
            List of category string values.
        """
        return [error_type.value for error_type in cls]
