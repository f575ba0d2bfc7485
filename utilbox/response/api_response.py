"""API response envelope.

Wraps a payload or an error description together with the HTTP status,
optional validation errors, free-form metadata and a UTC timestamp.
Result values are converted with ApiResponse.from_result, which applies the
conventional ErrorType to HTTP status mapping.

Usage:
    from utilbox.response import ApiResponse

    response = ApiResponse.from_result(get_user(user_id))
    response.status_code_value  # 200, or 404 for a NOT_FOUND failure
"""

from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from utilbox.core.enums import ErrorType
from utilbox.core.result import Failure, Result
from utilbox.response.operation_validation_error import OperationValidationError
from utilbox.response.pagination_metadata import PaginationMetadata

T = TypeVar("T")

PAGINATION_METADATA_KEY = "pagination"

_STATUS_BY_ERROR_TYPE = {
    ErrorType.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorType.GENERIC: HTTPStatus.BAD_REQUEST,
    ErrorType.AUTHENTICATION: HTTPStatus.UNAUTHORIZED,
    ErrorType.AUTHORIZATION: HTTPStatus.FORBIDDEN,
    ErrorType.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorType.CONFLICT: HTTPStatus.CONFLICT,
    ErrorType.UNEXPECTED: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for_error_type(error_type: ErrorType) -> HTTPStatus:
    """Map an error category to its HTTP status code.

    Example:
        >>> status_for_error_type(ErrorType.NOT_FOUND)
        <HTTPStatus.NOT_FOUND: 404>
    """
    return _STATUS_BY_ERROR_TYPE.get(error_type, HTTPStatus.INTERNAL_SERVER_ERROR)


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope.

    Attributes:
        success: Whether the operation succeeded.
        status_code: HTTP status of the response.
        data: Payload on success.
        error_message: Summary of the failure.
        validation_errors: Field-level validation failures.
        metadata: Additional response metadata (pagination etc.).
        timestamp: Creation time (UTC).
        request_id: Optional correlation identifier.
    """

    success: bool = Field(default=False, description="Operation outcome")
    status_code: HTTPStatus = Field(default=HTTPStatus.OK, description="HTTP status")
    data: T | None = Field(default=None, description="Payload on success")
    error_message: str | None = Field(default=None, description="Failure summary")
    validation_errors: list[OperationValidationError] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    request_id: str | None = Field(default=None, description="Correlation identifier")

    @property
    def status_code_value(self) -> int:
        return int(self.status_code)

    @classmethod
    def create_success(
        cls,
        data: T,
        status_code: HTTPStatus = HTTPStatus.OK,
        request_id: str | None = None,
    ) -> "ApiResponse[T]":
        """Create a successful response carrying data."""
        return cls(success=True, status_code=status_code, data=data, request_id=request_id)

    @classmethod
    def create_error(
        cls,
        error_message: str,
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
        request_id: str | None = None,
    ) -> "ApiResponse[T]":
        """Create a failed response with a single error message."""
        return cls(
            success=False,
            status_code=status_code,
            error_message=error_message,
            request_id=request_id,
        )

    @classmethod
    def create_validation_error(
        cls,
        validation_errors: list[OperationValidationError] | None,
        error_message: str = "Validation failed",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
        request_id: str | None = None,
    ) -> "ApiResponse[T]":
        """Create a failed response listing field validation errors.

        Args:
            validation_errors: Field errors (None is treated as empty).
            error_message: Summary message.
            status_code: HTTP status (400 by default).
            request_id: Optional correlation identifier.
        """
        return cls(
            success=False,
            status_code=status_code,
            error_message=error_message,
            validation_errors=list(validation_errors or []),
            request_id=request_id,
        )

    @classmethod
    def from_result(
        cls,
        result: Result[T],
        *,
        success_status: HTTPStatus = HTTPStatus.OK,
        request_id: str | None = None,
    ) -> "ApiResponse[T]":
        """Convert a Result into a response.

        A Success becomes a success response with its value as data. A
        Failure is rendered from its primary error: VALIDATION failures list
        every validation error (field is the error code), other categories
        become a plain error response. The status follows
        status_for_error_type.

        Args:
            result: Result to convert.
            success_status: Status used for a Success.
            request_id: Optional correlation identifier.
        """
        if not isinstance(result, Failure):
            return cls.create_success(result.value, success_status, request_id)

        primary = result.error
        status_code = status_for_error_type(primary.type)
        if primary.type == ErrorType.VALIDATION:
            return cls.create_validation_error(
                [
                    OperationValidationError(
                        field=error.code, message=error.description, code=error.code
                    )
                    for error in result.errors
                    if error.type == ErrorType.VALIDATION
                ],
                error_message=primary.description,
                status_code=status_code,
                request_id=request_id,
            )
        return cls.create_error(primary.description, status_code, request_id)

    def add_metadata(self, key: str, value: Any) -> "ApiResponse[T]":
        """Set a metadata entry and return self for chaining."""
        self.metadata[key] = value
        return self

    def add_pagination_metadata(
        self, total_items: int, page_size: int, current_page: int, total_pages: int
    ) -> "ApiResponse[T]":
        """Attach PaginationMetadata under the "pagination" key."""
        return self.add_metadata(
            PAGINATION_METADATA_KEY,
            PaginationMetadata(
                total_items=total_items,
                page_size=page_size,
                current_page=current_page,
                total_pages=total_pages,
            ),
        )
