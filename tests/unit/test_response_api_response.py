"""Unit tests for the API response envelope.

Tests cover:
- Success, error and validation-error factories
- Metadata and pagination metadata
- ErrorType to HTTP status mapping
- Conversion from Result
- Serialization

Architecture:
- Pure unit tests against pydantic models
"""

from datetime import UTC, datetime
from http import HTTPStatus

import pytest
from freezegun import freeze_time

from utilbox.core.enums import ErrorType
from utilbox.core.errors import Error
from utilbox.core.result import Result
from utilbox.pagination import paginate
from utilbox.response import (
    ApiResponse,
    OperationValidationError,
    PaginationMetadata,
    status_for_error_type,
)


@pytest.mark.unit
class TestApiResponseFactories:
    """Test ApiResponse factory classmethods."""

    def test_create_success(self):
        """Test a success response carries data and 200."""
        response = ApiResponse[dict].create_success({"id": 1}, request_id="req-1")

        assert response.success is True
        assert response.data == {"id": 1}
        assert response.status_code == HTTPStatus.OK
        assert response.status_code_value == 200
        assert response.request_id == "req-1"
        assert response.validation_errors == []

    def test_create_success_custom_status(self):
        """Test the status can be overridden."""
        response = ApiResponse[str].create_success("made", HTTPStatus.CREATED)

        assert response.status_code_value == 201

    def test_create_error(self):
        """Test an error response defaults to 400."""
        response = ApiResponse[str].create_error("Bad request")

        assert response.success is False
        assert response.error_message == "Bad request"
        assert response.status_code_value == 400
        assert response.data is None

    def test_create_validation_error(self):
        """Test validation errors are listed."""
        errors = [OperationValidationError(field="email", message="Invalid", code="invalid_email")]

        response = ApiResponse[str].create_validation_error(errors)

        assert response.error_message == "Validation failed"
        assert response.validation_errors == errors
        assert response.status_code == HTTPStatus.BAD_REQUEST

    def test_create_validation_error_with_none(self):
        """Test None is treated as no validation errors."""
        assert ApiResponse[str].create_validation_error(None).validation_errors == []

    @freeze_time("2024-05-01 12:00:00")
    def test_timestamp_defaults_to_utc_now(self):
        """Test the timestamp is the current UTC time."""
        response = ApiResponse[int].create_success(1)

        assert response.timestamp == datetime(2024, 5, 1, 12, tzinfo=UTC)


@pytest.mark.unit
class TestApiResponseMetadata:
    """Test metadata helpers."""

    def test_add_metadata_chains(self):
        """Test add_metadata sets the entry and returns self."""
        response = ApiResponse[int].create_success(1)

        assert response.add_metadata("version", "v1") is response
        assert response.metadata == {"version": "v1"}

    def test_add_pagination_metadata(self):
        """Test pagination metadata is stored under "pagination"."""
        response = ApiResponse[list].create_success([1, 2]).add_pagination_metadata(
            total_items=25, page_size=10, current_page=2, total_pages=3
        )

        pagination = response.metadata["pagination"]
        assert isinstance(pagination, PaginationMetadata)
        assert pagination.has_previous
        assert pagination.has_next

    def test_pagination_metadata_flags_on_edges(self):
        """Test first and last pages."""
        first = PaginationMetadata(total_items=5, page_size=5, current_page=1, total_pages=1)

        assert not first.has_previous
        assert not first.has_next

    def test_pagination_metadata_from_paginated_result(self):
        """Test conversion from a PaginatedResult."""
        metadata = PaginationMetadata.from_paginated_result(
            paginate(range(25), page_number=3, page_size=10)
        )

        assert metadata == PaginationMetadata(
            total_items=25, page_size=10, current_page=3, total_pages=3
        )

    def test_serialization_includes_computed_flags(self):
        """Test model_dump renders nested pagination metadata."""
        response = ApiResponse[list].create_success([]).add_pagination_metadata(0, 10, 1, 0)

        dumped = response.model_dump(mode="json")

        assert dumped["status_code"] == 200
        assert dumped["metadata"]["pagination"]["has_next"] is False
        assert dumped["metadata"]["pagination"]["total_items"] == 0


@pytest.mark.unit
class TestStatusMapping:
    """Test ErrorType to HTTP status mapping."""

    @pytest.mark.parametrize(
        ("error_type", "status"),
        [
            (ErrorType.VALIDATION, 400),
            (ErrorType.GENERIC, 400),
            (ErrorType.AUTHENTICATION, 401),
            (ErrorType.AUTHORIZATION, 403),
            (ErrorType.NOT_FOUND, 404),
            (ErrorType.CONFLICT, 409),
            (ErrorType.UNEXPECTED, 500),
        ],
    )
    def test_status_for_error_type(self, error_type, status):
        """Test each category maps to its conventional status."""
        assert status_for_error_type(error_type) == status


@pytest.mark.unit
class TestFromResult:
    """Test ApiResponse.from_result conversion."""

    def test_success_result(self):
        """Test a Success becomes a success response with its value."""
        response = ApiResponse.from_result(Result.success({"id": 7}))

        assert response.success is True
        assert response.data == {"id": 7}
        assert response.status_code_value == 200

    def test_success_result_custom_status(self):
        """Test success_status overrides the status."""
        response = ApiResponse.from_result(Result.success(1), success_status=HTTPStatus.CREATED)

        assert response.status_code_value == 201

    def test_not_found_result(self):
        """Test a NOT_FOUND failure becomes a 404 error response."""
        response = ApiResponse.from_result(
            Result.not_found("user_not_found", "User 7 does not exist"), request_id="req-9"
        )

        assert response.success is False
        assert response.status_code_value == 404
        assert response.error_message == "User 7 does not exist"
        assert response.request_id == "req-9"
        assert response.validation_errors == []

    def test_validation_result_lists_errors(self):
        """Test VALIDATION failures list each validation error."""
        result = Result.failure(
            [
                Error.validation("invalid_email", "Invalid email format"),
                Error.validation("validation_failed", "name cannot be empty"),
            ]
        )

        response = ApiResponse.from_result(result)

        assert response.status_code_value == 400
        assert response.error_message == "Invalid email format"
        assert [error.message for error in response.validation_errors] == [
            "Invalid email format",
            "name cannot be empty",
        ]
        assert response.validation_errors[0].field == "invalid_email"

    def test_unexpected_result(self):
        """Test a captured exception becomes a 500 response."""

        def boom():
            raise RuntimeError("database unavailable")

        response = ApiResponse.from_result(Result.attempt(boom))

        assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        assert response.error_message == "database unavailable"


@pytest.mark.unit
class TestOperationValidationError:
    """Test OperationValidationError model."""

    def test_code_is_optional(self):
        """Test code defaults to None."""
        error = OperationValidationError(field="name", message="Required")

        assert error.code is None
