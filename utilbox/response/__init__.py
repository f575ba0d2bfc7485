"""API response envelope and its supporting models."""

from utilbox.response.api_response import ApiResponse, status_for_error_type
from utilbox.response.operation_validation_error import OperationValidationError
from utilbox.response.pagination_metadata import PaginationMetadata

__all__ = [
    "ApiResponse",
    "OperationValidationError",
    "PaginationMetadata",
    "status_for_error_type",
]
