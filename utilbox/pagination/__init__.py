"""Pagination of in-memory sequences."""

from utilbox.pagination.paginated_result import PaginatedResult
from utilbox.pagination.paginator import paginate

__all__ = [
    "PaginatedResult",
    "paginate",
]
