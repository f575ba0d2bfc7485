"""Pagination metadata attached to list responses."""

from pydantic import BaseModel, Field, computed_field

from utilbox.pagination import PaginatedResult


class PaginationMetadata(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        total_items: Total items available.
        page_size: Items per page.
        current_page: Current page number (1-indexed).
        total_pages: Total number of pages.
    """

    total_items: int = Field(..., ge=0, description="Total items available")
    page_size: int = Field(..., ge=1, description="Items per page")
    current_page: int = Field(..., ge=1, description="Current page number")
    total_pages: int = Field(..., ge=0, description="Total number of pages")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @classmethod
    def from_paginated_result(cls, page: PaginatedResult) -> "PaginationMetadata":
        """Create pagination metadata from a PaginatedResult.

        Args:
            page: Result of utilbox.pagination.paginate.

        Returns:
            PaginationMetadata instance.
        """
        return cls(
            total_items=page.total_items,
            page_size=page.page_size,
            current_page=page.page_number,
            total_pages=page.total_pages,
        )
