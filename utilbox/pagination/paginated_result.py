"""Paginated result value object.

Usage:
    from utilbox.pagination import paginate

    page = paginate(users, page_number=2, page_size=10)
    if page.has_next_page:
        ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PaginatedResult(Generic[T]):
    """One page of items plus the counts needed to navigate the rest.

    Attributes:
        items: Items on this page (may be empty past the last page).
        page_number: Current page number (1-indexed).
        page_size: Maximum items per page.
        total_items: Number of items across all pages.
        total_pages: Number of pages needed for total_items.
    """

    items: tuple[T, ...]
    page_number: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def offset(self) -> int:
        """Index of the first item of this page within the full sequence."""
        return (self.page_number - 1) * self.page_size
