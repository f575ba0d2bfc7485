"""In-memory pagination of iterables.

Page sizes default to and are capped by the configured pagination settings
(UTILBOX_DEFAULT_PAGE_SIZE, UTILBOX_MAX_PAGE_SIZE).
"""

import math
from collections.abc import Iterable
from typing import TypeVar

from utilbox.core.config import get_settings
from utilbox.pagination.paginated_result import PaginatedResult

T = TypeVar("T")


def paginate(
    items: Iterable[T], page_number: int = 1, page_size: int | None = None
) -> PaginatedResult[T]:
    """Slice items into the requested page.

    Args:
        items: Full sequence to paginate (consumed once).
        page_number: Page to return (1-indexed).
        page_size: Items per page. Defaults to settings.default_page_size and
            is capped at settings.max_page_size.

    Returns:
        PaginatedResult for the page. A page past the end has no items but
        still reports the totals.

    Raises:
        ValueError: If page_number or page_size is less than 1.

    Example:
        >>> page = paginate(range(25), page_number=3, page_size=10)
        >>> page.items, page.total_pages
        ((20, 21, 22, 23, 24), 3)
    """
    config = get_settings()
    if page_size is None:
        page_size = config.default_page_size
    if page_number < 1:
        raise ValueError("page_number must be at least 1")
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    page_size = min(page_size, config.max_page_size)

    all_items = list(items)
    total_items = len(all_items)
    start = (page_number - 1) * page_size
    return PaginatedResult(
        items=tuple(all_items[start : start + page_size]),
        page_number=page_number,
        page_size=page_size,
        total_items=total_items,
        total_pages=math.ceil(total_items / page_size),
    )
