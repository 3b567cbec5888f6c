"""
Page selector window for paginated tables.

This is the only place page-window logic lives. Renderers must treat
ELLIPSIS tokens as non-clickable.
"""

import math
from typing import List

from dashboard.db.types import PaginationToken
from dashboard.utils.constants import ITEMS_PER_PAGE

ELLIPSIS = "..."

# Up to this many pages are all shown without eliding any
MAX_VISIBLE_PAGES = 7


def page_offset(current_page: int) -> int:
    """Row offset of a 1-based page."""
    return (current_page - 1) * ITEMS_PER_PAGE


def count_pages(count: int) -> int:
    """Number of pages needed to show `count` rows (0 for no rows)."""
    return math.ceil(count / ITEMS_PER_PAGE)


def generate_pagination(current_page: int, total_pages: int) -> List[PaginationToken]:
    """
    Compute the page-number tokens to render for a page selector.

    Args:
        current_page: 1-based page being viewed
        total_pages: Total number of pages (0 when there are no rows)

    Returns:
        Page numbers with ELLIPSIS markers for elided ranges, e.g.
        [1, "...", 4, 5, 6, "...", 10] for page 5 of 10.
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))

    # Near the start: first 3, an ellipsis, and the last 2
    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    # Near the end: first 2, an ellipsis, and the last 3
    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    # Somewhere in the middle: first page, the current page and its
    # neighbours, and the last page
    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]
