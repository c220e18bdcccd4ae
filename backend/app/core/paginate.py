"""Pagination — page/limit arithmetic shared by every list endpoint.

Invariants:
    - page is 1-based; page < 1 is clamped to 1
    - total_pages(0, n) == 0
"""

import math


def page_window(page: int, limit: int) -> tuple[int, int]:
    """Return (offset, limit) for a 1-based page."""
    page = max(page, 1)
    return (page - 1) * limit, limit


def total_pages(total: int, limit: int) -> int:
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def page_envelope(key: str, items: list, total: int, page: int, limit: int) -> dict:
    """Standard paginated response body."""
    return {
        key: items,
        "total_pages": total_pages(total, limit),
        "current_page": max(page, 1),
        "total": total,
    }
