# Project: weather-explorer
# Owner: GreenUnicorn
"""
pagination.py — Split an ordered list of rows into fixed-size pages.

Pages are numbered from 1. An empty list has 0 pages; asking for a page
past the end returns an empty list rather than raising.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

PAGE_SIZE_OPTIONS = (10, 20, 50)


def _check_positive(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def paginate(rows: Sequence[T], page_size: int, page_number: int) -> list[T]:
    """Return the rows on a given page.

    Args:
        rows: Ordered rows to slice.
        page_size: Rows per page (>= 1).
        page_number: 1-based page index (>= 1).

    Returns:
        rows[(page_number - 1) * page_size : page_number * page_size] as a
        list, clipped to the available rows.

    Raises:
        ValueError: If page_size or page_number is not a positive integer.
    """
    _check_positive("page_size", page_size)
    _check_positive("page_number", page_number)
    start = (page_number - 1) * page_size
    return list(rows[start:start + page_size])


def total_pages(rows: Sequence, page_size: int) -> int:
    """Number of pages needed for rows at page_size (0 when rows is empty)."""
    _check_positive("page_size", page_size)
    return math.ceil(len(rows) / page_size)


class Pager:
    """Current page and page size for the data table.

    Changing the page size or switching to a new data source always puts
    the user back on page 1.
    """

    def __init__(self, page_size: int = PAGE_SIZE_OPTIONS[0]):
        _check_positive("page_size", page_size)
        self.page_size = page_size
        self.page = 1

    def set_page_size(self, page_size: int) -> None:
        _check_positive("page_size", page_size)
        self.page_size = page_size
        self.page = 1

    def reset(self) -> None:
        self.page = 1

    def last_page(self, rows: Sequence) -> int:
        return max(total_pages(rows, self.page_size), 1)

    def next_page(self, rows: Sequence) -> None:
        self.page = min(self.page + 1, self.last_page(rows))

    def prev_page(self) -> None:
        self.page = max(self.page - 1, 1)

    def has_next(self, rows: Sequence) -> bool:
        return self.page < total_pages(rows, self.page_size)

    def has_prev(self) -> bool:
        return self.page > 1

    def current(self, rows: Sequence[T]) -> list[T]:
        return paginate(rows, self.page_size, self.page)
