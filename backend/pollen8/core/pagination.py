"""Pagination — offset math and the Page container returned by list operations.

Invariants:
    - page >= 1 and limit >= 1 (callers at the HTTP boundary also cap limit at 100)
    - offset = (page - 1) * limit
    - total_pages = ceil(total / limit)
"""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pollen8.core.errors import InputValidationError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def validate_page(page: int, limit: int) -> None:
    if page < 1:
        raise InputValidationError("page must be >= 1", "page")
    if limit < 1:
        raise InputValidationError("limit must be >= 1", "limit")


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


@dataclass
class Page(Generic[T]):
    """One page of results plus the numbers needed to fetch the others."""
    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.limit)
