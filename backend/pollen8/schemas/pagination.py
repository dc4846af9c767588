"""Pagination Schemas — the paginated response envelope.

Invariants:
    - total_pages = ceil(total / limit)
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from pollen8.core.pagination import Page

T = TypeVar("T")


class Paginated(BaseModel, Generic[T]):
    """Paginated response: items plus the numbers needed to fetch other pages."""
    model_config = ConfigDict(from_attributes=True)

    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page) -> "Paginated[T]":
        return cls.model_validate(page)
