"""Page request/response value types and offset pagination over ORM queries."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from sqlalchemy.orm import Query

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size for a store query."""

    index: int
    size: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Page index must not be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")

    @classmethod
    def of(cls, page_number: int, size: int) -> "PageRequest":
        """Build from a 1-based page number as used at the HTTP boundary."""
        if page_number < 1:
            raise ValueError("Page number must be 1 or greater")
        return cls(index=page_number - 1, size=size)

    @property
    def offset(self) -> int:
        return self.index * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One window of query results plus the total element count across all pages.

    Constructed per query; never persisted.
    """

    items: list[T] = field(default_factory=list)
    index: int = 0
    size: int = 1
    total_elements: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_elements < 1:
            return 0
        return -(-self.total_elements // self.size)

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index + 1 >= self.total_pages

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        """Return a page with fn applied to each item and the same metadata."""
        return Page(
            items=[fn(item) for item in self.items],
            index=self.index,
            size=self.size,
            total_elements=self.total_elements,
        )


def paginate(query: Query, page_request: PageRequest) -> Page:
    """Run a count and an offset/limit fetch for the requested window."""
    total = query.order_by(None).count()
    items = query.offset(page_request.offset).limit(page_request.size).all()
    return Page(
        items=list(items),
        index=page_request.index,
        size=page_request.size,
        total_elements=total,
    )
