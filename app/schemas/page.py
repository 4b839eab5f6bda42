"""Paginated response envelope shared by board listing, search and the admin user list."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.crud.pagination import Page

T = TypeVar("T")


class PageResponse(BaseModel, Generic[T]):
    """One page of results with 1-based page metadata for clients."""

    content: list[T] = Field(default_factory=list, description="Items on this page.")
    page_number: int = Field(..., ge=1, description="1-based page number.")
    page_size: int = Field(..., ge=1, description="Fixed page size.")
    total_elements: int = Field(..., ge=0, description="Item count across all pages.")
    total_pages: int = Field(..., ge=0, description="Number of pages.")
    first: bool = Field(..., description="True on the first page.")
    last: bool = Field(..., description="True on the last page.")

    @classmethod
    def from_page(cls, page: Page[T]) -> "PageResponse[T]":
        return cls(
            content=page.items,
            page_number=page.index + 1,
            page_size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            first=page.is_first,
            last=page.is_last,
        )
