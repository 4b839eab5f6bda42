"""Shared service errors and the page-to-response rule used by board and admin listings."""

import logging
from typing import TypeVar

from app.crud.pagination import Page
from app.schemas.page import PageResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ServiceError(Exception):
    """Base class for outcomes the HTTP layer turns into a status code."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EmptyResultError(ServiceError):
    """The query was valid but the requested page holds nothing."""


class PageUnavailableError(ServiceError):
    """The store returned no page at all."""


def to_page_response(page: Page | None, item_schema: type[T]) -> PageResponse[T]:
    """
    Shape a store page for the wire.

    Raises PageUnavailableError when page is None and EmptyResultError when there
    is nothing to show on the requested page.
    """
    if page is None:
        logger.warning("Store returned no page container")
        raise PageUnavailableError("Page could not be loaded.")
    if page.total_elements < 1 or not page.items:
        raise EmptyResultError("No results on this page.")
    return PageResponse[item_schema].from_page(page.map(item_schema.from_entity))
