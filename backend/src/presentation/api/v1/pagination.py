"""Pagination of list endpoints and the list response envelope."""

import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from fastapi import Query
from starlette.datastructures import URL

from domain.errors import ErrorKind, ManagementError
from infrastructure.config import get_settings

# Page size asking for every item at once.
NO_PAGINATION = -1


@dataclass(frozen=True)
class PaginationParams:
    """1-based page number and page size."""

    page: int = 1
    size: int = 10

    @property
    def enabled(self) -> bool:
        return self.size != NO_PAGINATION


def get_pagination(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    size: Optional[int] = Query(None, ge=NO_PAGINATION, description="Page size, -1 for every item"),
) -> PaginationParams:
    """Pagination query parameters dependency."""
    if size is None:
        size = get_settings().default_page_size
    return PaginationParams(page=page, size=size)


@dataclass
class Page:
    """A slice of a list, with what is needed to describe it."""

    items: list
    total: int
    number: int
    size: int
    paginated: bool

    @property
    def first(self) -> int:
        return (self.number - 1) * self.size + 1 if self.items else 0

    @property
    def last(self) -> int:
        return self.first + len(self.items) - 1 if self.items else 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.paginated else 1


def paginate(
    items: Sequence[Any],
    pagination: PaginationParams,
    with_pagination: bool = True,
) -> Page:
    """
    Cut the requested page out of a list.

    Args:
        items: Every item, already ordered
        pagination: Requested page
        with_pagination: False to return every item whatever the page size

    Returns:
        The page

    Raises:
        ManagementError: PAGINATION_INVALID when the page lies beyond the
            last item, or the page size is zero
    """
    items = list(items)
    total = len(items)

    if not (with_pagination and pagination.enabled) or total == 0:
        return Page(items=items, total=total, number=1, size=total, paginated=False)

    if pagination.size == 0:
        raise ManagementError.of(ErrorKind.PAGINATION_INVALID)

    start = (pagination.page - 1) * pagination.size
    if start >= total:
        raise ManagementError.of(ErrorKind.PAGINATION_INVALID)

    return Page(
        items=items[start:start + pagination.size],
        total=total,
        number=pagination.page,
        size=pagination.size,
        paginated=True,
    )


def build_list_response(
    page: Page,
    url: URL,
    metadata: Optional[dict[str, dict[str, Any]]] = None,
) -> dict[str, Any]:
    """
    Wrap a page in the ``data``/``metadata``/``links`` envelope.

    Resource specific metadata is kept next to the ``data`` totals and,
    for paginated lists, the ``pagination`` description.
    """
    response_metadata = {key: dict(value) for key, value in (metadata or {}).items()}
    response_metadata["data"] = {"total": page.total}

    links = {"self": str(url)}
    if page.paginated:
        response_metadata["pagination"] = {
            "current_page": page.number,
            "size": len(page.items),
            "first": page.first,
            "last": page.last,
            "total": page.total,
            "total_pages": page.total_pages,
        }

        def page_link(number: int) -> str:
            return str(url.include_query_params(page=number, size=page.size))

        links["first"] = page_link(1)
        links["last"] = page_link(page.total_pages)
        if page.number > 1:
            links["previous"] = page_link(page.number - 1)
        if page.number < page.total_pages:
            links["next"] = page_link(page.number + 1)

    return {"data": page.items, "metadata": response_metadata, "links": links}


def create_list_response(
    items: Sequence[Any],
    pagination: PaginationParams,
    url: URL,
    metadata: Optional[dict[str, dict[str, Any]]] = None,
    with_pagination: bool = True,
) -> dict[str, Any]:
    """Paginate items and wrap the page in the list envelope."""
    return build_list_response(paginate(items, pagination, with_pagination), url, metadata)
