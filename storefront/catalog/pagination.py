"""Pagination primitives shared by every listing."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 50
MAX_PAGE = 10_000


@dataclass(frozen=True)
class PaginationParams:
    """Pagination parameters.

    Bounds (1 <= page <= MAX_PAGE, 1 <= limit <= MAX_PAGE_SIZE) are
    enforced by the HTTP layer before a listing runs.

    Attributes:
        page: Page number (1-indexed).
        limit: Items per page.
    """

    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        items: Items on the requested page.
        total: Total count across all pages.
        page: Requested page.
        limit: Requested page size.
    """

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        """Calculate total pages (ceil(total / limit))."""
        return (self.total + self.limit - 1) // self.limit

    @classmethod
    def empty(cls, params: PaginationParams) -> "PaginatedResult[T]":
        """Build a result with no items for the given page."""
        return cls(items=[], total=0, page=params.page, limit=params.limit)


def paginate(params: PaginationParams, total: int, items: list[T]) -> PaginatedResult[T]:
    """Package one page of items with its pagination metadata.

    Args:
        params: Requested page and page size.
        total: Total matching count reported by the count query.
        items: Items fetched for the page.

    Returns:
        Paginated result; empty when the total is zero.
    """
    if total <= 0:
        return PaginatedResult.empty(params)
    return PaginatedResult(
        items=list(items),
        total=total,
        page=params.page,
        limit=params.limit,
    )
