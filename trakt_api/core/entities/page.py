"""Page of results returned by paginated endpoints."""

from typing import Generic, Iterable, Mapping, Optional, TypeVar

from trakt_api.utils.constants import PAGINATION_HEADERS

T = TypeVar("T")


class PaginatedList(list, Generic[T]):
    """
    A list carrying the X-Pagination-* headers of the response.

    Attributes:
        page: Current page (1-based)
        limit: Items per page
        page_count: Total number of pages
        item_count: Total number of items
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        page: Optional[int] = None,
        limit: Optional[int] = None,
        page_count: Optional[int] = None,
        item_count: Optional[int] = None,
    ) -> None:
        super().__init__(items)
        self.page = page
        self.limit = limit
        self.page_count = page_count
        self.item_count = item_count

    @classmethod
    def from_headers(cls, items: Iterable[T], headers: Mapping[str, str]) -> "PaginatedList[T]":
        values = {}
        for attribute, header in PAGINATION_HEADERS.items():
            raw = headers.get(header)
            values[attribute] = int(raw) if raw is not None and raw.isdigit() else None
        return cls(items, **values)

    @property
    def has_next(self) -> bool:
        if self.page is None or self.page_count is None:
            return False
        return self.page < self.page_count

    def __repr__(self) -> str:
        return (
            f"PaginatedList({list.__repr__(self)}, page={self.page}, "
            f"page_count={self.page_count}, item_count={self.item_count})"
        )
