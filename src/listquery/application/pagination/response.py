"""Application pagination – ListResponse returned to the API layer."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class ListResponse(Generic[T]):
    """A page of search results with both record counts.

    ``filtered_count`` counts records after filtering and before paging;
    ``total_count`` counts the raw collection. ``page`` is zero-based.
    """

    items: list[T]
    filtered_count: int
    total_count: int
    page: int | None = None
    per_page: int | None = None
    succeeded: bool = True
    message: str = "OK"

    @property
    def total_pages(self) -> int:
        if not self.per_page or self.filtered_count <= 0:
            return 0
        return math.ceil(self.filtered_count / self.per_page)

    @property
    def has_next(self) -> bool:
        if self.page is None:
            return False
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return bool(self.page)

    def map(self, fn: Callable[[T], Any]) -> "ListResponse[Any]":
        """Return a new :class:`ListResponse` with each item transformed by *fn*."""
        return dataclasses.replace(self, items=[fn(item) for item in self.items])

    def to_dict(self) -> dict[str, Any]:
        """camelCase payload, as consumed by list endpoints."""
        return {
            "succeeded": self.succeeded,
            "message": self.message,
            "data": list(self.items),
            "filteredCount": self.filtered_count,
            "totalCount": self.total_count,
            "page": self.page,
            "perPage": self.per_page,
        }


__all__ = ["ListResponse"]
