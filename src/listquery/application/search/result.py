"""Application search – SearchResult."""
from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

from listquery.application.pagination import ListResponse
from listquery.application.search.queryable import Queryable

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class SearchResult(Generic[T]):
    """Filtered, sorted and paged queryable plus its two record counts.

    ``filtered_count`` is measured after filtering and before paging;
    ``total_count`` is measured on the raw collection.
    """

    query: Queryable[T]
    filtered_count: int
    total_count: int
    page: int | None = None
    per_page: int | None = None

    def items(self) -> list[T]:
        return self.query.all()

    def to_response(self) -> ListResponse[T]:
        return ListResponse(
            items=self.items(),
            filtered_count=self.filtered_count,
            total_count=self.total_count,
            page=self.page,
            per_page=self.per_page,
        )


__all__ = ["SearchResult"]
