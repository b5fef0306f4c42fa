"""Application pagination – PageWindow (skip/take)."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class PageWindow:
    """Offset window over a filtered collection.

    ``take`` is never zero: an empty result still asks the backend for one
    row so that no zero-length LIMIT query is issued.
    """

    skip: int
    take: int

    @classmethod
    def of(cls, page: int, per_page: int, filtered_count: int) -> "PageWindow":
        """Build the window for zero-based *page* of *per_page* rows."""
        if page < 0:
            raise ValueError("page must be >= 0")
        if per_page < 1:
            raise ValueError("per_page must be >= 1")
        return cls(skip=page * per_page, take=max(1, min(per_page, filtered_count)))


__all__ = ["PageWindow"]
