"""Application search – SearchOrchestrator."""
from __future__ import annotations

from typing import TypeVar

from listquery.application.pagination import PageWindow
from listquery.application.search.builders import build_equal
from listquery.application.search.compiler import FilterCompiler
from listquery.application.search.queryable import Queryable
from listquery.application.search.request import SearchRequest
from listquery.application.search.result import SearchResult
from listquery.application.search.sort import SortCompiler
from listquery.config.settings import SearchSettings
from listquery.kernel.errors import FieldNotFoundError
from listquery.kernel.time import Clock
from listquery.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class SearchOrchestrator:
    """Runs one search: count, guard + filter, sort, page.

    The order is fixed. ``total_count`` is taken before any filtering (soft
    deleted rows included) and ``filtered_count`` right after filtering, so
    neither depends on sorting or paging.
    """

    def __init__(
        self,
        filter_compiler: FilterCompiler | None = None,
        sort_compiler: SortCompiler | None = None,
        *,
        settings: SearchSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or SearchSettings()
        self._filters = filter_compiler or FilterCompiler(self._settings, clock=clock)
        self._sorts = sort_compiler or SortCompiler()

    def search(self, queryable: Queryable[T], request: SearchRequest) -> SearchResult[T]:
        total_count = queryable.count()
        filtered, filtered_count = self._filters.compile(queryable, request.filter)

        if request.sort is not None:
            filtered = self._sorts.compile_spec(filtered, request.sort)

        if request.page is not None and request.per_page is not None:
            window = PageWindow.of(request.page, request.per_page, filtered_count)
            filtered = filtered.slice(window.skip, window.take)

        logger.debug(
            "search_compiled",
            entity=queryable.schema.name,
            filters=len(request.filter),
            filtered_count=filtered_count,
            total_count=total_count,
        )
        return SearchResult(
            query=filtered,
            filtered_count=filtered_count,
            total_count=total_count,
            page=request.page,
            per_page=request.per_page,
        )

    def find_by_id(self, queryable: Queryable[T], raw_id: str) -> T | None:
        """Return the non-deleted record whose identifier equals *raw_id*.

        The identifier field is the first of ``id_field_candidates`` present on
        the entity; *raw_id* is parsed like an ``equal_`` operand.
        """
        candidates = self._settings.id_field_candidates
        id_field = queryable.schema.id_field(candidates)
        if id_field is None:
            raise FieldNotFoundError(queryable.schema.name, "|".join(candidates))
        guarded = self._filters.guard.apply(queryable)
        found = guarded.where(build_equal(id_field, raw_id)).slice(0, 1).all()
        return found[0] if found else None


__all__ = ["SearchOrchestrator"]
