"""Application – use-case building blocks (framework-agnostic)."""

from listquery.application.pagination import ListResponse, PageWindow
from listquery.application.search import (
    FilterCompiler,
    InMemoryQueryable,
    Queryable,
    SearchOrchestrator,
    SearchRequest,
    SearchResult,
    SortCompiler,
    SortSpec,
)

__all__ = [
    "FilterCompiler",
    "InMemoryQueryable",
    "ListResponse",
    "PageWindow",
    "Queryable",
    "SearchOrchestrator",
    "SearchRequest",
    "SearchResult",
    "SortCompiler",
    "SortSpec",
]
