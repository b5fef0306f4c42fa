"""Application search – string-driven filter, sort and page engine."""
from listquery.application.search.compiler import FilterCompiler
from listquery.application.search.operators import PREFIX_TABLE, FilterKey, OperatorKind, parse_key
from listquery.application.search.queryable import InMemoryQueryable, Queryable
from listquery.application.search.request import SORT_ASC, SORT_DESC, SearchRequest, SortSpec
from listquery.application.search.result import SearchResult
from listquery.application.search.service import SearchOrchestrator
from listquery.application.search.soft_delete import SoftDeleteGuard
from listquery.application.search.sort import SortCompiler

__all__ = [
    "PREFIX_TABLE",
    "SORT_ASC",
    "SORT_DESC",
    "FilterCompiler",
    "FilterKey",
    "InMemoryQueryable",
    "OperatorKind",
    "Queryable",
    "SearchOrchestrator",
    "SearchRequest",
    "SearchResult",
    "SoftDeleteGuard",
    "SortCompiler",
    "SortSpec",
    "parse_key",
]
