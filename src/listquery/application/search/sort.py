"""Application search – SortCompiler."""
from __future__ import annotations

from typing import TypeVar

from listquery.application.search.queryable import Queryable
from listquery.application.search.request import SortSpec
from listquery.kernel.fields import capitalize_first

T = TypeVar("T")


class SortCompiler:
    """Turns a ``(field, direction)`` pair into an ordering of a queryable.

    The field name's first character is upper-cased before lookup, so
    ``"lastName"`` sorts by ``LastName``. Unknown fields raise
    :class:`~listquery.kernel.errors.FieldNotFoundError` before the
    queryable is touched.
    """

    def compile(self, queryable: Queryable[T], field_name: str, ascending: bool = True) -> Queryable[T]:
        accessor = queryable.schema.require(capitalize_first(field_name))
        return queryable.order_by(accessor, ascending)

    def compile_spec(self, queryable: Queryable[T], sort: SortSpec) -> Queryable[T]:
        return self.compile(queryable, sort.field, sort.ascending)


__all__ = ["SortCompiler"]
