"""Application search – Queryable port and InMemoryQueryable.

A :class:`Queryable` is an immutable description of a query over one entity
type. Every transformation returns a new queryable; only ``count`` and
``all`` execute anything.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from listquery.kernel.ddd import BaseSpecification
from listquery.kernel.fields import EntitySchema, FieldAccessor, schema_for

T = TypeVar("T")


@runtime_checkable
class Queryable(Protocol[T]):
    @property
    def schema(self) -> EntitySchema: ...

    def where(self, spec: BaseSpecification[Any]) -> "Queryable[T]": ...
    def order_by(self, field: FieldAccessor, ascending: bool = True) -> "Queryable[T]": ...
    def slice(self, skip: int, take: int) -> "Queryable[T]": ...
    def count(self) -> int: ...
    def all(self) -> list[T]: ...


class InMemoryQueryable(Generic[T]):
    """Queryable over an in-process sequence of entities.

    Nulls sort first in ascending order and last in descending order.
    """

    def __init__(self, items: Iterable[T], schema: EntitySchema) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._schema = schema

    @classmethod
    def of(cls, items: Iterable[T], entity_type: type[T]) -> "InMemoryQueryable[T]":
        return cls(items, schema_for(entity_type))

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def where(self, spec: BaseSpecification[Any]) -> "InMemoryQueryable[T]":
        return InMemoryQueryable((i for i in self._items if spec.is_satisfied_by(i)), self._schema)

    def order_by(self, field: FieldAccessor, ascending: bool = True) -> "InMemoryQueryable[T]":
        def key(item: T) -> tuple[bool, Any]:
            value = field.get(item)
            return (value is not None, value)

        return InMemoryQueryable(sorted(self._items, key=key, reverse=not ascending), self._schema)

    def slice(self, skip: int, take: int) -> "InMemoryQueryable[T]":
        return InMemoryQueryable(self._items[skip: skip + take], self._schema)

    def count(self) -> int:
        return len(self._items)

    def all(self) -> list[T]:
        return list(self._items)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["InMemoryQueryable", "Queryable"]
