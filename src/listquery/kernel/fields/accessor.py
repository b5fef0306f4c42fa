"""Kernel fields – FieldAccessor."""
from __future__ import annotations

import dataclasses
import operator
from typing import Any, Callable

from listquery.kernel.fields.types import FieldType


@dataclasses.dataclass(frozen=True)
class FieldAccessor:
    """Typed accessor for one field of an entity.

    ``name`` is the public (wire-level) name used in filter keys and sort
    specs; ``attr`` is the attribute (or mapping key) read on the entity.
    """

    name: str
    attr: str
    type: FieldType
    nullable: bool = False
    getter: Callable[[Any], Any] | None = dataclasses.field(default=None, compare=False, repr=False)

    def get(self, entity: Any) -> Any:
        if self.getter is not None:
            return self.getter(entity)
        return getattr(entity, self.attr)

    @classmethod
    def attribute(cls, attr: str, field_type: FieldType, *, name: str | None = None, nullable: bool = False) -> "FieldAccessor":
        return cls(name or pascal_case(attr), attr, field_type, nullable, operator.attrgetter(attr))

    @classmethod
    def item(cls, key: str, field_type: FieldType, *, name: str | None = None, nullable: bool = False) -> "FieldAccessor":
        """Accessor for mapping-shaped entities (``entity[key]``)."""
        return cls(name or pascal_case(key), key, field_type, nullable, operator.itemgetter(key))


def pascal_case(attr: str) -> str:
    """``first_name`` -> ``FirstName``; already-capitalised names pass through."""
    parts = [p for p in attr.split("_") if p]
    if not parts:
        return attr
    return "".join(p[:1].upper() + p[1:] for p in parts)


def capitalize_first(value: str) -> str:
    if not value:
        return value
    return value[:1].upper() + value[1:]


__all__ = ["FieldAccessor", "capitalize_first", "pascal_case"]
