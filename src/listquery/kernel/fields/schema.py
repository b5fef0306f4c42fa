"""Kernel fields – EntitySchema descriptor table and SchemaRegistry.

An :class:`EntitySchema` maps public field names to :class:`FieldAccessor`
objects. It is built once per entity type and then only looked up; nothing
in the query path introspects entities at call time.

Example::

    @dataclasses.dataclass
    class Doctor:
        id: int
        first_name: str
        is_deleted: bool = False

    schema = schema_for(Doctor)
    schema.require("FirstName").get(doctor)
    schema.deleted_field()   # -> accessor for ``is_deleted``
"""
from __future__ import annotations

import dataclasses
import inspect
import threading
import typing
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from listquery.kernel.errors import FieldNotFoundError
from listquery.kernel.fields.accessor import FieldAccessor
from listquery.kernel.fields.types import field_type_for

DELETE_FIELD_CANDIDATES: tuple[str, ...] = ("Deleted", "IsDeleted", "Removed", "IsRemoved")
ID_FIELD_CANDIDATES: tuple[str, ...] = ("Id",)


@dataclasses.dataclass(frozen=True)
class EntitySchema:
    """Immutable name -> accessor table for one entity type."""

    name: str
    fields: Mapping[str, FieldAccessor]

    def __contains__(self, field_name: object) -> bool:
        return field_name in self.fields

    def __iter__(self):
        return iter(self.fields.values())

    def resolve(self, field_name: str) -> FieldAccessor | None:
        return self.fields.get(field_name)

    def require(self, field_name: str) -> FieldAccessor:
        accessor = self.fields.get(field_name)
        if accessor is None:
            raise FieldNotFoundError(self.name, field_name)
        return accessor

    def first_of(self, candidates: Sequence[str]) -> FieldAccessor | None:
        """Return the first candidate present on the entity, or ``None``."""
        for candidate in candidates:
            accessor = self.fields.get(candidate)
            if accessor is not None:
                return accessor
        return None

    def deleted_field(self, candidates: Sequence[str] = DELETE_FIELD_CANDIDATES) -> FieldAccessor | None:
        return self.first_of(candidates)

    def id_field(self, candidates: Sequence[str] = ID_FIELD_CANDIDATES) -> FieldAccessor | None:
        return self.first_of(candidates)

    @classmethod
    def of(cls, name: str, accessors: Iterable[FieldAccessor]) -> "EntitySchema":
        return cls(name=name, fields={a.name: a for a in accessors})

    @classmethod
    def from_class(cls, entity_type: type, *, extra: Iterable[FieldAccessor] = ()) -> "EntitySchema":
        """Build a schema from a class's annotations.

        Dataclass fields, plain class annotations and annotated read-only
        properties are all picked up. ``ClassVar`` and private names are
        skipped.
        """
        accessors: dict[str, FieldAccessor] = {}
        hints = typing.get_type_hints(entity_type, include_extras=True)
        if dataclasses.is_dataclass(entity_type):
            names = [f.name for f in dataclasses.fields(entity_type)]
        else:
            names = list(hints)
        for attr in names:
            hint = hints.get(attr, Any)
            if attr.startswith("_") or typing.get_origin(hint) is typing.ClassVar:
                continue
            field_type, nullable = field_type_for(hint)
            accessor = FieldAccessor.attribute(attr, field_type, nullable=nullable)
            accessors[accessor.name] = accessor

        for attr, member in inspect.getmembers(entity_type, lambda m: isinstance(m, property)):
            if attr.startswith("_") or member.fget is None:
                continue
            returns = typing.get_type_hints(member.fget, include_extras=True).get("return")
            if returns is None:
                continue
            field_type, nullable = field_type_for(returns)
            accessor = FieldAccessor.attribute(attr, field_type, nullable=nullable)
            accessors.setdefault(accessor.name, accessor)

        for accessor in extra:
            accessors[accessor.name] = accessor
        return cls(name=entity_type.__name__, fields=accessors)


class SchemaRegistry:
    """Process-wide cache of entity schemas.

    Entries are keyed by ``(entity_type, builder)``: a class seen both as a plain
    object and as an ORM model keeps one schema per way of building it.
    """

    def __init__(self) -> None:
        self._schemas: dict[tuple[type, Callable[[type], EntitySchema]], EntitySchema] = {}
        self._lock = threading.Lock()

    def register(
        self,
        entity_type: type,
        schema: EntitySchema,
        builder: Callable[[type], EntitySchema] = EntitySchema.from_class,
    ) -> None:
        with self._lock:
            self._schemas[(entity_type, builder)] = schema

    def get(
        self,
        entity_type: type,
        builder: Callable[[type], EntitySchema] = EntitySchema.from_class,
    ) -> EntitySchema:
        """Return the cached schema, building it with *builder* on first use."""
        key = (entity_type, builder)
        schema = self._schemas.get(key)
        if schema is not None:
            return schema
        with self._lock:
            schema = self._schemas.get(key)
            if schema is None:
                schema = builder(entity_type)
                self._schemas[key] = schema
            return schema

    def clear(self) -> None:
        with self._lock:
            self._schemas.clear()


default_registry = SchemaRegistry()


def schema_for(entity_type: type) -> EntitySchema:
    """Return the cached schema for *entity_type* from the default registry."""
    return default_registry.get(entity_type)


__all__ = [
    "DELETE_FIELD_CANDIDATES",
    "ID_FIELD_CANDIDATES",
    "EntitySchema",
    "SchemaRegistry",
    "default_registry",
    "schema_for",
]
