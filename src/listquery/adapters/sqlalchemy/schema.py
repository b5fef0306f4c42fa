"""SQLAlchemy adapter – EntitySchema built from a mapped class."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import BigInteger, Boolean, DateTime, Float, Integer, Numeric, String, Uuid, inspect
from sqlalchemy.orm import Mapped
from sqlalchemy.types import TypeEngine

from listquery.kernel.fields import (
    EntitySchema,
    FieldAccessor,
    FieldType,
    default_registry,
    register_hint_wrapper,
)

# Order matters: BigInteger subclasses Integer.
_COLUMN_TYPES: tuple[tuple[type[TypeEngine], FieldType], ...] = (
    (Boolean, FieldType.BOOL),
    (BigInteger, FieldType.INT64),
    (Integer, FieldType.INT32),
    (Float, FieldType.FLOAT64),
    (Numeric, FieldType.FLOAT64),
    (String, FieldType.STRING),
    (Uuid, FieldType.UUID),
    (DateTime, FieldType.DATETIME),
)

register_hint_wrapper(Mapped)


def _field_type(column_type: TypeEngine) -> FieldType:
    for sa_type, field_type in _COLUMN_TYPES:
        if isinstance(column_type, sa_type):
            return field_type
    return FieldType.OTHER


def schema_from_model(model: type, *, extra: Iterable[FieldAccessor] = ()) -> EntitySchema:
    """Build a schema from the column attributes of a mapped class."""
    accessors: list[FieldAccessor] = []
    for prop in inspect(model).column_attrs:
        column = prop.columns[0]
        accessors.append(
            FieldAccessor.attribute(prop.key, _field_type(column.type), nullable=bool(column.nullable))
        )
    accessors.extend(extra)
    return EntitySchema.of(model.__name__, accessors)


def schema_for_model(model: type) -> EntitySchema:
    """Cached :func:`schema_from_model` via the default schema registry."""
    return default_registry.get(model, schema_from_model)


__all__ = ["schema_for_model", "schema_from_model"]
