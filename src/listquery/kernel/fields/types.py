"""Kernel fields – FieldType and Python type mapping."""
from __future__ import annotations

import types
import typing
import uuid
from datetime import datetime
from enum import Enum
from typing import Annotated, Any


class FieldType(str, Enum):
    """Declared value type of an entity field."""

    STRING = "string"
    BOOL = "bool"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    UUID = "uuid"
    DATETIME = "datetime"
    OTHER = "other"

    @property
    def is_integer(self) -> bool:
        return self in (FieldType.INT32, FieldType.INT64)


_PYTHON_TYPES: dict[Any, FieldType] = {
    str: FieldType.STRING,
    bool: FieldType.BOOL,
    int: FieldType.INT32,
    float: FieldType.FLOAT64,
    uuid.UUID: FieldType.UUID,
    datetime: FieldType.DATETIME,
}

# Generic origins whose single argument is the real value type, e.g. an ORM's
# ``Mapped[X]``. Adapters add theirs with :func:`register_hint_wrapper`.
_HINT_WRAPPERS: set[Any] = set()


def register_hint_wrapper(origin: Any) -> None:
    _HINT_WRAPPERS.add(origin)


def _unwrap(hint: Any) -> Any:
    while typing.get_origin(hint) in _HINT_WRAPPERS and len(typing.get_args(hint)) == 1:
        hint = typing.get_args(hint)[0]
    return hint


def field_type_for(hint: Any) -> tuple[FieldType, bool]:
    """Map a type hint to ``(FieldType, nullable)``.

    ``Optional[X]`` / ``X | None`` is nullable. ``Annotated[int, FieldType.INT64]``
    overrides the default mapping. Anything unknown maps to ``FieldType.OTHER``.
    """
    hint = _unwrap(hint)
    override: FieldType | None = None
    if typing.get_origin(hint) is Annotated:
        hint, *metadata = typing.get_args(hint)
        override = next((m for m in metadata if isinstance(m, FieldType)), None)

    nullable = False
    if typing.get_origin(hint) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        nullable = len(args) < len(typing.get_args(hint))
        if len(args) != 1:
            return override or FieldType.OTHER, nullable
        hint = args[0]
        if typing.get_origin(hint) is Annotated:
            hint, *metadata = typing.get_args(hint)
            override = override or next((m for m in metadata if isinstance(m, FieldType)), None)

    if override is not None:
        return override, nullable
    return _PYTHON_TYPES.get(hint, FieldType.OTHER), nullable


__all__ = ["FieldType", "field_type_for", "register_hint_wrapper"]
