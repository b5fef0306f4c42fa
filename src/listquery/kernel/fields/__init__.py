"""Kernel fields – explicit per-entity field descriptor tables."""
from listquery.kernel.fields.accessor import FieldAccessor, capitalize_first, pascal_case
from listquery.kernel.fields.schema import (
    DELETE_FIELD_CANDIDATES,
    ID_FIELD_CANDIDATES,
    EntitySchema,
    SchemaRegistry,
    default_registry,
    schema_for,
)
from listquery.kernel.fields.types import FieldType, field_type_for, register_hint_wrapper

__all__ = [
    "DELETE_FIELD_CANDIDATES",
    "ID_FIELD_CANDIDATES",
    "EntitySchema",
    "FieldAccessor",
    "FieldType",
    "SchemaRegistry",
    "capitalize_first",
    "default_registry",
    "field_type_for",
    "pascal_case",
    "register_hint_wrapper",
    "schema_for",
]
