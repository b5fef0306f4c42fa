"""Application search – filter-key operator table.

Prefixes are data, not control flow: :data:`PREFIX_TABLE` lists every
recognised prefix in tie-break order, and :func:`parse_key` picks the
longest prefix a key starts with (``date_from_`` wins over ``date_``).
"""
from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from enum import Enum


class OperatorKind(str, Enum):
    STRING = "string"
    DATE_FROM = "date_from"
    DATE_TO = "date_to"
    DATE_BETWEEN = "date_between"
    DATE_EQUAL = "date_equal"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    NOT_NULL = "not_null"
    DATETIME_FROM = "datetime_from"
    DATETIME_TO = "datetime_to"
    IN = "in"
    NOT_IN = "not_in"


PREFIX_TABLE: tuple[tuple[str, OperatorKind], ...] = (
    ("string_", OperatorKind.STRING),
    ("date_from_", OperatorKind.DATE_FROM),
    ("date_to_", OperatorKind.DATE_TO),
    ("date_between_", OperatorKind.DATE_BETWEEN),
    ("date_", OperatorKind.DATE_EQUAL),
    ("equal_", OperatorKind.EQUAL),
    ("notequal_", OperatorKind.NOT_EQUAL),
    ("not_null_", OperatorKind.NOT_NULL),
    ("datetime_from_", OperatorKind.DATETIME_FROM),
    ("datetime_to_", OperatorKind.DATETIME_TO),
    ("in_", OperatorKind.IN),
    ("notin_", OperatorKind.NOT_IN),
)

AUTOCOMPLETE_KEY = "q"


@dataclasses.dataclass(frozen=True)
class FilterKey:
    """A decoded filter key: operator kind plus the field reference after the prefix."""

    kind: OperatorKind
    prefix: str
    field_ref: str


def parse_key(key: str, table: Sequence[tuple[str, OperatorKind]] = PREFIX_TABLE) -> FilterKey | None:
    """Decode *key*, or return ``None`` when no prefix matches."""
    best: tuple[int, int] | None = None
    for index, (prefix, _kind) in enumerate(table):
        if not key.startswith(prefix):
            continue
        if best is None or len(prefix) > best[1]:
            best = (index, len(prefix))
    if best is None:
        return None
    prefix, kind = table[best[0]]
    return FilterKey(kind=kind, prefix=prefix, field_ref=key[len(prefix):])


__all__ = ["AUTOCOMPLETE_KEY", "PREFIX_TABLE", "FilterKey", "OperatorKind", "parse_key"]
