"""Application search – parsing of raw string operands."""
from __future__ import annotations

import uuid
from datetime import datetime

from listquery.kernel.errors import ParseError
from listquery.kernel.fields import FieldType
from listquery.kernel.time import as_naive_local

EMPTY_UUID = "00000000-0000-0000-0000-000000000000"
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_SENTINELS = frozenset({EMPTY_UUID, str(INT32_MIN)})


def is_sentinel(raw: str) -> bool:
    """``True`` for placeholder values clients send to mean "no filter"."""
    return raw in _SENTINELS


def parse_bool(raw: str) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseError(raw, "bool")


def parse_int(raw: str, field_type: FieldType = FieldType.INT32) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ParseError(raw, field_type.value, cause=exc) from exc
    low, high = (INT32_MIN, INT32_MAX) if field_type is FieldType.INT32 else (INT64_MIN, INT64_MAX)
    if not low <= value <= high:
        raise ParseError(raw, field_type.value)
    return value


def parse_float(raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError as exc:
        raise ParseError(raw, "float64", cause=exc) from exc


def parse_uuid(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw.strip())
    except ValueError as exc:
        raise ParseError(raw, "uuid", cause=exc) from exc


def parse_date(raw: str) -> datetime:
    """Parse the first 10 characters (``YYYY-MM-DD``) as midnight of that day."""
    head = raw[:10]
    try:
        return datetime.strptime(head, "%Y-%m-%d")
    except ValueError as exc:
        raise ParseError(raw, "date", cause=exc) from exc


def parse_datetime(raw: str) -> datetime:
    """Parse an ISO-8601 datetime; offsets (``Z``, ``+02:00``) convert to naive local time."""
    try:
        return as_naive_local(datetime.fromisoformat(raw.strip()))
    except ValueError as exc:
        raise ParseError(raw, "datetime", cause=exc) from exc


def split_list(raw: str, separator: str = ",") -> list[str]:
    """Split a list operand, dropping blank elements."""
    return [item.strip() for item in raw.split(separator) if item.strip()]


__all__ = [
    "EMPTY_UUID",
    "INT32_MIN",
    "is_sentinel",
    "parse_bool",
    "parse_date",
    "parse_datetime",
    "parse_float",
    "parse_int",
    "parse_uuid",
    "split_list",
]
