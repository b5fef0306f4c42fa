"""Application search – predicate builders, one per filter operator.

Each builder turns a field accessor and the raw string operand of a filter
entry into a specification node. Builders never touch a collection; they
raise :class:`UnsupportedTypeError` when the field's declared type has no
rule for the operator and :class:`ParseError` when the operand is malformed.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable

from listquery.application.search.operands import (
    parse_bool,
    parse_date,
    parse_datetime,
    parse_float,
    parse_int,
    parse_uuid,
    split_list,
)
from listquery.kernel.ddd import (
    BaseSpecification,
    Compare,
    ComparisonOp,
    Contains,
    Equals,
    IsNull,
    NotEquals,
    all_of,
    any_of,
)
from listquery.kernel.errors import ParseError, UnsupportedTypeError
from listquery.kernel.fields import FieldAccessor, FieldType

Builder = Callable[[FieldAccessor, str], "BaseSpecification[Any] | None"]


def _unsupported(operator: str, field: FieldAccessor) -> UnsupportedTypeError:
    return UnsupportedTypeError(operator, field.name, field.type.value)


def _require_datetime(operator: str, field: FieldAccessor) -> None:
    if field.type is not FieldType.DATETIME:
        raise _unsupported(operator, field)


def _scalar_operand(operator: str, field: FieldAccessor, raw: str) -> Any:
    """Parse *raw* into a value comparable with *field* (equality operators)."""
    match field.type:
        case FieldType.BOOL:
            return parse_bool(raw)
        case FieldType.INT32 | FieldType.INT64 | FieldType.FLOAT64:
            if raw == "":
                if not field.nullable:
                    raise ParseError(raw, field.type.value)
                return None
            if field.type is FieldType.FLOAT64:
                return parse_float(raw)
            return parse_int(raw, field.type)
        case FieldType.UUID:
            return parse_uuid(raw)
        case FieldType.STRING:
            return raw
        case _:
            raise _unsupported(operator, field)


def _list_operand(operator: str, field: FieldAccessor, item: str) -> Any:
    if field.type is FieldType.UUID:
        return parse_uuid(item)
    if field.type.is_integer:
        return parse_int(item, field.type)
    if field.type is FieldType.STRING:
        return item
    raise _unsupported(operator, field)


def build_contains(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    if field.type is not FieldType.STRING:
        raise _unsupported("string", field)
    return Contains(field, raw)


def build_equal(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    return Equals(field, _scalar_operand("equal", field, raw))


def build_not_equal(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    return NotEquals(field, _scalar_operand("notequal", field, raw))


def build_null_test(field: FieldAccessor, raw: str, *, expect_null: bool = False) -> BaseSpecification[Any]:
    """``IS NULL`` when *raw* matches the expected polarity, ``IS NOT NULL`` otherwise.

    With ``expect_null=False`` (the ``not_null_`` prefix), ``"false"`` selects
    null values and any other flag selects non-null values.
    """
    if raw.lower() != str(expect_null).lower():
        return ~IsNull(field)
    return IsNull(field)


def build_date_equal(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    """Whole-day match: ``day <= field < day + 1``."""
    _require_datetime("date", field)
    day = parse_date(raw)
    return Compare(field, ComparisonOp.GE, day) & Compare(field, ComparisonOp.LT, day + timedelta(days=1))


def build_date_from(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    _require_datetime("date_from", field)
    return Compare(field, ComparisonOp.GE, parse_date(raw))


def build_date_to(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    _require_datetime("date_to", field)
    return Compare(field, ComparisonOp.LE, parse_date(raw))


def build_datetime_from(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    _require_datetime("datetime_from", field)
    return Compare(field, ComparisonOp.GE, parse_datetime(raw))


def build_datetime_to(field: FieldAccessor, raw: str) -> BaseSpecification[Any]:
    _require_datetime("datetime_to", field)
    return Compare(field, ComparisonOp.LE, parse_datetime(raw))


def build_date_range(
    from_field: FieldAccessor,
    to_field: FieldAccessor,
    raw: str,
    now: datetime,
) -> BaseSpecification[Any]:
    """Validity window over two date fields.

    ``"true"`` keeps records active at *now* (``from <= now <= to``);
    ``"false"`` keeps records that are expired or not started yet.
    """
    _require_datetime("date_between", from_field)
    _require_datetime("date_between", to_field)
    if parse_bool(raw):
        return Compare(to_field, ComparisonOp.GE, now) & Compare(from_field, ComparisonOp.LE, now)
    return Compare(from_field, ComparisonOp.GE, now) | Compare(to_field, ComparisonOp.LE, now)


def build_in(field: FieldAccessor, raw: str, *, separator: str = ",") -> BaseSpecification[Any] | None:
    """OR of equalities; ``None`` (no filtering) for an empty list."""
    items = split_list(raw, separator)
    if not items:
        return None
    return any_of([Equals(field, _list_operand("in", field, item)) for item in items])


def build_not_in(field: FieldAccessor, raw: str, *, separator: str = ",") -> BaseSpecification[Any] | None:
    """AND of inequalities; ``None`` (no filtering) for an empty list."""
    items = split_list(raw, separator)
    if not items:
        return None
    return all_of([NotEquals(field, _list_operand("notin", field, item)) for item in items])


__all__ = [
    "Builder",
    "build_contains",
    "build_date_equal",
    "build_date_from",
    "build_date_range",
    "build_date_to",
    "build_datetime_from",
    "build_datetime_to",
    "build_equal",
    "build_in",
    "build_not_equal",
    "build_not_in",
    "build_null_test",
]
