"""SQLAlchemy adapter – compile specification trees into SQL expressions."""
from __future__ import annotations

import operator
from typing import Any

from sqlalchemy import String, and_, func, not_, or_, true
from sqlalchemy.sql.elements import ColumnElement

from listquery.kernel.ddd import (
    And,
    BaseSpecification,
    Compare,
    ComparisonOp,
    Contains,
    Equals,
    IsNull,
    MatchAll,
    Not,
    NotEquals,
    Or,
)
from listquery.kernel.errors import FilterCriteriaError
from listquery.kernel.fields import FieldAccessor

_OPERATORS = {
    ComparisonOp.GE: operator.ge,
    ComparisonOp.LE: operator.le,
    ComparisonOp.GT: operator.gt,
    ComparisonOp.LT: operator.lt,
}


def _column(model: type, field: FieldAccessor) -> Any:
    return getattr(model, field.attr)


def compile_predicate(spec: BaseSpecification[Any], model: type) -> ColumnElement[bool]:
    """Translate *spec* into a WHERE-clause expression on *model*'s columns."""
    match spec:
        case MatchAll():
            return true()
        case Equals(field=field, value=value):
            return _column(model, field) == value
        case NotEquals(field=field, value=value):
            return _column(model, field).is_distinct_from(value)
        case Contains(field=field, value=value):
            return func.lower(_column(model, field), type_=String).contains(value, autoescape=True)
        case Compare(field=field, op=op, value=value):
            return _OPERATORS[op](_column(model, field), value)
        case IsNull(field=field):
            return _column(model, field).is_(None)
        case And(left=left, right=right):
            return and_(compile_predicate(left, model), compile_predicate(right, model))
        case Or(left=left, right=right):
            return or_(compile_predicate(left, model), compile_predicate(right, model))
        case Not(spec=inner):
            return not_(compile_predicate(inner, model))
        case _:
            raise FilterCriteriaError(f"Cannot compile {type(spec).__name__} to SQL")


__all__ = ["compile_predicate"]
