"""Query errors – failures while compiling a search request."""

from __future__ import annotations

from typing import Any

from listquery.kernel.errors.base import BaseError
from listquery.kernel.errors.request import NotFoundError


class QueryError(BaseError):
    """A request could not be turned into a query."""

    default_code = "query_error"


class FieldNotFoundError(NotFoundError, QueryError):
    """The entity has no field with the requested public name."""

    default_code = "field_not_found"

    key_name = "field"

    def __init__(self, entity: str, field: str, **kwargs: Any) -> None:
        super().__init__(entity, field, message=f"{entity} has no field '{field}'", **kwargs)
        self.field = field


class FilterCriteriaError(QueryError):
    """A filter entry cannot be turned into a predicate."""

    default_code = "invalid_filter_criteria"


class UnsupportedTypeError(FilterCriteriaError):
    """The operator has no comparison rule for the field's declared type."""

    default_code = "unsupported_type"

    def __init__(self, operator: str, field: str, field_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Operator '{operator}' does not support field '{field}' of type {field_type}",
            operator=operator,
            field=field,
            type=field_type,
            **kwargs,
        )
        self.operator = operator
        self.field = field
        self.field_type = field_type


class ParseError(FilterCriteriaError):
    """An operand could not be parsed as the expected type."""

    default_code = "parse_error"

    def __init__(self, value: str, expected: str, **kwargs: Any) -> None:
        super().__init__(f"Cannot parse {value!r} as {expected}", value=value, expected=expected, **kwargs)
        self.value = value
        self.expected = expected


__all__ = [
    "FieldNotFoundError",
    "FilterCriteriaError",
    "ParseError",
    "QueryError",
    "UnsupportedTypeError",
]
