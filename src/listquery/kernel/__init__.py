"""Kernel – framework-agnostic building blocks: fields, predicates, errors, time."""

from listquery.kernel.errors import (
    BaseError,
    FieldNotFoundError,
    FilterCriteriaError,
    NotFoundError,
    ParseError,
    QueryError,
    UnsupportedTypeError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "FieldNotFoundError",
    "FilterCriteriaError",
    "NotFoundError",
    "ParseError",
    "QueryError",
    "UnsupportedTypeError",
    "ValidationError",
]
