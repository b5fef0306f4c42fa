"""Kernel errors – public re-export surface.

Hierarchy::

    BaseError
    ├── ValidationError             (request.py)
    ├── NotFoundError               (request.py)
    │   └── FieldNotFoundError      (query.py, also a QueryError)
    └── QueryError                  (query.py)
        └── FilterCriteriaError
            ├── UnsupportedTypeError
            └── ParseError
"""

from listquery.kernel.errors.base import BaseError
from listquery.kernel.errors.query import (
    FieldNotFoundError,
    FilterCriteriaError,
    ParseError,
    QueryError,
    UnsupportedTypeError,
)
from listquery.kernel.errors.request import NotFoundError, ValidationError

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
