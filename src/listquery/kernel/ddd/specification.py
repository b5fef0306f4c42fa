"""Specification pattern: composable predicate AST over entity fields.

Every node is a frozen dataclass, so two predicates built from the same
filter compare equal. Nodes evaluate themselves in memory through
``is_satisfied_by``; query backends (see ``listquery.adapters.sqlalchemy``)
walk the same tree to produce their native query form.

Example::

    name = schema.require("LastName")
    spec = Contains(name, "kow") & ~IsNull(schema.require("UpdatedDate"))
    matching = [d for d in doctors if spec.is_satisfied_by(d)]
"""

from __future__ import annotations

import abc
import dataclasses
import operator
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from listquery.kernel.fields import FieldAccessor
from listquery.kernel.time import as_naive_local

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications with &, | and ~ overloads."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    # Named combinators ------------------------------------------------
    def and_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return self & other

    def or_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return self | other

    def not_(self) -> "BaseSpecification[T]":
        return ~self

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        if isinstance(self, MatchAll):
            return other
        if isinstance(other, MatchAll):
            return self
        return And(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return Or(self, other)

    def __invert__(self) -> "BaseSpecification[T]":
        return Not(self)


Specification = BaseSpecification


class ComparisonOp(str, Enum):
    GE = ">="
    LE = "<="
    GT = ">"
    LT = "<"


_COMPARATORS = {
    ComparisonOp.GE: operator.ge,
    ComparisonOp.LE: operator.le,
    ComparisonOp.GT: operator.gt,
    ComparisonOp.LT: operator.lt,
}


@dataclasses.dataclass(frozen=True, eq=True)
class MatchAll(BaseSpecification[Any]):
    """Neutral element of conjunction."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return True


@dataclasses.dataclass(frozen=True)
class Equals(BaseSpecification[Any]):
    field: FieldAccessor
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.field.get(candidate) == self.value


@dataclasses.dataclass(frozen=True)
class NotEquals(BaseSpecification[Any]):
    """Null-aware inequality: a null field differs from every non-null value."""

    field: FieldAccessor
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.field.get(candidate) != self.value


@dataclasses.dataclass(frozen=True)
class Contains(BaseSpecification[Any]):
    """Case-insensitive substring test; ``value`` is stored lower-cased."""

    field: FieldAccessor
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.lower())

    def is_satisfied_by(self, candidate: Any) -> bool:
        current = self.field.get(candidate)
        if current is None:
            return False
        return self.value in str(current).lower()


@dataclasses.dataclass(frozen=True)
class Compare(BaseSpecification[Any]):
    field: FieldAccessor
    op: ComparisonOp
    value: Any

    def is_satisfied_by(self, candidate: Any) -> bool:
        current = self.field.get(candidate)
        if current is None or self.value is None:
            return False
        value = self.value
        if isinstance(current, datetime) and isinstance(value, datetime):
            current, value = as_naive_local(current), as_naive_local(value)
        return _COMPARATORS[self.op](current, value)


@dataclasses.dataclass(frozen=True)
class IsNull(BaseSpecification[Any]):
    field: FieldAccessor

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.field.get(candidate) is None


@dataclasses.dataclass(frozen=True)
class And(BaseSpecification[Any]):
    left: BaseSpecification[Any]
    right: BaseSpecification[Any]

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


@dataclasses.dataclass(frozen=True)
class Or(BaseSpecification[Any]):
    left: BaseSpecification[Any]
    right: BaseSpecification[Any]

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


@dataclasses.dataclass(frozen=True)
class Not(BaseSpecification[Any]):
    spec: BaseSpecification[Any]

    def is_satisfied_by(self, candidate: Any) -> bool:
        return not self.spec.is_satisfied_by(candidate)


def all_of(specs: list[BaseSpecification[Any]]) -> BaseSpecification[Any]:
    """Fold *specs* with AND; an empty list yields :class:`MatchAll`."""
    result: BaseSpecification[Any] = MatchAll()
    for spec in specs:
        result = result & spec
    return result


def any_of(specs: list[BaseSpecification[Any]]) -> BaseSpecification[Any]:
    """Fold *specs* with OR. *specs* must not be empty."""
    result = specs[0]
    for spec in specs[1:]:
        result = result | spec
    return result


__all__ = [
    "And",
    "BaseSpecification",
    "Compare",
    "ComparisonOp",
    "Contains",
    "Equals",
    "IsNull",
    "MatchAll",
    "Not",
    "NotEquals",
    "Or",
    "Specification",
    "all_of",
    "any_of",
]
