"""Kernel DDD – specification (predicate) building blocks."""
from listquery.kernel.ddd.specification import (
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
    Specification,
    all_of,
    any_of,
)

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
