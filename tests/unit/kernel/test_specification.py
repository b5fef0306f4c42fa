"""Unit tests for the specification (predicate) AST."""

from __future__ import annotations

from datetime import datetime

from listquery.kernel.ddd import (
    And,
    Compare,
    ComparisonOp,
    Contains,
    Equals,
    IsNull,
    MatchAll,
    Not,
    NotEquals,
    Or,
    all_of,
    any_of,
)
from listquery.kernel.fields import FieldAccessor, FieldType

NAME = FieldAccessor.item("name", FieldType.STRING)
SCORE = FieldAccessor.item("score", FieldType.INT32, nullable=True)
SEEN = FieldAccessor.item("seen", FieldType.DATETIME, nullable=True)


class TestLeaves:
    def test_equals(self) -> None:
        assert Equals(SCORE, 3).is_satisfied_by({"score": 3})
        assert not Equals(SCORE, 3).is_satisfied_by({"score": 4})

    def test_equals_none_matches_null(self) -> None:
        assert Equals(SCORE, None).is_satisfied_by({"score": None})

    def test_not_equals_treats_null_as_different(self) -> None:
        assert NotEquals(SCORE, 3).is_satisfied_by({"score": None})
        assert not NotEquals(SCORE, 3).is_satisfied_by({"score": 3})

    def test_contains_is_case_insensitive(self) -> None:
        spec = Contains(NAME, "NoW")
        assert spec.value == "now"
        assert spec.is_satisfied_by({"name": "Nowak"})
        assert not spec.is_satisfied_by({"name": "Kowal"})

    def test_contains_never_matches_null(self) -> None:
        assert not Contains(NAME, "a").is_satisfied_by({"name": None})

    def test_compare(self) -> None:
        day = datetime(2024, 5, 1)
        assert Compare(SEEN, ComparisonOp.GE, day).is_satisfied_by({"seen": day})
        assert not Compare(SEEN, ComparisonOp.GT, day).is_satisfied_by({"seen": day})
        assert Compare(SEEN, ComparisonOp.LT, day).is_satisfied_by({"seen": datetime(2024, 4, 30)})

    def test_compare_null_is_false(self) -> None:
        assert not Compare(SEEN, ComparisonOp.LE, datetime(2024, 5, 1)).is_satisfied_by({"seen": None})

    def test_compare_mixes_aware_and_naive_datetimes(self) -> None:
        naive = datetime(2024, 5, 1, 12)
        aware = naive.astimezone()
        assert Compare(SEEN, ComparisonOp.GE, naive).is_satisfied_by({"seen": aware})
        assert Compare(SEEN, ComparisonOp.LE, aware).is_satisfied_by({"seen": naive})
        assert not Compare(SEEN, ComparisonOp.GT, aware).is_satisfied_by({"seen": naive})

    def test_is_null(self) -> None:
        assert IsNull(SEEN).is_satisfied_by({"seen": None})
        assert not IsNull(SEEN).is_satisfied_by({"seen": datetime(2024, 1, 1)})


class TestCombinators:
    def test_operators_build_nodes(self) -> None:
        a, b = Equals(SCORE, 1), Equals(SCORE, 2)
        assert (a & b) == And(a, b)
        assert (a | b) == Or(a, b)
        assert ~a == Not(a)

    def test_named_combinators(self) -> None:
        a, b = Equals(SCORE, 1), Equals(SCORE, 2)
        assert a.and_(b) == And(a, b)
        assert a.or_(b) == Or(a, b)
        assert a.not_() == Not(a)

    def test_match_all_is_neutral_for_and(self) -> None:
        spec = Equals(SCORE, 1)
        assert (MatchAll() & spec) is spec
        assert (spec & MatchAll()) is spec

    def test_all_of_empty_is_match_all(self) -> None:
        assert all_of([]) == MatchAll()
        assert MatchAll().is_satisfied_by(object())

    def test_any_of(self) -> None:
        spec = any_of([Equals(SCORE, 1), Equals(SCORE, 2)])
        assert spec.is_satisfied_by({"score": 2})
        assert not spec.is_satisfied_by({"score": 3})

    def test_equal_trees_compare_equal(self) -> None:
        assert Contains(NAME, "a") & IsNull(SEEN) == Contains(NAME, "A") & IsNull(SEEN)
