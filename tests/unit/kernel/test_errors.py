"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

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


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "listquery_error"
        assert str(err) == "[listquery_error] something went wrong"

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_to_dict_is_a_failed_response(self) -> None:
        assert BaseError("oops", code="oops", x=1).to_dict() == {
            "succeeded": False,
            "code": "oops",
            "message": "oops",
            "detail": {"x": 1},
        }

    def test_empty_detail_is_omitted(self) -> None:
        assert "detail" not in BaseError("m").to_dict()


class TestQueryErrors:
    def test_field_not_found(self) -> None:
        err = FieldNotFoundError("Doctor", "Salary")
        assert isinstance(err, NotFoundError)
        assert isinstance(err, QueryError)
        assert err.code == "field_not_found"
        assert (err.entity, err.field) == ("Doctor", "Salary")
        assert err.detail == {"entity": "Doctor", "field": "Salary"}
        assert "Salary" in err.message

    def test_unsupported_type(self) -> None:
        err = UnsupportedTypeError("equal", "Tags", "other")
        assert isinstance(err, FilterCriteriaError)
        assert err.code == "unsupported_type"
        assert err.detail["type"] == "other"
        assert "Tags" in err.message

    def test_parse_error(self) -> None:
        err = ParseError("abc", "int32")
        assert (err.value, err.expected, err.code) == ("abc", "int32", "parse_error")

    @pytest.mark.parametrize("err", [ParseError("x", "uuid"), UnsupportedTypeError("in", "F", "bool")])
    def test_filter_errors_share_base(self, err: BaseError) -> None:
        with pytest.raises(FilterCriteriaError):
            raise err


class TestRequestErrors:
    def test_validation_error_for_parameter(self) -> None:
        err = ValidationError.for_parameter("sort", "not valid JSON")
        assert err.code == "invalid_request"
        assert err.errors == [{"field": "sort", "reason": "not valid JSON"}]
        assert err.to_dict()["errors"] == err.errors

    def test_not_found(self) -> None:
        err = NotFoundError("Doctor", 7)
        assert err.message == "Doctor '7' not found"
        assert err.detail == {"entity": "Doctor", "key": 7}
        assert NotFoundError("Doctor").message == "Doctor not found"
