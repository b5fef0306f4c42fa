"""Unit tests for raw operand parsing."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import pytest

from listquery.application.search.operands import (
    is_sentinel,
    parse_bool,
    parse_date,
    parse_datetime,
    parse_float,
    parse_int,
    parse_uuid,
    split_list,
)
from listquery.kernel.errors import ParseError
from listquery.kernel.fields import FieldType


class TestParseBool:
    @pytest.mark.parametrize(("raw", "expected"), [("true", True), ("False", False), (" TRUE ", True)])
    def test_valid(self, raw: str, expected: bool) -> None:
        assert parse_bool(raw) is expected

    @pytest.mark.parametrize("raw", ["1", "yes", ""])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ParseError):
            parse_bool(raw)


class TestParseNumbers:
    def test_int32(self) -> None:
        assert parse_int("42") == 42

    def test_int32_overflow(self) -> None:
        with pytest.raises(ParseError):
            parse_int("2147483648")

    def test_int64_range(self) -> None:
        assert parse_int("2147483648", FieldType.INT64) == 2147483648

    def test_int_garbage(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_int("4x")
        assert exc_info.value.expected == "int32"

    def test_float(self) -> None:
        assert parse_float("4.25") == 4.25
        with pytest.raises(ParseError):
            parse_float("four")


class TestParseUuid:
    def test_valid(self) -> None:
        assert parse_uuid("00000000-0000-0000-0000-000000000007") == uuid.UUID(int=7)

    def test_invalid(self) -> None:
        with pytest.raises(ParseError):
            parse_uuid("not-a-guid")


class TestParseDates:
    def test_date_uses_first_ten_characters(self) -> None:
        assert parse_date("2024-05-01T13:45:00.000Z") == datetime(2024, 5, 1)

    def test_date_invalid(self) -> None:
        with pytest.raises(ParseError):
            parse_date("05/01/2024")

    def test_date_too_short(self) -> None:
        with pytest.raises(ParseError):
            parse_date("2024-05")

    def test_datetime_keeps_time(self) -> None:
        assert parse_datetime("2024-05-01T13:45:10") == datetime(2024, 5, 1, 13, 45, 10)

    def test_datetime_with_offset_becomes_naive_local(self) -> None:
        expected = datetime(2024, 5, 1, 12, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
        assert parse_datetime("2024-05-01T12:00:00Z") == expected
        assert parse_datetime("2024-05-01T14:00:00+02:00") == expected
        assert parse_datetime("2024-05-01T12:00:00Z").tzinfo is None

    def test_datetime_invalid(self) -> None:
        with pytest.raises(ParseError):
            parse_datetime("yesterday")


class TestHelpers:
    def test_sentinels(self) -> None:
        assert is_sentinel("00000000-0000-0000-0000-000000000000")
        assert is_sentinel("-2147483648")
        assert not is_sentinel("0")

    def test_split_list_drops_blanks(self) -> None:
        assert split_list("1, 2,,3 ,") == ["1", "2", "3"]
        assert split_list("") == []
        assert split_list("a|b", "|") == ["a", "b"]
