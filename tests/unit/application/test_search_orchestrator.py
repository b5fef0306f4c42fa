"""Unit tests for SearchOrchestrator – counting, filtering, sorting and paging."""

from __future__ import annotations

import dataclasses

import pytest

from listquery.application.search import (
    InMemoryQueryable,
    SearchOrchestrator,
    SearchRequest,
    SortSpec,
)
from listquery.config.settings import SearchSettings
from listquery.kernel.errors import FieldNotFoundError
from listquery.kernel.fields import SchemaRegistry


@dataclasses.dataclass
class Row:
    id: int


@dataclasses.dataclass
class Note:
    id: int
    text: str
    is_deleted: bool = False


def ids(items) -> list[int]:
    return [item.id for item in items]


@pytest.fixture
def orchestrator(clock) -> SearchOrchestrator:
    return SearchOrchestrator(clock=clock)


@pytest.fixture
def rows() -> InMemoryQueryable[Row]:
    return InMemoryQueryable([Row(n) for n in range(25)], SchemaRegistry().get(Row))


# ---------------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------------


class TestCounts:
    def test_total_includes_soft_deleted_rows(self, orchestrator) -> None:
        notes = InMemoryQueryable(
            [Note(1, "kept"), Note(2, "gone", is_deleted=True)],
            SchemaRegistry().get(Note),
        )
        result = orchestrator.search(notes, SearchRequest())
        assert result.filtered_count == 1
        assert result.total_count == 2
        assert ids(result.items()) == [1]

    def test_counts_do_not_depend_on_paging(self, orchestrator, doctor_query) -> None:
        request = SearchRequest(page=1, per_page=2, sort=SortSpec("id"), filter={"equal_Active": "true"})
        result = orchestrator.search(doctor_query, request)
        assert result.filtered_count == 3
        assert result.total_count == 5
        assert ids(result.items()) == [4]


# ---------------------------------------------------------------------------
# Paging
# ---------------------------------------------------------------------------


class TestPaging:
    def test_last_partial_page(self, orchestrator, rows) -> None:
        result = orchestrator.search(rows, SearchRequest(page=2, per_page=10, sort=SortSpec("Id")))
        assert ids(result.items()) == [20, 21, 22, 23, 24]
        assert result.filtered_count == 25

    def test_first_page(self, orchestrator, rows) -> None:
        result = orchestrator.search(rows, SearchRequest(page=0, per_page=10, sort=SortSpec("Id")))
        assert ids(result.items()) == list(range(10))

    def test_page_past_the_end_is_empty(self, orchestrator, rows) -> None:
        result = orchestrator.search(rows, SearchRequest(page=7, per_page=10))
        assert result.items() == []
        assert result.filtered_count == 25

    def test_empty_filter_result_pages_cleanly(self, orchestrator, rows) -> None:
        result = orchestrator.search(rows, SearchRequest(page=0, per_page=10, filter={"in_Id": "99"}))
        assert result.items() == []
        assert result.filtered_count == 0

    def test_no_paging_without_both_values(self, orchestrator, rows) -> None:
        assert len(orchestrator.search(rows, SearchRequest(page=1)).items()) == 25
        assert len(orchestrator.search(rows, SearchRequest(per_page=5)).items()) == 25


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class TestComposition:
    def test_filter_sort_page(self, orchestrator, doctor_query) -> None:
        request = SearchRequest(page=0, per_page=2, sort=SortSpec("rating", "DESC"))
        result = orchestrator.search(doctor_query, request)
        assert ids(result.items()) == [4, 1]
        assert (result.filtered_count, result.total_count) == (4, 5)

    def test_to_response(self, orchestrator, doctor_query) -> None:
        request = SearchRequest(page=0, per_page=3, filter={"q": "kowal"})
        response = orchestrator.search(doctor_query, request).to_response()
        assert ids(response.items) == [2, 3]
        assert response.filtered_count == 2
        assert response.total_count == 5
        assert response.to_dict()["perPage"] == 3

    def test_unknown_sort_field(self, orchestrator, doctor_query) -> None:
        with pytest.raises(FieldNotFoundError):
            orchestrator.search(doctor_query, SearchRequest(sort=SortSpec("salary")))

    def test_date_window_uses_injected_clock(self, orchestrator, doctor_query) -> None:
        request = SearchRequest(filter={"date_between_ValidFrom%ValidTo": "true"})
        assert ids(orchestrator.search(doctor_query, request).items()) == [1, 4]


# ---------------------------------------------------------------------------
# Lookup by identifier
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class Keyed:
    key: int


class TestFindById:
    def test_found(self, orchestrator, doctor_query) -> None:
        assert orchestrator.find_by_id(doctor_query, "3").last_name == "Kowalska"

    def test_soft_deleted_record_is_hidden(self, orchestrator, doctor_query) -> None:
        assert orchestrator.find_by_id(doctor_query, "5") is None

    def test_missing(self, orchestrator, doctor_query) -> None:
        assert orchestrator.find_by_id(doctor_query, "42") is None

    def test_identifier_candidates_come_from_settings(self) -> None:
        keyed = InMemoryQueryable([Keyed(1), Keyed(2)], SchemaRegistry().get(Keyed))
        default = SearchOrchestrator()
        with pytest.raises(FieldNotFoundError):
            default.find_by_id(keyed, "2")
        custom = SearchOrchestrator(settings=SearchSettings(id_field_candidates=["Id", "Key"]))
        assert custom.find_by_id(keyed, "2") == Keyed(2)
