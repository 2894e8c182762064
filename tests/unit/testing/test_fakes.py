"""Unit tests for the in-memory query executor fakes."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from people_search.application.search import QueryExecutor
from people_search.kernel.errors import BackendExecutionError
from people_search.testing.fakes import (
    FailingQueryExecutor,
    IndexedPerson,
    InMemoryQueryExecutor,
    sample_directory,
)


def _vars(**overrides: Any) -> dict[str, Any]:
    variables: dict[str, Any] = {
        "language": "en",
        "rootItem": "7c9f1b2e3d4a4f5b9c6d8e7f6a5b4c3d",
        "pageSize": None,
        "cursorValueToGetItemsAfter": None,
        "query": None,
        "fieldsEqual": [
            {"name": "_templatename", "value": "Person"},
            {"name": "ismvp", "value": "true"},
        ],
        "facetOn": ["personaward", "personyear"],
    }
    variables.update(overrides)
    return variables


def _run(executor: Any, **overrides: Any):
    return asyncio.run(executor.execute_search(False, "PeopleSearchAdvanced", _vars(**overrides)))


# ---------------------------------------------------------------------------
# IndexedPerson
# ---------------------------------------------------------------------------


class TestIndexedPerson:
    def test_structural_fields_added(self) -> None:
        entry = IndexedPerson.of("Jane", "Doe")
        assert entry.fields["_templatename"] == ("Person",)
        assert entry.fields["ismvp"] == ("true",)

    def test_multi_valued_fields(self) -> None:
        entry = IndexedPerson.of("Jane", "Doe", personyear=["2020", "2021"])
        assert entry.fields["personyear"] == ("2020", "2021")

    def test_person_derived(self) -> None:
        entry = IndexedPerson.of("Jane", "Doe", personaward="Technology")
        assert entry.person.email == "jane@example.com"
        assert entry.person.mvp_awards == "Technology"
        assert "jane doe" in entry.text()


# ---------------------------------------------------------------------------
# InMemoryQueryExecutor
# ---------------------------------------------------------------------------


class TestInMemoryQueryExecutor:
    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryQueryExecutor([]), QueryExecutor)

    def test_returns_everything_unpaged(self) -> None:
        response = _run(InMemoryQueryExecutor(sample_directory()))
        assert response.total_count == 6
        assert len(response.items) == 6
        assert response.page_info.start_cursor == "0"
        assert response.page_info.end_cursor == "6"
        assert response.page_info.has_next_page is False

    def test_filters_or_within_name(self) -> None:
        fields = _vars()["fieldsEqual"] + [
            {"name": "personaward", "value": "Community"},
            {"name": "personaward", "value": "Development"},
        ]
        response = _run(InMemoryQueryExecutor(sample_directory()), fieldsEqual=fields)
        assert response.total_count == 3

    def test_filters_and_across_names(self) -> None:
        fields = _vars()["fieldsEqual"] + [
            {"name": "personaward", "value": "Technology"},
            {"name": "personyear", "value": "2022"},
        ]
        response = _run(InMemoryQueryExecutor(sample_directory()), fieldsEqual=fields)
        assert [p.full_name for p in response.items] == ["Janet Lee"]

    def test_structural_filter_excludes_other_templates(self) -> None:
        other = IndexedPerson(person=IndexedPerson.of("Page", "Item").person, fields={"_templatename": ("Page",)})
        response = _run(InMemoryQueryExecutor([*sample_directory(), other]))
        assert response.total_count == 6

    def test_keyword_is_case_insensitive_substring(self) -> None:
        response = _run(InMemoryQueryExecutor(sample_directory()), query="JAN")
        assert response.total_count == 3

    def test_paging_window(self) -> None:
        response = _run(InMemoryQueryExecutor(sample_directory()), pageSize=2, cursorValueToGetItemsAfter="2")
        assert [p.full_name for p in response.items] == ["John Jameson", "Alice Brown"]
        assert response.page_info.start_cursor == "2"
        assert response.page_info.end_cursor == "4"
        assert response.page_info.has_next_page is True
        assert response.page_info.has_previous_page is True

    def test_facets_counted_over_all_matches(self) -> None:
        response = _run(InMemoryQueryExecutor(sample_directory()), pageSize=1)
        award = next(f for f in response.facets if f.name == "personaward")
        assert {v.value: v.count for v in award.values} == {"Community": 1, "Development": 2, "Technology": 3}

    def test_only_requested_facets(self) -> None:
        response = _run(InMemoryQueryExecutor(sample_directory()), facetOn=["personyear"])
        assert [f.name for f in response.facets] == ["personyear"]

    def test_records_calls(self) -> None:
        executor = InMemoryQueryExecutor(sample_directory())
        _run(executor, query="bob")
        assert len(executor.calls) == 1
        assert executor.calls[0].variables["query"] == "bob"
        assert executor.calls[0].template_id == "PeopleSearchAdvanced"


class TestFailingQueryExecutor:
    def test_fails_selected_queries(self) -> None:
        executor = FailingQueryExecutor(InMemoryQueryExecutor(sample_directory()), lambda v: v["query"] == "bob")
        with pytest.raises(BackendExecutionError) as exc_info:
            _run(executor, query="bob")
        assert exc_info.value.status_code == 503
        assert _run(executor, query="jane").total_count == 3
        assert len(executor.calls) == 2

    def test_custom_error(self) -> None:
        error = BackendExecutionError("timeout", code="backend_timeout")
        executor = FailingQueryExecutor(InMemoryQueryExecutor([]), lambda v: True, error=error)
        with pytest.raises(BackendExecutionError) as exc_info:
            _run(executor)
        assert exc_info.value is error
