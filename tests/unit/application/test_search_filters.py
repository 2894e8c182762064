"""Unit tests for field filter construction and executor variables."""
from __future__ import annotations

import pytest

from people_search.application.search import (
    STRUCTURAL_FILTERS,
    FieldFilter,
    SearchRequest,
    build_field_filters,
    build_variables,
    canonical_root_id,
)
from people_search.kernel.errors import ValidationError
from people_search.testing.fakes import ROOT_ITEM_ID


def _request(**kwargs) -> SearchRequest:
    kwargs.setdefault("language", "en")
    kwargs.setdefault("root_item_id", ROOT_ITEM_ID)
    return SearchRequest(**kwargs)


class TestBuildFieldFilters:
    def test_one_filter_per_selected_value_then_structural(self) -> None:
        filters = build_field_filters({"personyear": ["2020", "2021"]})
        assert filters == [
            FieldFilter("personyear", "2020"),
            FieldFilter("personyear", "2021"),
            FieldFilter("_templatename", "Person"),
            FieldFilter("ismvp", "true"),
        ]

    def test_empty_selection_yields_structural_only(self) -> None:
        assert build_field_filters({}) == list(STRUCTURAL_FILTERS)
        assert build_field_filters(None) == list(STRUCTURAL_FILTERS)

    def test_mapping_order_preserved_across_names(self) -> None:
        filters = build_field_filters({"personaward": ["Technology"], "personyear": ["2022"]})
        assert [f.name for f in filters[:2]] == ["personaward", "personyear"]

    def test_duplicates_are_not_removed(self) -> None:
        filters = build_field_filters({"personyear": ["2020", "2020"]})
        assert filters[:2] == [FieldFilter("personyear", "2020")] * 2

    def test_empty_value_list_emits_nothing(self) -> None:
        assert build_field_filters({"personyear": []}) == list(STRUCTURAL_FILTERS)

    def test_bare_string_value_is_one_filter(self) -> None:
        filters = build_field_filters({"personyear": "2020"})
        assert filters == [FieldFilter("personyear", "2020"), *STRUCTURAL_FILTERS]

    def test_structural_filters_are_appended_last(self) -> None:
        filters = build_field_filters({"personaward": ["Community"]})
        assert tuple(filters[-2:]) == STRUCTURAL_FILTERS


class TestCanonicalRootId:
    def test_braced_guid_becomes_lowercase_hex(self) -> None:
        assert canonical_root_id(ROOT_ITEM_ID) == "7c9f1b2e3d4a4f5b9c6d8e7f6a5b4c3d"

    def test_already_canonical_is_unchanged(self) -> None:
        assert canonical_root_id("7c9f1b2e3d4a4f5b9c6d8e7f6a5b4c3d") == "7c9f1b2e3d4a4f5b9c6d8e7f6a5b4c3d"

    def test_invalid_guid_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            canonical_root_id("not-a-guid")
        assert exc_info.value.errors[0]["field"] == "root_item_id"


class TestBuildVariables:
    def test_variable_names_and_values(self) -> None:
        request = _request(
            query="jane",
            page_size=5,
            cursor_after=10,
            facets={"personyear": ["2021"]},
            facet_on=("personaward",),
        )
        variables = build_variables(request)
        assert variables["language"] == "en"
        assert variables["rootItem"] == "7c9f1b2e3d4a4f5b9c6d8e7f6a5b4c3d"
        assert variables["pageSize"] == 5
        assert variables["cursorValueToGetItemsAfter"] == "10"
        assert variables["query"] == "jane"
        assert variables["facetOn"] == ["personaward"]
        assert variables["fieldsEqual"][0] == {"name": "personyear", "value": "2021"}
        assert len(variables["fieldsEqual"]) == 3

    def test_absent_cursor_is_none(self) -> None:
        assert build_variables(_request())["cursorValueToGetItemsAfter"] is None

    def test_zero_cursor_is_stringified(self) -> None:
        assert build_variables(_request(cursor_after=0))["cursorValueToGetItemsAfter"] == "0"

    def test_explicit_filters_are_used(self) -> None:
        variables = build_variables(_request(), [FieldFilter("a", "b")])
        assert variables["fieldsEqual"] == [{"name": "a", "value": "b"}]
