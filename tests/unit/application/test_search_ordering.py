"""Unit tests for facet display ordering."""
from __future__ import annotations

from people_search.application.search import (
    DEFAULT_FACET_POLICIES,
    Facet,
    FacetOrderPolicy,
    FacetValue,
    order_facet,
    order_facets,
)
from people_search.application.search.ordering import year_value


class TestYearValue:
    def test_numeric(self) -> None:
        assert year_value("2021") == 2021

    def test_non_numeric_is_zero(self) -> None:
        assert year_value("notayear") == 0
        assert year_value("") == 0


class TestOrderFacet:
    def test_personaward_descending_by_count_with_label(self) -> None:
        facet = Facet("personaward", (FacetValue("A", 3), FacetValue("B", 9)))
        ordered = order_facet(facet)
        assert [(v.value, v.count) for v in ordered.values] == [("B", 9), ("A", 3)]
        assert ordered.display_name == "Type"

    def test_personyear_descending_by_year_with_label(self) -> None:
        facet = Facet("personyear", tuple(FacetValue(v, 1) for v in ("2019", "2022", "notayear")))
        ordered = order_facet(facet)
        assert [v.value for v in ordered.values] == ["2022", "2019", "notayear"]
        assert ordered.display_name == "Year"

    def test_unknown_facet_is_unchanged(self) -> None:
        facet = Facet("country", (FacetValue("NL", 1), FacetValue("DK", 5)))
        assert order_facet(facet) is facet

    def test_equal_counts_keep_backend_order(self) -> None:
        facet = Facet("personaward", (FacetValue("X", 2), FacetValue("Y", 2), FacetValue("Z", 5)))
        assert [v.value for v in order_facet(facet).values] == ["Z", "X", "Y"]

    def test_selection_flags_survive_ordering(self) -> None:
        facet = Facet("personaward", (FacetValue("A", 1, selected=True), FacetValue("B", 2)))
        ordered = order_facet(facet)
        assert ordered.value("A").selected is True  # type: ignore[union-attr]

    def test_custom_policy_table(self) -> None:
        policies = {"country": FacetOrderPolicy("Country", lambda v: v.count)}
        facet = Facet("country", (FacetValue("NL", 1), FacetValue("DK", 5)))
        ordered = order_facet(facet, policies)
        assert [v.value for v in ordered.values] == ["DK", "NL"]
        assert ordered.display_name == "Country"

    def test_order_facets_applies_to_each(self) -> None:
        facets = [
            Facet("personyear", (FacetValue("2019", 1), FacetValue("2021", 1))),
            Facet("personaward", (FacetValue("A", 1), FacetValue("B", 2))),
        ]
        ordered = order_facets(facets)
        assert [f.display_name for f in ordered] == ["Year", "Type"]

    def test_default_policies_cover_award_and_year(self) -> None:
        assert set(DEFAULT_FACET_POLICIES) == {"personaward", "personyear"}
