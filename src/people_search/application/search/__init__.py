"""Application search – faceted people search with facet count correction."""
from people_search.application.search.assembler import assemble_result, compute_current_page, parse_cursor
from people_search.application.search.correction import CorrectionReport, FacetCountCorrector, splice_facet
from people_search.application.search.executor import (
    PageInfo,
    QueryExecutor,
    RawFacet,
    RawFacetValue,
    RawSearchResponse,
    parse_search_response,
)
from people_search.application.search.filters import STRUCTURAL_FILTERS, build_field_filters
from people_search.application.search.model import Facet, FacetValue, FieldFilter, Person, SearchResultPage
from people_search.application.search.ordering import DEFAULT_FACET_POLICIES, FacetOrderPolicy, order_facet, order_facets
from people_search.application.search.query import PEOPLE_SEARCH_ADVANCED, build_variables, canonical_root_id
from people_search.application.search.request import DEFAULT_FACET_ON, SearchRequest
from people_search.application.search.selection import merge_selection, merge_selections
from people_search.application.search.service import CorrectionFailurePolicy, PeopleSearchService

__all__ = [
    "DEFAULT_FACET_ON",
    "DEFAULT_FACET_POLICIES",
    "PEOPLE_SEARCH_ADVANCED",
    "STRUCTURAL_FILTERS",
    "CorrectionFailurePolicy",
    "CorrectionReport",
    "Facet",
    "FacetCountCorrector",
    "FacetOrderPolicy",
    "FacetValue",
    "FieldFilter",
    "PageInfo",
    "PeopleSearchService",
    "Person",
    "QueryExecutor",
    "RawFacet",
    "RawFacetValue",
    "RawSearchResponse",
    "SearchRequest",
    "SearchResultPage",
    "assemble_result",
    "build_field_filters",
    "build_variables",
    "canonical_root_id",
    "compute_current_page",
    "merge_selection",
    "merge_selections",
    "order_facet",
    "order_facets",
    "parse_cursor",
    "parse_search_response",
    "splice_facet",
]
