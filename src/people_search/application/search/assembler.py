"""Application search – map raw backend output onto SearchResultPage."""
from __future__ import annotations

import math

from people_search.application.search.executor import RawFacet, RawSearchResponse
from people_search.application.search.model import Facet, FacetValue, SearchResultPage
from people_search.application.search.request import SearchRequest
from people_search.kernel.errors import MalformedCursorError

__all__ = ["assemble_result", "compute_current_page", "parse_cursor", "resolve_page_size"]


def parse_cursor(field: str, raw: object) -> int:
    """Parse a backend cursor string; there is no safe default for a bad one."""
    try:
        return int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise MalformedCursorError(field, raw, cause=exc) from exc


def resolve_page_size(page_size: int | None) -> int | None:
    # 0 is the "not set" sentinel, not an empty page
    return page_size if page_size else None


def compute_current_page(page_size: int | None, end_cursor: int) -> int:
    """Return ``ceil(end_cursor / page_size)``, or 0 when unpaged."""
    if not page_size:
        return 0
    return math.ceil(end_cursor / page_size)


def _facet_from_raw(raw: RawFacet) -> Facet:
    return Facet(
        name=raw.name,
        values=tuple(FacetValue(value=v.value, count=v.count) for v in raw.values),
    )


def assemble_result(response: RawSearchResponse, request: SearchRequest) -> SearchResultPage:
    """Build the public result page; no selection merge or correction here."""
    start_cursor = parse_cursor("startCursor", response.page_info.start_cursor)
    end_cursor = parse_cursor("endCursor", response.page_info.end_cursor)
    page_size = resolve_page_size(request.page_size)
    return SearchResultPage(
        people=tuple(response.items),
        facets=[_facet_from_raw(f) for f in response.facets],
        total_count=response.total_count,
        start_cursor=start_cursor,
        end_cursor=end_cursor,
        has_next_page=response.page_info.has_next_page,
        has_previous_page=response.page_info.has_previous_page,
        page_size=page_size,
        current_page=compute_current_page(page_size, end_cursor),
        keyword=request.query,
        filter_facets=request.filter_facets,
    )
