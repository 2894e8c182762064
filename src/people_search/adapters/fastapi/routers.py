"""FastAPI adapter – people search router."""
from __future__ import annotations

from typing import Any, Protocol

from fastapi import APIRouter, Query

from people_search.application.search.model import SearchResultPage
from people_search.application.search.request import SearchRequest
from people_search.kernel.errors import ValidationError

__all__ = ["PeopleSearchRouter", "parse_facet_params"]


class Searcher(Protocol):
    async def search(self, request: SearchRequest) -> SearchResultPage: ...


def parse_facet_params(params: list[str]) -> dict[str, list[str]]:
    """Parse repeated ``name:value`` parameters into a selection mapping."""
    selection: dict[str, list[str]] = {}
    bad: list[dict[str, Any]] = []
    for raw in params:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip() or not value.strip():
            bad.append({"field": "facet", "value": raw})
            continue
        values = selection.setdefault(name.strip(), [])
        if value.strip() not in values:
            values.append(value.strip())
    if bad:
        raise ValidationError("facet parameters must look like 'name:value'", errors=bad)
    return selection


def PeopleSearchRouter(
    searcher: Searcher,
    request_factory: Any,
    path: str = "/people/search",
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a router exposing ``GET {path}``.

    *request_factory* builds a :class:`SearchRequest` from keyword overrides,
    normally ``PeopleSearchService.create_search_request``.
    """
    router = APIRouter(tags=tags or ["search"])

    @router.get(path)
    async def search_people(
        q: str | None = Query(default=None, description="Free-text query"),
        page_size: int | None = Query(default=None, ge=0, description="Items per page, 0 for unpaged"),
        after: int | None = Query(default=None, ge=0, description="Cursor to read items after"),
        language: str | None = Query(default=None),
        facet: list[str] = Query(default=[], description="Selected facet value as name:value"),
        facet_on: list[str] | None = Query(default=None, description="Facet dimensions to aggregate"),
        editing: bool = Query(default=False),
    ) -> dict[str, Any]:
        overrides: dict[str, Any] = {
            "query": q,
            "cursor_after": after,
            "facets": parse_facet_params(facet),
            "is_editing_mode": editing,
        }
        if page_size is not None:
            overrides["page_size"] = page_size
        if language:
            overrides["language"] = language
        if facet_on:
            overrides["facet_on"] = tuple(facet_on)
        page = await searcher.search(request_factory(**overrides))
        return page.to_dict()

    return router
