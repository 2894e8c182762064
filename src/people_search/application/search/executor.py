"""Application search – QueryExecutor port and raw backend shapes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

from people_search.application.search.model import Person
from people_search.kernel.errors import BackendExecutionError

__all__ = [
    "PageInfo",
    "QueryExecutor",
    "RawFacet",
    "RawFacetValue",
    "RawSearchResponse",
    "parse_person",
    "parse_search_response",
]


@dataclass(frozen=True)
class RawFacetValue:
    value: str
    count: int


@dataclass(frozen=True)
class RawFacet:
    name: str
    values: tuple[RawFacetValue, ...] = ()


@dataclass(frozen=True)
class PageInfo:
    """Pagination block as reported by the backend; cursors are strings."""
    start_cursor: str
    end_cursor: str
    has_next_page: bool = False
    has_previous_page: bool = False


@dataclass(frozen=True)
class RawSearchResponse:
    items: tuple[Person, ...]
    facets: tuple[RawFacet, ...]
    total_count: int
    page_info: PageInfo
    extensions: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class QueryExecutor(Protocol):
    """Executes a parameterized search against the backend.

    Implementations own timeouts and retries and raise
    :class:`~people_search.kernel.errors.BackendExecutionError` on failure.
    """

    async def execute_search(
        self,
        editing_mode: bool,
        template_id: str,
        variables: Mapping[str, Any],
    ) -> RawSearchResponse: ...


def _field_value(node: Any) -> str:
    if isinstance(node, dict):
        value = node.get("value")
        return "" if value is None else str(value)
    return "" if node is None else str(node)


def parse_person(item: Mapping[str, Any]) -> Person:
    country = item.get("country") or {}
    target = country.get("targetItem") or {}
    return Person(
        first_name=_field_value(item.get("firstName")),
        last_name=_field_value(item.get("lastName")),
        email=_field_value(item.get("email")),
        introduction=_field_value(item.get("introduction")),
        url=item.get("url") or "",
        country=target.get("name") or "",
        mvp_awards=item.get("mvpAwards") or "",
    )


def parse_search_response(payload: Mapping[str, Any]) -> RawSearchResponse:
    """Convert a GraphQL ``data`` payload into a :class:`RawSearchResponse`.

    Raises :class:`BackendExecutionError` when the ``search`` block is missing
    or malformed. Cursor strings are passed through untouched.
    """
    try:
        search = payload["search"]
        results = search["results"]
        page_info = results["pageInfo"]
        items = tuple(parse_person(entry.get("item") or {}) for entry in results.get("items") or [])
        facets = tuple(
            RawFacet(
                name=facet["name"],
                values=tuple(
                    RawFacetValue(value=str(v["value"]), count=int(v.get("count") or 0))
                    for v in facet.get("values") or []
                ),
            )
            for facet in search.get("facets") or []
        )
        return RawSearchResponse(
            items=items,
            facets=facets,
            total_count=int(results.get("totalCount") or 0),
            page_info=PageInfo(
                start_cursor=page_info.get("startCursor"),
                end_cursor=page_info.get("endCursor"),
                has_next_page=bool(page_info.get("hasNextPage")),
                has_previous_page=bool(page_info.get("hasPreviousPage")),
            ),
        )
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise BackendExecutionError(
            f"Unexpected search response shape: {exc!r}",
            code="unexpected_response",
            cause=exc,
        ) from exc
