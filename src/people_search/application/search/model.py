"""Application search – result value objects.

``Person``, ``FacetValue`` and ``Facet`` are immutable; every pass over the
facets (selection merge, correction, ordering) returns new instances.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = ["Facet", "FacetValue", "FieldFilter", "Person", "SearchResultPage"]


@dataclass(frozen=True)
class FieldFilter:
    """Equality filter sent to the backend.

    Filters sharing a ``name`` are OR'd, filters on different names are AND'd.
    """
    name: str
    value: str

    def to_variable(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class Person:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    introduction: str = ""
    url: str = ""
    country: str = ""
    mvp_awards: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "introduction": self.introduction,
            "url": self.url,
            "country": self.country,
            "mvpAwards": self.mvp_awards,
        }


@dataclass(frozen=True)
class FacetValue:
    value: str
    count: int = 0
    selected: bool = False


@dataclass(frozen=True)
class Facet:
    name: str
    values: tuple[FacetValue, ...] = ()
    display_name: str | None = None

    def value(self, value: str) -> FacetValue | None:
        return next((v for v in self.values if v.value == value), None)

    @property
    def selected_values(self) -> list[str]:
        return [v.value for v in self.values if v.selected]


@dataclass
class SearchResultPage:
    """One page of people plus facets and cursor metadata."""

    people: Sequence[Person]
    facets: list[Facet]
    total_count: int
    start_cursor: int
    end_cursor: int
    has_next_page: bool
    has_previous_page: bool
    page_size: int | None
    current_page: int
    keyword: str | None = None
    filter_facets: Sequence[Any] | None = None
    failed_dimensions: list[str] = field(default_factory=list)

    def facet(self, name: str) -> Facet | None:
        return next((f for f in self.facets if f.name == name), None)

    @property
    def facets_by_name(self) -> dict[str, Facet]:
        return {f.name: f for f in self.facets}

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_dimensions)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "people": [p.to_dict() for p in self.people],
            "facets": [
                {
                    "name": f.name,
                    "displayName": f.display_name,
                    "values": [
                        {"value": v.value, "count": v.count, "isChecked": v.selected}
                        for v in f.values
                    ],
                }
                for f in self.facets
            ],
            "totalCount": self.total_count,
            "startCursor": self.start_cursor,
            "endCursor": self.end_cursor,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "keyword": self.keyword,
            "filterFacets": list(self.filter_facets) if self.filter_facets is not None else None,
            "failedDimensions": list(self.failed_dimensions),
        }
