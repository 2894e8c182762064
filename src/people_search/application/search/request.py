"""Application search – SearchRequest value object."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

__all__ = ["DEFAULT_FACET_ON", "SearchRequest", "copy_selection", "selected_values"]

DEFAULT_FACET_ON: tuple[str, ...] = ("personaward", "personyear")


def selected_values(values: str | Iterable[str] | None) -> tuple[str, ...]:
    """Values of one selection entry; a bare string is a single value."""
    if isinstance(values, str):
        return (values,)
    return tuple(values or ())


def copy_selection(selection: Mapping[str, str | Iterable[str]] | None) -> dict[str, tuple[str, ...]]:
    """Structural copy of a selection mapping; value order is preserved."""
    if not selection:
        return {}
    return {name: selected_values(values) for name, values in selection.items()}


@dataclass(frozen=True)
class SearchRequest:
    """Immutable search parameters.

    ``facets`` maps a facet name to the values the user selected on it.
    ``facet_on`` lists the dimensions the backend should aggregate.
    ``page_size`` of ``None`` or ``0`` means unpaged.
    """

    language: str
    root_item_id: str
    query: str | None = None
    page_size: int | None = None
    cursor_after: int | None = None
    facets: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    facet_on: tuple[str, ...] = DEFAULT_FACET_ON
    filter_facets: Sequence[Any] | None = None
    is_editing_mode: bool = False
    cache_key: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "facets", copy_selection(self.facets))
        object.__setattr__(self, "facet_on", tuple(self.facet_on))

    @property
    def is_paged(self) -> bool:
        return bool(self.page_size)

    def selected(self, facet_name: str) -> tuple[str, ...]:
        return self.facets.get(facet_name, ())

    def without_facet(self, facet_name: str) -> "SearchRequest":
        """Return a copy whose selection drops *facet_name*."""
        facets = {k: v for k, v in copy_selection(self.facets).items() if k != facet_name}
        return dataclasses.replace(self, facets=facets)

    def for_facet_correction(self, facet_name: str) -> "SearchRequest":
        """Derive the auxiliary request that recounts *facet_name*.

        Only facet aggregates are needed, so the page is pinned to a single
        item from the start of the result set.
        """
        return dataclasses.replace(
            self.without_facet(facet_name),
            page_size=1,
            cursor_after=0,
        )

    def cache_fields(self) -> dict[str, Any]:
        """Fields that identify the request's result, for cache key derivation."""
        return {
            "language": self.language,
            "root_item_id": self.root_item_id,
            "query": self.query,
            "page_size": self.page_size,
            "cursor_after": self.cursor_after,
            "facets": {k: sorted(v) for k, v in sorted(self.facets.items())},
            "facet_on": list(self.facet_on),
            "is_editing_mode": self.is_editing_mode,
        }
