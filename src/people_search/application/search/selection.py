"""Application search – mark selected facet values."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping

from people_search.application.search.model import Facet

__all__ = ["merge_selection", "merge_selections"]


def merge_selection(facet: Facet, selection: Mapping[str, Iterable[str]] | None) -> Facet:
    """Return *facet* with ``selected`` set from *selection*.

    Only a facet whose name has a non-empty entry in *selection* is touched;
    any other facet is returned unchanged. Idempotent.
    """
    chosen = set((selection or {}).get(facet.name) or ())
    if not chosen:
        return facet
    return dataclasses.replace(
        facet,
        values=tuple(dataclasses.replace(v, selected=v.value in chosen) for v in facet.values),
    )


def merge_selections(facets: Iterable[Facet], selection: Mapping[str, Iterable[str]] | None) -> list[Facet]:
    return [merge_selection(f, selection) for f in facets]
