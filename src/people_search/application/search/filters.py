"""Application search – field filter construction."""
from __future__ import annotations

from typing import Iterable, Mapping

from people_search.application.search.model import FieldFilter
from people_search.application.search.request import selected_values

__all__ = ["STRUCTURAL_FILTERS", "build_field_filters"]

# Restrict every search to published MVP person items.
STRUCTURAL_FILTERS: tuple[FieldFilter, ...] = (
    FieldFilter(name="_templatename", value="Person"),
    FieldFilter(name="ismvp", value="true"),
)


def build_field_filters(
    selection: Mapping[str, str | Iterable[str]] | None,
    structural: Iterable[FieldFilter] = STRUCTURAL_FILTERS,
) -> list[FieldFilter]:
    """Flatten *selection* into one filter per selected value.

    Filters come out in mapping order, then value order, followed by the
    *structural* filters. Duplicates are passed through unchanged.
    """
    filters: list[FieldFilter] = []
    for name, values in (selection or {}).items():
        for value in selected_values(values):
            filters.append(FieldFilter(name=name, value=value))
    filters.extend(structural)
    return filters
