"""Application search – per-facet display ordering and labels."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from people_search.application.search.model import Facet, FacetValue

__all__ = ["DEFAULT_FACET_POLICIES", "FacetOrderPolicy", "order_facet", "order_facets", "year_value"]


def year_value(value: str) -> int:
    """Parse a year facet value; anything non-numeric sorts as 0."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class FacetOrderPolicy:
    """Display rule for one facet: descending sort key plus label."""
    display_name: str
    sort_key: Callable[[FacetValue], int]

    def apply(self, facet: Facet) -> Facet:
        return dataclasses.replace(
            facet,
            values=tuple(sorted(facet.values, key=self.sort_key, reverse=True)),
            display_name=self.display_name,
        )


DEFAULT_FACET_POLICIES: Mapping[str, FacetOrderPolicy] = {
    "personaward": FacetOrderPolicy("Type", lambda v: v.count),
    "personyear": FacetOrderPolicy("Year", lambda v: year_value(v.value)),
}


def order_facet(facet: Facet, policies: Mapping[str, FacetOrderPolicy] = DEFAULT_FACET_POLICIES) -> Facet:
    policy = policies.get(facet.name)
    if policy is None:
        return facet
    return policy.apply(facet)


def order_facets(
    facets: Iterable[Facet],
    policies: Mapping[str, FacetOrderPolicy] = DEFAULT_FACET_POLICIES,
) -> list[Facet]:
    return [order_facet(f, policies) for f in facets]
