"""Application search – facet count correction.

A search constrained by every selected facet value reports, for a facet the
user already filtered on, counts for the selected values only. For each
dimension in ``facet_on`` the corrector re-runs the search with that
dimension's own selection removed (all other selections stay active) and
swaps the recounted facet into the primary result.

The auxiliary queries are independent of each other: they are issued
concurrently and spliced in ``facet_on`` order once all have finished. A
failed auxiliary query skips its own splice only.
"""
from __future__ import annotations

import asyncio
import dataclasses
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Sequence

from people_search.application.search.model import Facet, SearchResultPage
from people_search.application.search.request import SearchRequest
from people_search.kernel.errors import BaseError
from people_search.observability.logging import get_logger

__all__ = ["CorrectionReport", "FacetCountCorrector", "splice_facet"]

logger = get_logger(__name__)

RunQuery = Callable[[SearchRequest, str], Awaitable[SearchResultPage]]


@dataclass
class CorrectionReport:
    page: SearchResultPage
    corrected: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failures: dict[str, BaseError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def _unique_values(facet: Facet) -> Facet:
    seen: set[str] = set()
    values = []
    for value in facet.values:
        if value.value in seen:
            continue
        seen.add(value.value)
        values.append(value)
    if len(values) == len(facet.values):
        return facet
    return dataclasses.replace(facet, values=tuple(values))


def splice_facet(facets: Sequence[Facet], name: str, replacement: Facet | None) -> list[Facet] | None:
    """Remove facet *name* from *facets* and append *replacement*.

    Returns ``None`` when either side lacks the facet, leaving the caller's
    list untouched.
    """
    if replacement is None or all(f.name != name for f in facets):
        return None
    spliced = [f for f in facets if f.name != name]
    spliced.append(_unique_values(replacement))
    return spliced


class FacetCountCorrector:
    """Recounts each requested facet dimension without its own selection.

    *run_query* executes one uncorrected search; its second argument tags the
    query (the dimension name) so backend failures can be attributed.
    """

    def __init__(self, run_query: RunQuery) -> None:
        self._run_query = run_query

    async def _recount(self, request: SearchRequest, dimension: str) -> SearchResultPage:
        return await self._run_query(request.for_facet_correction(dimension), dimension)

    async def correct(self, request: SearchRequest, page: SearchResultPage) -> CorrectionReport:
        dimensions = list(dict.fromkeys(request.facet_on))
        outcomes = await asyncio.gather(
            *(self._recount(request, d) for d in dimensions),
            return_exceptions=True,
        )

        report = CorrectionReport(page=page)
        facets = list(page.facets)
        for dimension, outcome in zip(dimensions, outcomes):
            if isinstance(outcome, BaseError):
                report.failures[dimension] = outcome
                logger.warning(
                    "facet_correction.failed",
                    dimension=dimension,
                    error=outcome.to_dict(),
                )
                continue
            if isinstance(outcome, BaseException):
                raise outcome

            spliced = splice_facet(facets, dimension, outcome.facet(dimension))
            if spliced is None:
                report.skipped.append(dimension)
                logger.debug("facet_correction.missing_facet", dimension=dimension)
                continue
            facets = spliced
            report.corrected.append(dimension)
            logger.debug("facet_correction.spliced", dimension=dimension)

        page.facets = facets
        return report
