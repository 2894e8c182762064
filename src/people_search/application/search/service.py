"""Application search – PeopleSearchService.

Pipeline for one search call::

    build filters -> execute primary query -> assemble page
      -> merge selection -> correct facet counts -> merge selection
      -> order facets
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, Mapping, Sequence

from people_search.application.search.assembler import assemble_result
from people_search.application.search.correction import CorrectionReport, FacetCountCorrector
from people_search.application.search.executor import QueryExecutor
from people_search.application.search.filters import build_field_filters
from people_search.application.search.model import SearchResultPage
from people_search.application.search.ordering import DEFAULT_FACET_POLICIES, FacetOrderPolicy, order_facets
from people_search.application.search.query import PEOPLE_SEARCH_ADVANCED, build_variables
from people_search.application.search.request import DEFAULT_FACET_ON, SearchRequest
from people_search.application.search.selection import merge_selections
from people_search.kernel.errors import PRIMARY_QUERY, BackendExecutionError, FacetCorrectionError
from people_search.observability.logging import get_logger

if TYPE_CHECKING:
    from people_search.config.settings import SearchSettings

__all__ = ["CorrectionFailurePolicy", "PeopleSearchService"]

logger = get_logger(__name__)

CorrectionFailurePolicy = Literal["raise", "partial"]


class PeopleSearchService:
    """Faceted people search over a :class:`QueryExecutor`."""

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        language: str = "en",
        root_item_id: str = "",
        page_size: int | None = None,
        facet_on: Sequence[str] = DEFAULT_FACET_ON,
        template_id: str = PEOPLE_SEARCH_ADVANCED,
        failure_policy: CorrectionFailurePolicy = "raise",
        order_policies: Mapping[str, FacetOrderPolicy] = DEFAULT_FACET_POLICIES,
    ) -> None:
        if failure_policy not in ("raise", "partial"):
            raise ValueError(f"Unknown correction failure policy: {failure_policy!r}")
        self._executor = executor
        self._language = language
        self._root_item_id = root_item_id
        self._page_size = page_size
        self._facet_on = tuple(facet_on)
        self._template_id = template_id
        self._failure_policy = failure_policy
        self._order_policies = order_policies
        self._corrector = FacetCountCorrector(self.search_uncorrected)

    @classmethod
    def from_settings(cls, executor: QueryExecutor, settings: "SearchSettings") -> "PeopleSearchService":
        return cls(
            executor,
            language=settings.language,
            root_item_id=settings.root_item_id,
            page_size=settings.page_size or None,
            facet_on=settings.facet_on,
            failure_policy=settings.correction_failure_policy,  # type: ignore[arg-type]
        )

    def create_search_request(self, **overrides: Any) -> SearchRequest:
        """Return a request pre-filled with this service's defaults."""
        fields: dict[str, Any] = {
            "language": self._language,
            "root_item_id": self._root_item_id,
            "page_size": self._page_size,
            "facet_on": self._facet_on,
        }
        fields.update(overrides)
        return SearchRequest(**fields)

    async def search_uncorrected(self, request: SearchRequest, query: str = PRIMARY_QUERY) -> SearchResultPage:
        """Run one backend query and assemble its page; no merge or correction."""
        variables = build_variables(request, build_field_filters(request.facets))
        try:
            response = await self._executor.execute_search(
                request.is_editing_mode, self._template_id, variables
            )
        except BackendExecutionError as exc:
            if exc.query == query:
                raise
            raise exc.for_query(query) from exc
        return assemble_result(response, request)

    async def search(self, request: SearchRequest) -> SearchResultPage:
        log = logger.bind(query=request.query, facet_on=list(request.facet_on))
        page = await self.search_uncorrected(request)
        log.debug("search.primary", total_count=page.total_count, end_cursor=page.end_cursor)
        page.facets = merge_selections(page.facets, request.facets)

        report = await self._corrector.correct(request, page)
        page.facets = merge_selections(page.facets, request.facets)
        page.facets = order_facets(page.facets, self._order_policies)

        if not report.ok:
            self._handle_failures(report, page)
        log.info(
            "search.completed",
            total_count=page.total_count,
            corrected=report.corrected,
            skipped=report.skipped,
        )
        return page

    def _handle_failures(self, report: CorrectionReport, page: SearchResultPage) -> None:
        page.failed_dimensions = list(report.failures)
        if self._failure_policy == "raise":
            raise FacetCorrectionError(dict(report.failures), partial=page)
        logger.warning("search.partial_correction", failed_dimensions=page.failed_dimensions)

