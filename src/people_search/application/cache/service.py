"""Application cache – CachedPeopleSearchService."""
from __future__ import annotations

import dataclasses

from people_search.application.cache.keys import CacheKey
from people_search.application.cache.store import CacheStore, InMemoryCacheStore
from people_search.application.search.model import SearchResultPage
from people_search.application.search.request import SearchRequest
from people_search.application.search.service import PeopleSearchService
from people_search.observability.logging import get_logger

__all__ = ["CachedPeopleSearchService"]

logger = get_logger(__name__)


def _detach(page: SearchResultPage, request: SearchRequest) -> SearchResultPage:
    """Copy of *page* owning its lists and echoing *request*'s metadata.

    ``filter_facets`` is UI echo-back and not part of the key, so it always
    comes from the caller's own request.
    """
    return dataclasses.replace(
        page,
        facets=list(page.facets),
        failed_dimensions=list(page.failed_dimensions),
        keyword=request.query,
        filter_facets=request.filter_facets,
    )


class CachedPeopleSearchService:
    """Caches complete search pages per request.

    The request's ``cache_key`` is used verbatim when set; otherwise a key is
    derived from the request fields. Partially corrected pages are never
    stored.
    """

    def __init__(
        self,
        service: PeopleSearchService,
        store: CacheStore | None = None,
        ttl: int = 300,
    ) -> None:
        self._service = service
        self._store: CacheStore = store if store is not None else InMemoryCacheStore()
        self._ttl = ttl

    @property
    def service(self) -> PeopleSearchService:
        return self._service

    @staticmethod
    def key_for(request: SearchRequest) -> str:
        return CacheKey.for_request(request)

    async def search(self, request: SearchRequest) -> SearchResultPage:
        key = self.key_for(request)
        cached = await self._store.get(key)
        if cached is not None:
            logger.debug("search.cache_hit", cache_key=key)
            return _detach(cached, request)
        logger.debug("search.cache_miss", cache_key=key)
        page = await self._service.search(request)
        if not page.is_partial:
            await self._store.set(key, _detach(page, request), ttl=self._ttl)
        return page

    async def invalidate(self, request: SearchRequest) -> None:
        await self._store.delete(self.key_for(request))
