"""Application – search use case and response caching (framework-agnostic)."""

from people_search.application.cache import CachedPeopleSearchService, CacheKey, InMemoryCacheStore
from people_search.application.search import PeopleSearchService, SearchRequest, SearchResultPage

__all__ = [
    "CacheKey",
    "CachedPeopleSearchService",
    "InMemoryCacheStore",
    "PeopleSearchService",
    "SearchRequest",
    "SearchResultPage",
]
