"""Application cache – search page caching."""
from people_search.application.cache.keys import CacheKey
from people_search.application.cache.service import CachedPeopleSearchService
from people_search.application.cache.store import CacheStore, InMemoryCacheStore

__all__ = ["CacheKey", "CacheStore", "CachedPeopleSearchService", "InMemoryCacheStore"]
