"""FastAPI adapter – application factory."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from people_search.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from people_search.adapters.fastapi.routers import PeopleSearchRouter
from people_search.adapters.graphql import GraphQLQueryExecutor
from people_search.application.cache import CachedPeopleSearchService, InMemoryCacheStore
from people_search.application.search import PeopleSearchService, QueryExecutor
from people_search.config.settings import SearchSettings, load_search_settings
from people_search.observability.logging import JsonLoggerFactory


def create_app(
    settings: SearchSettings | None = None,
    executor: QueryExecutor | None = None,
) -> FastAPI:
    """Wire settings, executor, service, cache and routes into a FastAPI app."""
    settings = settings or load_search_settings()
    JsonLoggerFactory.configure(level=settings.log_level)
    executor = executor or GraphQLQueryExecutor.from_settings(settings)
    service = PeopleSearchService.from_settings(executor, settings)
    searcher: PeopleSearchService | CachedPeopleSearchService = service
    if settings.cache_ttl:
        store = InMemoryCacheStore(max_entries=settings.cache_max_entries)
        searcher = CachedPeopleSearchService(service, store=store, ttl=settings.cache_ttl)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        yield
        aclose = getattr(executor, "aclose", None)
        if aclose is not None:
            await aclose()

    app = FastAPI(title="people-search", lifespan=lifespan)
    app.state.settings = settings
    app.state.search_service = service
    FastAPIExceptionMapper().register(app)
    app.include_router(PeopleSearchRouter(searcher, service.create_search_request))
    return app


__all__ = ["create_app"]
