"""FastAPI adapter – search router, exception mapper and app factory."""
from people_search.adapters.fastapi.app import create_app
from people_search.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from people_search.adapters.fastapi.routers import PeopleSearchRouter, parse_facet_params

__all__ = ["FastAPIExceptionMapper", "PeopleSearchRouter", "create_app", "parse_facet_params"]
