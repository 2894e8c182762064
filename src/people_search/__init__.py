"""
people_search – Faceted people search composer.

Import path convention::

    from people_search.application.search import PeopleSearchService, SearchRequest
    from people_search.adapters.graphql import GraphQLQueryExecutor
    from people_search.kernel.errors import BackendExecutionError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
