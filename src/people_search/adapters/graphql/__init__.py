"""GraphQL adapter – QueryExecutor over a GraphQL search endpoint."""
from people_search.adapters.graphql.executor import API_KEY_HEADER, GraphQLQueryExecutor
from people_search.adapters.graphql.queries import DEFAULT_TEMPLATES, PEOPLE_SEARCH_ADVANCED_QUERY, resolve_template

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_TEMPLATES",
    "GraphQLQueryExecutor",
    "PEOPLE_SEARCH_ADVANCED_QUERY",
    "resolve_template",
]
