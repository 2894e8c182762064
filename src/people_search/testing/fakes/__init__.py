"""Testing fakes – in-memory doubles for the QueryExecutor port."""
from people_search.testing.fakes.directory import ROOT_ITEM_ID, sample_directory
from people_search.testing.fakes.executor import (
    ExecutedQuery,
    FailingQueryExecutor,
    IndexedPerson,
    InMemoryQueryExecutor,
)

__all__ = [
    "ROOT_ITEM_ID",
    "ExecutedQuery",
    "FailingQueryExecutor",
    "IndexedPerson",
    "InMemoryQueryExecutor",
    "sample_directory",
]
