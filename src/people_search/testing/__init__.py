"""Testing support – in-memory backend doubles.

Use in tests::

    from people_search.testing.fakes import InMemoryQueryExecutor, sample_directory
"""

from people_search.testing.fakes import (
    ROOT_ITEM_ID,
    FailingQueryExecutor,
    IndexedPerson,
    InMemoryQueryExecutor,
    sample_directory,
)

__all__ = ["ROOT_ITEM_ID", "FailingQueryExecutor", "IndexedPerson", "InMemoryQueryExecutor", "sample_directory"]
