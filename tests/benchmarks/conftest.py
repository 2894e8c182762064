"""Fixtures for the search benchmarks.

``run`` drives coroutines on one ``asyncio.Runner`` for the whole session,
so loop start-up is not part of any measured round. ``make_service`` builds
a :class:`PeopleSearchService` over a seeded in-memory directory of a few
hundred people.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from people_search.application.search import PeopleSearchService
from people_search.testing.fakes import ROOT_ITEM_ID, IndexedPerson, InMemoryQueryExecutor, sample_directory

AWARDS = ("Technology", "Development", "Community", "Business")
DIRECTORY_SIZE = 500


@pytest.fixture(scope="session")
def directory() -> list[IndexedPerson]:
    people = list(sample_directory())
    for i in range(DIRECTORY_SIZE):
        people.append(
            IndexedPerson.of(
                f"First{i}",
                f"Last{i}",
                personaward=AWARDS[i % len(AWARDS)],
                personyear=[str(2015 + i % 8), str(2016 + i % 8)],
            )
        )
    return people


@pytest.fixture
def make_service(directory: list[IndexedPerson]) -> Callable[..., PeopleSearchService]:
    def _make(delay: float = 0.0, **kwargs: Any) -> PeopleSearchService:
        executor = InMemoryQueryExecutor(directory, delay=delay)
        return PeopleSearchService(executor, root_item_id=ROOT_ITEM_ID, page_size=10, **kwargs)

    return _make


@pytest.fixture(scope="session")
def run():
    with asyncio.Runner() as runner:
        yield runner.run
