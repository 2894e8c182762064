"""Locust load-test: people search traffic mix.

Simulates visitors of a people directory: most requests are keyword or
first-page searches, a smaller share drills into facets (each facet
selection triggers the recount queries) and pages through results.

Run with::

    pip install -e ".[load]"
    locust -f docs/examples/locustfile.py --host=http://localhost:8000

Endpoints assumed
-----------------
GET /people/search    : ``q``, ``page_size``, ``after``, repeated ``facet=name:value``

Metrics to watch
----------------
- p50, p95, p99 latency for faceted vs. unfaceted searches
- Requests/second (RPS) at target concurrency
- Share of 502 responses (failed facet corrections)
"""

from __future__ import annotations

import random

from locust import HttpUser, between, task

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

KEYWORDS = ["", "jane", "john", "data", "cloud", "azure", "dev"]
AWARDS = ["Technology", "Development", "Community", "Business"]
YEARS = [str(year) for year in range(2015, 2025)]
PAGE_SIZE = 10


class PeopleSearchUser(HttpUser):
    """Browses the directory with a think time between 0.5 and 2 seconds."""

    wait_time = between(0.5, 2)

    @task(5)
    def keyword_search(self) -> None:
        params = {"page_size": PAGE_SIZE}
        keyword = random.choice(KEYWORDS)
        if keyword:
            params["q"] = keyword
        self.client.get("/people/search", params=params, name="/people/search [keyword]")

    @task(3)
    def faceted_search(self) -> None:
        facets = [f"personaward:{random.choice(AWARDS)}"]
        if random.random() < 0.5:
            facets.extend(f"personyear:{year}" for year in random.sample(YEARS, 2))
        self.client.get(
            "/people/search",
            params={"page_size": PAGE_SIZE, "facet": facets},
            name="/people/search [faceted]",
        )

    @task(2)
    def page_through(self) -> None:
        after = 0
        for _ in range(3):
            with self.client.get(
                "/people/search",
                params={"page_size": PAGE_SIZE, "after": after},
                name="/people/search [paged]",
                catch_response=True,
            ) as response:
                if response.status_code != 200:
                    response.failure(f"status {response.status_code}")
                    return
                body = response.json()
                if not body["hasNextPage"]:
                    return
                after = body["endCursor"]
