"""Benchmark: facet count correction fan-out.

Compares:
- ``search_uncorrected`` (baseline: the primary query only)
- ``search`` with two selected dimensions (primary plus two recount queries)
- ``search`` against a backend with 5 ms latency, where the recount queries
  overlap instead of adding up

Run with ``pytest tests/benchmarks/ --benchmark-sort=median``.
"""

from __future__ import annotations

_SELECTION = {"personaward": ["Technology"], "personyear": ["2020", "2021"]}


def test_primary_query_baseline(benchmark, make_service, run):
    service = make_service()
    request = service.create_search_request(facets=_SELECTION)

    page = benchmark(lambda: run(service.search_uncorrected(request)))
    assert page.total_count > 0


def test_corrected_search(benchmark, make_service, run):
    service = make_service()
    request = service.create_search_request(facets=_SELECTION)

    page = benchmark(lambda: run(service.search(request)))
    assert [f.name for f in page.facets] == ["personaward", "personyear"]


def test_corrected_search_with_latency(benchmark, make_service, run):
    """Recount queries run concurrently, so three 5 ms queries cost about two round trips."""
    service = make_service(delay=0.005)
    request = service.create_search_request(facets=_SELECTION)

    page = benchmark.pedantic(lambda: run(service.search(request)), rounds=20, iterations=1)
    assert page.failed_dimensions == []
