"""Unit tests for the tenacity retry policy."""

from __future__ import annotations

import asyncio

import pytest
import tenacity as ten

from people_search.resilience.retry import TenacityRetryPolicy


class TestTenacityRetryPolicy:
    def test_returns_result_on_first_success(self) -> None:
        calls = 0

        async def fn() -> str:
            nonlocal calls
            calls += 1
            return "ok"

        policy = TenacityRetryPolicy(max_attempts=3, wait=ten.wait_none())
        assert asyncio.run(policy.execute_async(fn)) == "ok"
        assert calls == 1

    def test_retries_until_success(self) -> None:
        calls = 0

        async def fn() -> int:
            nonlocal calls
            calls += 1
            if calls < 3:
                raise IOError("flaky")
            return calls

        policy = TenacityRetryPolicy(max_attempts=3, wait=ten.wait_none())
        assert asyncio.run(policy.execute_async(fn)) == 3

    def test_reraises_original_after_exhaustion(self) -> None:
        calls = 0

        async def fn() -> None:
            nonlocal calls
            calls += 1
            raise IOError("down")

        policy = TenacityRetryPolicy(max_attempts=2, wait=ten.wait_none())
        with pytest.raises(IOError, match="down"):
            asyncio.run(policy.execute_async(fn))
        assert calls == 2

    def test_retry_predicate_stops_on_non_matching_error(self) -> None:
        calls = 0

        async def fn() -> None:
            nonlocal calls
            calls += 1
            raise ValueError("permanent")

        policy = TenacityRetryPolicy(
            max_attempts=5,
            wait=ten.wait_none(),
            retry=ten.retry_if_exception_type(IOError),
        )
        with pytest.raises(ValueError):
            asyncio.run(policy.execute_async(fn))
        assert calls == 1

    def test_max_attempts_property(self) -> None:
        assert TenacityRetryPolicy(max_attempts=4).max_attempts == 4
