"""Resilience – TenacityRetryPolicy adapter."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import tenacity as ten

from people_search.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _log_retry(state: ten.RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome is not None else None
    logger.info(
        "retry.scheduled",
        attempt=state.attempt_number,
        sleep=round(state.next_action.sleep, 3) if state.next_action else 0.0,
        error=repr(exc),
    )


class TenacityRetryPolicy:
    """Re-run an async backend call while *retry* accepts the failure.

    ``max_attempts`` counts the first call. ``wait`` defaults to exponential
    backoff from 100 ms capped at 2 s, which keeps a retried search within a
    typical request timeout. After the last attempt the original exception is
    raised, not tenacity's ``RetryError``. Every scheduled retry is logged as
    ``retry.scheduled``.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        wait: Any = None,
        retry: Any = None,
    ) -> None:
        self._max_attempts = max_attempts
        self._wait = wait or ten.wait_exponential(multiplier=0.1, max=2)
        self._retry = retry or ten.retry_if_exception_type(Exception)

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        retrying = ten.AsyncRetrying(
            stop=ten.stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=self._retry,
            before_sleep=_log_retry,
            reraise=True,
        )
        return await retrying(func)


__all__ = ["TenacityRetryPolicy"]
