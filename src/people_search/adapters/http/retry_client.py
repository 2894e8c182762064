"""HTTP adapter – RetryingHttpClient."""
from __future__ import annotations

from typing import Any

import httpx
import tenacity as ten

from people_search.adapters.http.client import HttpxHttpClient, is_transient
from people_search.resilience.retry import TenacityRetryPolicy


class RetryingHttpClient(HttpxHttpClient):
    """HTTP client with automatic retry on transient failures."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        max_attempts: int = 3,
        wait: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(base_url, timeout, **kwargs)
        self._retry = TenacityRetryPolicy(
            max_attempts=max_attempts,
            wait=wait,
            retry=ten.retry_if_exception(is_transient),
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self._retry.execute_async(
            lambda: super(RetryingHttpClient, self)._request(method, url, **kwargs)
        )


__all__ = ["RetryingHttpClient"]
