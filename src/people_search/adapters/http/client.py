"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from people_search.kernel.errors import BackendExecutionError


def is_transient(exc: BaseException) -> bool:
    """True for timeouts, transport failures and 5xx responses."""
    if not isinstance(exc, BackendExecutionError):
        return False
    if exc.code in ("backend_timeout", "backend_unreachable"):
        return True
    return exc.status_code is not None and exc.status_code >= 500


class HttpxHttpClient:
    """Thin async httpx wrapper that maps failures to :class:`BackendExecutionError`."""

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise BackendExecutionError(
                f"HTTP request timed out: {method} {url}",
                code="backend_timeout",
                cause=exc,
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise BackendExecutionError(
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendExecutionError(
                f"HTTP request failed: {method} {url}: {exc}",
                code="backend_unreachable",
                cause=exc,
            ) from exc


__all__ = ["HttpxHttpClient", "is_transient"]
