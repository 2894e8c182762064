"""Application cache – CacheStore protocol and in-memory TTL implementation."""
from __future__ import annotations

import time
from typing import Any, Callable, Protocol, runtime_checkable

__all__ = ["DEFAULT_MAX_ENTRIES", "CacheStore", "InMemoryCacheStore"]

DEFAULT_MAX_ENTRIES = 1024


@runtime_checkable
class CacheStore(Protocol):
    async def set(self, key: str, value: Any, ttl: int) -> None: ...
    async def get(self, key: str) -> Any: ...
    async def delete(self, key: str) -> None: ...


class InMemoryCacheStore:
    """Process-local, bounded CacheStore.

    Entries expire *ttl* seconds after ``set``. Every ``set`` first drops
    expired entries, then evicts the oldest writes while more than
    *max_entries* remain.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._clock = clock
        self._max_entries = max_entries
        # insertion order doubles as write order for eviction
        self._data: dict[str, tuple[float, Any]] = {}

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def _sweep(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._data.items() if now >= expires_at]
        for key in expired:
            del self._data[key]

    async def set(self, key: str, value: Any, ttl: int = 60) -> None:
        now = self._clock()
        self._sweep(now)
        self._data.pop(key, None)
        self._data[key] = (now + ttl, value)
        while len(self._data) > self._max_entries:
            del self._data[next(iter(self._data))]

    async def get(self, key: str) -> Any:
        entry = self._data.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._data[key]
            return None
        return value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __len__(self) -> int:
        return len(self._data)
