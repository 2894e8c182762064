"""Application cache – cache keys for search pages."""
from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping

from people_search.application.search.request import SearchRequest

__all__ = ["CacheKey"]


class CacheKey:
    """Deterministic cache keys: ``<namespace>:<language>:<digest>``.

    The language stays readable in the key so a whole language can be
    dropped from an external store by prefix.
    """

    NAMESPACE = "people-search"

    @staticmethod
    def digest(fields: Mapping[str, Any]) -> str:
        canonical = json.dumps(fields, sort_keys=True, separators=(",", ":"), default=str)
        return hashlib.sha256(canonical.encode()).hexdigest()[:16]

    @classmethod
    def for_request(cls, request: SearchRequest, namespace: str = NAMESPACE) -> str:
        """The request's own ``cache_key`` when set, otherwise a digest of its fields."""
        if request.cache_key:
            return request.cache_key
        return f"{namespace}:{request.language}:{cls.digest(request.cache_fields())}"
