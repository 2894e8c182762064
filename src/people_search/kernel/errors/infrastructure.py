"""Infrastructure errors – backend I/O failures and payload problems."""

from __future__ import annotations

from typing import Any

from people_search.kernel.errors.base import BaseError

PRIMARY_QUERY = "primary"


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class BackendExecutionError(InfrastructureError):
    """The query backend failed to execute a search.

    ``query`` names the query the failure belongs to: ``"primary"`` for the
    main search or the facet dimension of an auxiliary correction query.
    """

    default_code = "backend_execution_error"

    def __init__(
        self,
        message: str,
        *,
        query: str = PRIMARY_QUERY,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.query = query
        self.status_code = status_code
        self.detail.setdefault("query", query)
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)

    @property
    def dimension(self) -> str | None:
        """Facet dimension of the failed auxiliary query, ``None`` for the primary query."""
        return None if self.query == PRIMARY_QUERY else self.query

    def for_query(self, query: str) -> "BackendExecutionError":
        """Return a copy of this error tagged with *query*."""
        return BackendExecutionError(
            self.message,
            query=query,
            status_code=self.status_code,
            code=self.code,
            detail={k: v for k, v in self.detail.items() if k != "query"},
            cause=self.cause,
        )


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class MalformedCursorError(SerializationError):
    """A pagination cursor returned by the backend is not an integer."""

    default_code = "malformed_cursor"

    def __init__(self, field: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Cursor '{field}' is not numeric: {value!r}",
            payload_type="pageInfo",
            detail={"field": field, "value": value},
            **kwargs,
        )
        self.field = field
        self.value = value


__all__ = [
    "PRIMARY_QUERY",
    "BackendExecutionError",
    "InfrastructureError",
    "MalformedCursorError",
    "SerializationError",
]
