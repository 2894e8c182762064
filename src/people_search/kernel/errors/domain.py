"""Domain errors – search input that cannot be turned into a query."""

from __future__ import annotations

from typing import Any

from people_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A search rule was violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Search input was rejected.

    ``errors`` lists one ``{"field", "value", ...}`` entry per rejected input,
    e.g. every malformed ``facet`` query parameter of a request.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: object, reason: str) -> "ValidationError":
        """Single-field rejection, e.g. ``for_field("root_item_id", raw, "must be a GUID")``."""
        return cls(
            f"Invalid {field} {value!r}: {reason}",
            errors=[{"field": field, "value": value, "reason": reason}],
        )

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
