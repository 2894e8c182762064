"""Application-layer errors – raised by the search use case."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from people_search.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from people_search.application.search.model import SearchResultPage


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class FacetCorrectionError(ApplicationError):
    """One or more facet dimensions could not be corrected.

    ``failures`` maps each failed dimension to the error its auxiliary query
    raised. ``partial`` is the result page with every successful correction
    already applied, so callers may still choose to render it.
    """

    default_code = "facet_correction_failed"

    def __init__(
        self,
        failures: dict[str, BaseError],
        partial: "SearchResultPage | None" = None,
        **kwargs: Any,
    ) -> None:
        dimensions = ", ".join(failures)
        super().__init__(
            f"Facet count correction failed for: {dimensions}",
            detail={"dimensions": list(failures)},
            **kwargs,
        )
        self.failures = failures
        self.partial = partial

    @property
    def dimensions(self) -> list[str]:
        return list(self.failures)

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["failures"] = {name: err.to_dict() for name, err in self.failures.items()}
        return base


__all__ = ["ApplicationError", "FacetCorrectionError"]
