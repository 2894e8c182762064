"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from people_search.kernel.errors import (
    BackendExecutionError,
    BaseError,
    DomainError,
    FacetCorrectionError,
    InfrastructureError,
    MalformedCursorError,
    ValidationError,
)


class FastAPIExceptionMapper:
    """Register error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "backend_execution_error", "message": "...", "detail": {...}}

    Mappings
    --------
    ``ValidationError``        → 400
    ``DomainError``            → 422
    ``FacetCorrectionError``   → 502
    ``BackendExecutionError``  → 502
    ``MalformedCursorError``   → 502
    ``InfrastructureError``    → 503
    """

    def __init__(self) -> None:
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (DomainError, 422),
            (FacetCorrectionError, 502),
            (BackendExecutionError, 502),
            (MalformedCursorError, 502),
            (InfrastructureError, 503),
        ]

    @property
    def mappings(self) -> dict[type[Exception], int]:
        return dict(self._map)

    def register(self, app: FastAPI) -> None:
        """Register all error handlers on a ``FastAPI`` app."""
        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
