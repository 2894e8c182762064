"""Kernel – framework-agnostic building blocks."""

from people_search.kernel.errors import (
    ApplicationError,
    BackendExecutionError,
    BaseError,
    DomainError,
    FacetCorrectionError,
    InfrastructureError,
    MalformedCursorError,
    SerializationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BackendExecutionError",
    "BaseError",
    "DomainError",
    "FacetCorrectionError",
    "InfrastructureError",
    "MalformedCursorError",
    "SerializationError",
    "ValidationError",
]
