"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── FacetCorrectionError
    └── InfrastructureError      (infrastructure.py)
        ├── BackendExecutionError
        └── SerializationError
            └── MalformedCursorError
"""

from people_search.kernel.errors.application import ApplicationError, FacetCorrectionError
from people_search.kernel.errors.base import BaseError
from people_search.kernel.errors.domain import DomainError, ValidationError
from people_search.kernel.errors.infrastructure import (
    PRIMARY_QUERY,
    BackendExecutionError,
    InfrastructureError,
    MalformedCursorError,
    SerializationError,
)

__all__ = [
    "PRIMARY_QUERY",
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
