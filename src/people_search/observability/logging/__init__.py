"""Observability – structlog configuration and helpers."""
from people_search.observability.logging.factory import JsonLoggerFactory
from people_search.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from people_search.observability.logging.processors import get_logger, redaction_processor

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
    "redaction_processor",
]
