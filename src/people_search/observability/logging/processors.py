"""Observability – structlog processors and the get_logger helper."""
from __future__ import annotations

from typing import Any, Callable

import structlog

from people_search.observability.logging.filters import SensitiveFieldsFilter

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]


def redaction_processor(sensitive_fields: frozenset[str] | None = None) -> Processor:
    """Processor masking sensitive keys anywhere in the event dict."""
    _filter = SensitiveFieldsFilter(sensitive_fields)

    def redact(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
        return _filter.redact_deep(event_dict)

    return redact


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger for *name* (usually ``__name__``), with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["Processor", "get_logger", "redaction_processor"]
