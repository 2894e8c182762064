"""Application search – executor variables for a SearchRequest."""
from __future__ import annotations

import uuid
from typing import Any, Sequence

from people_search.application.search.filters import build_field_filters
from people_search.application.search.model import FieldFilter
from people_search.application.search.request import SearchRequest
from people_search.kernel.errors import ValidationError

__all__ = ["PEOPLE_SEARCH_ADVANCED", "build_variables", "canonical_root_id"]

PEOPLE_SEARCH_ADVANCED = "PeopleSearchAdvanced"


def canonical_root_id(root_item_id: str) -> str:
    """Return *root_item_id* as 32 lowercase hex digits without separators."""
    try:
        return uuid.UUID(str(root_item_id)).hex
    except ValueError as exc:
        raise ValidationError.for_field("root_item_id", root_item_id, "must be a GUID") from exc


def build_variables(
    request: SearchRequest,
    filters: Sequence[FieldFilter] | None = None,
) -> dict[str, Any]:
    """Build the variable mapping passed to ``QueryExecutor.execute_search``."""
    if filters is None:
        filters = build_field_filters(request.facets)
    cursor = request.cursor_after
    return {
        "language": request.language,
        "rootItem": canonical_root_id(request.root_item_id),
        "pageSize": request.page_size,
        "cursorValueToGetItemsAfter": str(cursor) if cursor is not None else None,
        "query": request.query,
        "fieldsEqual": [f.to_variable() for f in filters],
        "facetOn": list(request.facet_on),
    }
