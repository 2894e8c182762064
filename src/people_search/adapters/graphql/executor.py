"""GraphQL adapter – GraphQLQueryExecutor.

Implements the :class:`~people_search.application.search.QueryExecutor` port
against a GraphQL search endpoint. Editing mode targets the preview
endpoint, everything else the delivery endpoint.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from people_search.adapters.graphql.queries import DEFAULT_TEMPLATES, resolve_template
from people_search.adapters.http import HttpxHttpClient, RetryingHttpClient
from people_search.application.search.executor import RawSearchResponse, parse_search_response
from people_search.kernel.errors import BackendExecutionError
from people_search.observability.logging import get_logger

if TYPE_CHECKING:
    from people_search.config.settings import SearchSettings

__all__ = ["API_KEY_HEADER", "GraphQLQueryExecutor"]

API_KEY_HEADER = "sc_apikey"

logger = get_logger(__name__)


class GraphQLQueryExecutor:
    """Posts ``{"query", "variables"}`` documents and parses the ``search`` block."""

    def __init__(
        self,
        endpoint: str,
        *,
        preview_endpoint: str | None = None,
        api_key: str = "",
        http_client: HttpxHttpClient | None = None,
        timeout: float = 10.0,
        max_attempts: int = 3,
        templates: Mapping[str, str] = DEFAULT_TEMPLATES,
    ) -> None:
        self._endpoint = endpoint
        self._preview_endpoint = preview_endpoint or endpoint
        self._api_key = api_key
        self._http = http_client or RetryingHttpClient(timeout=timeout, max_attempts=max_attempts)
        self._templates = templates

    @classmethod
    def from_settings(cls, settings: "SearchSettings") -> "GraphQLQueryExecutor":
        return cls(
            settings.graphql_endpoint,
            preview_endpoint=settings.preview_endpoint,
            api_key=settings.api_key,
            timeout=settings.timeout,
            max_attempts=settings.max_attempts,
        )

    async def __aenter__(self) -> "GraphQLQueryExecutor":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def endpoint_for(self, editing_mode: bool) -> str:
        return self._preview_endpoint if editing_mode else self._endpoint

    async def execute_search(
        self,
        editing_mode: bool,
        template_id: str,
        variables: Mapping[str, Any],
    ) -> RawSearchResponse:
        document = {"query": resolve_template(template_id, self._templates), "variables": dict(variables)}
        headers = {API_KEY_HEADER: self._api_key} if self._api_key else {}
        url = self.endpoint_for(editing_mode)

        try:
            response = await self._http.post(url, json=document, headers=headers)
        except BackendExecutionError as exc:
            logger.warning("graphql.request_failed", url=url, template=template_id, error=exc.to_dict())
            raise

        try:
            body = response.json()
        except ValueError as exc:
            raise BackendExecutionError(
                f"Response from {url} is not JSON",
                code="unexpected_response",
                status_code=response.status_code,
                cause=exc,
            ) from exc

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
            logger.warning("graphql.errors", url=url, template=template_id, errors=messages)
            raise BackendExecutionError(
                f"GraphQL errors: {'; '.join(messages)}",
                code="graphql_error",
                detail={"errors": messages},
            )

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise BackendExecutionError(f"Response from {url} has no data", code="unexpected_response")
        return parse_search_response(data)
