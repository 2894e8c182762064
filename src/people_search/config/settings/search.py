"""Config settings – SearchSettings."""
from __future__ import annotations

import dataclasses
import logging
import uuid
from typing import Any, Sequence

from people_search.application.search.request import DEFAULT_FACET_ON
from people_search.config.settings.base import Settings
from people_search.config.settings.factory import SettingsFactory
from people_search.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from people_search.config.validation.errors import InvalidSettingValueError

__all__ = ["SearchSettings", "load_search_settings"]

_FAILURE_POLICIES = ("raise", "partial")


@dataclasses.dataclass
class SearchSettings(Settings):
    """Settings for the search service, read from ``PEOPLE_SEARCH_*`` variables."""

    _prefix = "PEOPLE_SEARCH"

    graphql_endpoint: str
    root_item_id: str
    graphql_preview_endpoint: str | None = None
    api_key: str = ""
    timeout: float = 10.0
    max_attempts: int = 3
    language: str = "en"
    page_size: int = 10
    facet_on: tuple[str, ...] = DEFAULT_FACET_ON
    correction_failure_policy: str = "raise"
    cache_ttl: int = 300
    cache_max_entries: int = 1024
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.facet_on = tuple(self.facet_on)
        if not self.graphql_endpoint:
            raise InvalidSettingValueError("graphql_endpoint", self.graphql_endpoint, "must not be empty")
        try:
            uuid.UUID(str(self.root_item_id))
        except ValueError as exc:
            raise InvalidSettingValueError("root_item_id", self.root_item_id, "must be a GUID") from exc
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.max_attempts < 1:
            raise InvalidSettingValueError("max_attempts", self.max_attempts, "must be at least 1")
        if self.page_size < 0:
            raise InvalidSettingValueError("page_size", self.page_size, "must not be negative")
        if self.cache_ttl < 0:
            raise InvalidSettingValueError("cache_ttl", self.cache_ttl, "must not be negative")
        if self.cache_max_entries < 1:
            raise InvalidSettingValueError("cache_max_entries", self.cache_max_entries, "must be at least 1")
        if self.correction_failure_policy not in _FAILURE_POLICIES:
            raise InvalidSettingValueError(
                "correction_failure_policy",
                self.correction_failure_policy,
                f"expected one of {', '.join(_FAILURE_POLICIES)}",
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def preview_endpoint(self) -> str:
        return self.graphql_preview_endpoint or self.graphql_endpoint


def load_search_settings(
    env_file: str | None = ".env",
    overrides: dict[str, Any] | None = None,
    loaders: Sequence[SettingsLoader] | None = None,
) -> SearchSettings:
    """Load :class:`SearchSettings` from ``.env`` / the environment plus *overrides*."""
    if loaders is None:
        loaders = [DotenvSettingsLoader(env_file)] if env_file else [EnvSettingsLoader()]
    return SettingsFactory.create(SearchSettings, loaders, overrides)
