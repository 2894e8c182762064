"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from people_search.config.settings.base import Settings
from people_search.config.settings.loaders import SettingsLoader
from people_search.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from people_search.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

logger = get_logger(__name__)


def _default_of(field: dataclasses.Field[Any]) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return field.default_factory()  # type: ignore[misc]
    return dataclasses.MISSING


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; a later loader overrides an earlier one for
    every field it sets to a non-default value. *overrides* (if provided)
    take the highest priority. A loader that raises a :class:`ConfigError`
    is skipped so the remaining loaders may still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~people_search.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered sequence of loaders. Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When an override fails the settings class's validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigError as exc:
                logger.debug("settings.loader_skipped", loader=type(loader).__name__, error=exc.to_dict())
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                value = getattr(instance, field.name)
                if field.name not in merged or value != _default_of(field):
                    merged[field.name] = value

        if overrides:
            merged.update(overrides)

        # Validate all required fields are present before construction.
        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name not in merged and _default_of(field) is dataclasses.MISSING:
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
