"""Config settings – 12-factor env-based configuration."""
from people_search.config.settings.base import Settings
from people_search.config.settings.factory import SettingsFactory
from people_search.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from people_search.config.settings.search import SearchSettings, load_search_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SearchSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_search_settings",
]
