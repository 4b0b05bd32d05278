"""Configuration for type_checker (logging only)."""

from type_checker.config.settings import LoggingSettings, Settings, get_settings, reload_settings

__all__ = ["LoggingSettings", "Settings", "get_settings", "reload_settings"]
