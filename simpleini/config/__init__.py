"""Module de configuration."""

from simpleini.config.settings import IniSettings, LoggingSettings
from simpleini.config.loader import (
    SettingsLoader,
    FileSettingsLoader,
    load_settings
)

__all__ = [
    "IniSettings",
    "LoggingSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
]
