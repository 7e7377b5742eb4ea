"""Configuration module for Shelfmark."""

from .settings import AppSettings, SettingsValidationError, load_settings

__all__ = [
    "AppSettings",
    "SettingsValidationError",
    "load_settings",
]
