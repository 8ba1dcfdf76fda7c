"""Configuration loading for the preferences storage."""

from .settings import StorageSettings, load_settings

__all__ = ["StorageSettings", "load_settings"]
